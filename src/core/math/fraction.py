"""
Fraction — Точная рациональная арифметика

Модуль обеспечивает рациональные числа без ошибок округления float:
- Каноническая форма на каждом создании и после каждой операции
- Арифметика через именованные методы (add/subtract/multiply/divide)
- Полный порядок, согласованный с рациональным значением
- Текстовая форма "0" / "n" / "n/d" и разбор цепочек "a/b/c"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1 (ноль хранится как 0/1)
3. numerator и denominator помещаются в знаковое 64-битное целое
4. Деление на ноль и reverse() нуля → ZeroDivisionError (никогда не перехватывается)
"""

import re
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Диапазон знакового 64-битного целого
I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1

# Разделитель числителя и знаменателей в текстовой форме
FRACTION_SEPARATOR: Final[str] = "/"

# Допустимый целочисленный токен (после trim)
_INT_TOKEN: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")


# =============================================================================
# HELPERS
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель двух неотрицательных целых (алгоритм Евклида).

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(5, 0)
        5
        >>> gcd(0, 0)
        0
    """
    a, b = max(a, b), min(a, b)
    while b != 0:
        a, b = b, a % b
    return a


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_int(token: str, text: str) -> int:
    token = token.strip()
    if not _INT_TOKEN.fullmatch(token):
        raise ValueError(f"Malformed integer {token!r} in fraction text {text!r}")
    return int(token)


def _canonicalize(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение пары (numerator, denominator) к канонической форме.

    Raises:
        ZeroDivisionError: Если denominator == 0 (вырожденная дробь)
        OverflowError: Если результат не помещается в i64
    """
    if denominator == 0:
        raise ZeroDivisionError(f"Fraction denominator is zero: {numerator}/0")

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    g = gcd(abs(numerator), denominator)
    numerator //= g
    denominator //= g

    if not (I64_MIN <= numerator <= I64_MAX) or denominator > I64_MAX:
        raise OverflowError(f"Fraction {numerator}/{denominator} is out of 64-bit range")

    return numerator, denominator


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Точное рациональное число в канонической форме.

    Immutable модель (frozen=True): операции всегда возвращают новый экземпляр.
    Любой входной payload (dict, int, str) канонизируется до создания модели,
    поэтому равенство полей совпадает с равенством значений.
    """

    numerator: int = Field(..., strict=True, description="Числитель (несёт знак дроби)")
    denominator: int = Field(
        ..., strict=True, gt=0, description="Знаменатель (всегда положительный)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def canonical_form(cls, data: Any) -> Any:
        """
        Канонизация входных данных до валидации полей.

        Принимает dict с numerator/denominator, int или текстовую форму.
        """
        if isinstance(data, bool):
            raise ValueError(f"Fraction cannot be built from bool: {data!r}")
        if isinstance(data, int):
            data = {"numerator": data, "denominator": 1}
        elif isinstance(data, str):
            parsed = cls.from_str(data)
            data = {"numerator": parsed.numerator, "denominator": parsed.denominator}

        if isinstance(data, dict):
            numerator = data.get("numerator")
            denominator = data.get("denominator", 1)
            # Не-целые поля отклоняются strict-валидацией полей
            if _is_plain_int(numerator) and _is_plain_int(denominator):
                numerator, denominator = _canonicalize(numerator, denominator)
                data = {**data, "numerator": numerator, "denominator": denominator}
        return data

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, numerator: int, denominator: int = 1) -> "Fraction":
        """
        Создание дроби numerator/denominator в канонической форме.

        Raises:
            ZeroDivisionError: Если denominator == 0
            OverflowError: Если результат выходит за диапазон i64
        """
        return cls(numerator=numerator, denominator=denominator)

    @classmethod
    def from_int(cls, value: int) -> "Fraction":
        """Целое value как дробь value/1."""
        return cls.new(value, 1)

    @classmethod
    def from_str(cls, text: str) -> "Fraction":
        """
        Разбор текстовой формы дроби.

        Текст делится по "/": первый токен задаёт value/1, каждый следующий
        токен задаёт делитель, применяемый слева направо. Так "6/2/3" = ((6/1)/2)/3.
        Пустая строка (или только пробелы) → ноль.

        Args:
            text: Текстовая форма, например "-1/2", " 3 ", "6/2/3"

        Returns:
            Каноническая дробь

        Raises:
            ValueError: Если токен не является целым числом
            ZeroDivisionError: Если один из делителей равен нулю

        Examples:
            >>> str(Fraction.from_str("-1 / 2"))
            '-1/2'
            >>> str(Fraction.from_str("6/2/3"))
            '1'
        """
        stripped = text.strip()
        if not stripped:
            return ZERO

        tokens = [_parse_int(token, text) for token in stripped.split(FRACTION_SEPARATOR)]

        result = cls.from_int(tokens[0])
        for divisor in tokens[1:]:
            result = result.divide(cls.from_int(divisor))
        return result

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_int(self) -> bool:
        return self.denominator == 1

    def is_positive(self) -> bool:
        return self.numerator > 0

    def is_negative(self) -> bool:
        return self.numerator < 0

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def opposite(self) -> "Fraction":
        """Противоположная дробь -self."""
        return Fraction.new(-self.numerator, self.denominator)

    def reverse(self) -> "Fraction":
        """
        Обратная дробь 1/self.

        Raises:
            ZeroDivisionError: Для нуля (обратное к нулю не определено)
        """
        if self.is_zero():
            raise ZeroDivisionError("Cannot reverse the zero fraction")
        return Fraction.new(self.denominator, self.numerator)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Fraction") -> "Fraction":
        return Fraction.new(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: "Fraction") -> "Fraction":
        return self.add(other.opposite())

    def multiply(self, other: "Fraction") -> "Fraction":
        return Fraction.new(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: "Fraction") -> "Fraction":
        """
        Деление self / other = self * other.reverse().

        Raises:
            ZeroDivisionError: Если other равен нулю
        """
        return self.multiply(other.reverse())

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "Fraction") -> int:
        """
        Сравнение по знаку разности self - other.

        Returns:
            1 если self > other, -1 если self < other, 0 если равны
        """
        diff = self.subtract(other)
        if diff.is_positive():
            return 1
        if diff.is_negative():
            return -1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) >= 0

    # Операторы: тонкие алиасы именованных методов
    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
    __neg__ = opposite

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        if self.is_int():
            return str(self.numerator)
        return f"{self.numerator}{FRACTION_SEPARATOR}{self.denominator}"


# =============================================================================
# ОБЩИЕ КОНСТАНТЫ
# =============================================================================

ZERO: Final[Fraction] = Fraction.new(0, 1)
ONE: Final[Fraction] = Fraction.new(1, 1)
