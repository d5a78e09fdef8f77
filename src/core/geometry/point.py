"""
Point & Vector — Точные 2D позиции и смещения

Модуль описывает позицию (Point) и смещение (Vector) с координатами Fraction.

Система координат экранная:
- x растёт вправо
- y растёт вниз (меньший y означает "выше")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все направленные предикаты строгие: при равенстве координат → False
2. more_left/more_up/more_right/more_down при равенстве возвращают self
   (на этом приоритете левого операнда построена нормализация Rectangle)
3. Vector immutable; Point меняется только через add(vector)
"""

from typing import Final, Union

from pydantic import BaseModel, Field

from src.core.math.fraction import ZERO, Fraction

# =============================================================================
# КОНСТАНТЫ ТЕКСТОВОГО ФОРМАТА
# =============================================================================

# Символы, срезаемые с обоих концов при разборе вектора
VECTOR_TRIM_CHARS: Final[str] = "v()"

# Разделитель компонент
COMPONENT_SEPARATOR: Final[str] = ","

# Входные значения координат, приводимые к Fraction
Coordinate = Union[Fraction, int, str]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class GeometryParseError(ValueError):
    """
    Нарушение структуры текстовой формы геометрического объекта.

    Например, вектор без двух компонент или прямоугольник не из четырёх точек.
    Ошибки в самих целых числах остаются обычным ValueError из Fraction.
    """

    pass


# =============================================================================
# VECTOR
# =============================================================================


class Vector(BaseModel):
    """
    Смещение (dx, dy) с точными компонентами.

    Immutable модель (frozen=True).
    """

    dx: Fraction = Field(default=ZERO, description="Смещение по x (вправо)")
    dy: Fraction = Field(default=ZERO, description="Смещение по y (вниз)")

    model_config = {"frozen": True}

    @classmethod
    def new(cls, dx: Coordinate, dy: Coordinate) -> "Vector":
        return cls(dx=dx, dy=dy)

    @classmethod
    def from_str(cls, text: str) -> "Vector":
        """
        Разбор текстовой формы "v(dx,dy)".

        С обоих концов срезаются символы 'v', '(' и ')', остаток делится
        по запятой, каждая часть разбирается как Fraction.

        Raises:
            GeometryParseError: Если компонент не ровно две
            ValueError: Если компонента не является корректной дробью
        """
        parts = text.strip().strip(VECTOR_TRIM_CHARS).split(COMPONENT_SEPARATOR)
        if len(parts) != 2:
            raise GeometryParseError(
                f"Expected 2 components in vector text {text!r}, got {len(parts)}"
            )
        return cls(dx=Fraction.from_str(parts[0]), dy=Fraction.from_str(parts[1]))

    def opposite(self) -> "Vector":
        """Обратное смещение."""
        return Vector(dx=self.dx.opposite(), dy=self.dy.opposite())

    def __str__(self) -> str:
        return f"v({self.dx},{self.dy})"


# =============================================================================
# POINT
# =============================================================================


class Point(BaseModel):
    """
    Позиция (x, y) с точными координатами.

    Point() задаёт начало координат (0, 0). Модель изменяемая, единственная
    мутация выполняется переносом на вектор через add().
    """

    x: Fraction = Field(default=ZERO, description="Координата x (вправо)")
    y: Fraction = Field(default=ZERO, description="Координата y (вниз)")

    @classmethod
    def new(cls, x: Coordinate, y: Coordinate) -> "Point":
        return cls(x=x, y=y)

    @classmethod
    def from_str(cls, text: str) -> "Point":
        """
        Разбор точки из текста.

        Текст разбирается как вектор и прикладывается к началу координат,
        поэтому принимаются "dx,dy", "(x,y)" и "v(dx,dy)".

        Raises:
            GeometryParseError: Если компонент не ровно две
            ValueError: Если координата не является корректной дробью
        """
        point = cls()
        point.add(Vector.from_str(text))
        return point

    # -------------------------------------------------------------------------
    # Направленные предикаты (строгие)
    # -------------------------------------------------------------------------

    def is_left_of(self, other: "Point") -> bool:
        return self.x < other.x

    def is_up_of(self, other: "Point") -> bool:
        return self.y < other.y

    def is_right_of(self, other: "Point") -> bool:
        return other.x < self.x

    def is_down_of(self, other: "Point") -> bool:
        return other.y < self.y

    def is_horizontal_with(self, other: "Point") -> bool:
        return self.y == other.y

    def is_vertical_with(self, other: "Point") -> bool:
        return self.x == other.x

    # -------------------------------------------------------------------------
    # Выбор крайней точки (при равенстве возвращается self)
    # -------------------------------------------------------------------------

    def more_left(self, other: "Point") -> "Point":
        return other if other.is_left_of(self) else self

    def more_up(self, other: "Point") -> "Point":
        return other if other.is_up_of(self) else self

    def more_right(self, other: "Point") -> "Point":
        return other if other.is_right_of(self) else self

    def more_down(self, other: "Point") -> "Point":
        return other if other.is_down_of(self) else self

    # -------------------------------------------------------------------------
    # Перенос
    # -------------------------------------------------------------------------

    def add(self, vector: Vector) -> None:
        """Перенос точки на vector (in-place)."""
        self.x = self.x.add(vector.dx)
        self.y = self.y.add(vector.dy)

    def translated(self, vector: Vector) -> "Point":
        """Новая точка, перенесённая на vector; self не меняется."""
        return Point(x=self.x.add(vector.dx), y=self.y.add(vector.dy))

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
