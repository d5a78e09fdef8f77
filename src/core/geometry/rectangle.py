"""
Rectangle — Осе-ориентированный прямоугольник на точных координатах

Модуль отвечает за:
- Нормализацию четырёх углов из произвольно упорядоченных точек
- Построение по диагонали (две точки или точка + вектор)
- Накопление bounding box (fix_point)
- Проверку принадлежности точки (границы включительно)
- Проверку столкновения двух прямоугольников (AABB, касание = столкновение)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. left_up.x == left_down.x  (минимальный x)
2. right_up.x == right_down.x (максимальный x)
3. left_up.y == right_up.y   (минимальный y, верх)
4. left_down.y == right_down.y (максимальный y, низ)
5. Прямоугольник владеет своими точками: входные точки копируются

Допускаются вырожденные прямоугольники (нулевая ширина и/или высота).
"""

import logging
from typing import Final

from pydantic import BaseModel, Field, model_validator

from src.core.geometry.point import GeometryParseError, Point, Vector
from src.core.math.fraction import Fraction

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ ТЕКСТОВОГО ФОРМАТА
# =============================================================================

# Скобки, окружающие список углов
RECTANGLE_BRACKETS: Final[str] = "[]"

# Разделитель между текстами соседних точек
RECTANGLE_POINT_SEPARATOR: Final[str] = "),("

# Количество углов
CORNER_COUNT: Final[int] = 4


# =============================================================================
# RECTANGLE MODEL
# =============================================================================


class Rectangle(BaseModel):
    """
    Осе-ориентированный прямоугольник, заданный четырьмя углами.

    Изменяемая модель. Единственная мутация fix_point() расширяет
    прямоугольник до минимального охватывающего точку.
    """

    left_up: Point = Field(default_factory=Point, description="Левый верхний угол")
    right_up: Point = Field(default_factory=Point, description="Правый верхний угол")
    right_down: Point = Field(default_factory=Point, description="Правый нижний угол")
    left_down: Point = Field(default_factory=Point, description="Левый нижний угол")

    @model_validator(mode="after")
    def validate_axis_aligned(self) -> "Rectangle":
        """Проверка согласованности четырёх углов."""
        aligned = (
            self.left_up.is_vertical_with(self.left_down)
            and self.right_up.is_vertical_with(self.right_down)
            and self.left_up.is_horizontal_with(self.right_up)
            and self.left_down.is_horizontal_with(self.right_down)
        )
        if not aligned:
            raise ValueError(f"Corners do not form an axis-aligned rectangle: {self}")

        if self.right_up.is_left_of(self.left_up) or self.left_down.is_up_of(self.left_up):
            raise ValueError(f"Corners are not ordered left-to-right, top-to-bottom: {self}")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, p1: Point, p2: Point, p3: Point, p4: Point) -> "Rectangle":
        """
        Восстановление канонических углов из четырёх точек.

        (p1, p2) образуют одну пару-кандидат, (p3, p4) другую. Порядок внутри пар
        и порядок самих пар не важен, если точки образуют прямоугольник.

        Алгоритм:
        1. В каждой паре выбираются левая и правая точки
        2. Если левые точки пар на одной вертикали, пары уже являются
           горизонтальными рёбрами (или диагоналями), углы берутся по высоте
        3. Если каждая пара лежит на своей вертикали, пары являются вертикальными
           рёбрами: верх и низ выбираются внутри каждой пары
        4. Иначе пара с более левой точкой образует левую группу, другая правую

        Raises:
            pydantic.ValidationError: Если точки не образуют прямоугольник
        """
        left_1, right_1 = p1.more_left(p2), p1.more_right(p2)
        left_2, right_2 = p3.more_left(p4), p3.more_right(p4)

        if left_1.is_vertical_with(left_2):
            corners = (
                left_1.more_up(left_2),
                right_1.more_up(right_2),
                right_1.more_down(right_2),
                left_1.more_down(left_2),
            )
        elif left_1.is_vertical_with(right_1) and left_2.is_vertical_with(right_2):
            # left и right внутри такой пары совпадают, поэтому берутся исходные точки
            if left_1.is_left_of(left_2):
                (l1, l2), (r1, r2) = (p1, p2), (p3, p4)
            else:
                (l1, l2), (r1, r2) = (p3, p4), (p1, p2)
            corners = (
                l1.more_up(l2),
                r1.more_up(r2),
                r1.more_down(r2),
                l1.more_down(l2),
            )
        elif left_1.is_left_of(left_2):
            corners = (
                left_1.more_up(right_1),
                left_2.more_up(right_2),
                left_2.more_down(right_2),
                left_1.more_down(right_1),
            )
        else:
            corners = (
                left_2.more_up(right_2),
                left_1.more_up(right_1),
                left_1.more_down(right_1),
                left_2.more_down(right_2),
            )

        left_up, right_up, right_down, left_down = (p.model_copy() for p in corners)
        return cls(
            left_up=left_up,
            right_up=right_up,
            right_down=right_down,
            left_down=left_down,
        )

    @classmethod
    def with_diagonal_point(cls, start: Point, end: Point) -> "Rectangle":
        """Прямоугольник по двум противоположным углам."""
        return cls.new(
            start,
            Point(x=end.x, y=start.y),
            end,
            Point(x=start.x, y=end.y),
        )

    @classmethod
    def with_diagonal(cls, start: Point, vector: Vector) -> "Rectangle":
        """Прямоугольник по углу start и диагональному вектору; start не меняется."""
        return cls.with_diagonal_point(start, start.translated(vector))

    @classmethod
    def from_str(cls, text: str) -> "Rectangle":
        """
        Разбор текстовой формы "[(x,y),(x,y),(x,y),(x,y)]".

        Пробелы удаляются, внешние скобки срезаются, текст делится по "),("
        ровно на четыре точки; углы нормализуются через new().

        Raises:
            GeometryParseError: Если точек не ровно четыре
            ValueError: Если координата не является корректной дробью
        """
        compact = "".join(text.split())
        groups = compact.strip(RECTANGLE_BRACKETS).split(RECTANGLE_POINT_SEPARATOR)
        if len(groups) != CORNER_COUNT:
            raise GeometryParseError(
                f"Expected {CORNER_COUNT} points in rectangle text {text!r}, got {len(groups)}"
            )

        p1, p2, p3, p4 = (Point.from_str(group) for group in groups)
        rectangle = cls.new(p1, p2, p3, p4)
        logger.debug("Parsed rectangle %s from %r", rectangle, text)
        return rectangle

    # -------------------------------------------------------------------------
    # Рёбра и размеры
    # -------------------------------------------------------------------------

    # Аксессоры возвращают копии: мутация результата не затрагивает углы

    def left_point(self) -> Point:
        return self.left_up.model_copy()

    def up_point(self) -> Point:
        return self.left_up.model_copy()

    def right_point(self) -> Point:
        return self.right_down.model_copy()

    def down_point(self) -> Point:
        return self.right_down.model_copy()

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Копии углов в порядке текстовой формы: left_up, right_up, right_down, left_down."""
        return (
            self.left_up.model_copy(),
            self.right_up.model_copy(),
            self.right_down.model_copy(),
            self.left_down.model_copy(),
        )

    def width(self) -> Fraction:
        return self.right_down.x.subtract(self.left_up.x)

    def height(self) -> Fraction:
        return self.right_down.y.subtract(self.left_up.y)

    # -------------------------------------------------------------------------
    # Накопление bounding box
    # -------------------------------------------------------------------------

    def fix_point(self, p: Point) -> None:
        """
        Минимальное расширение прямоугольника до охвата точки p.

        Если p уже внутри, ничего не меняется. Иначе каждый угол обновляется по своим
        двум осям независимо (min/max по x и y).
        """
        if self.check_point_in(p):
            return

        self.left_up = Point(x=min(self.left_up.x, p.x), y=min(self.left_up.y, p.y))
        self.right_up = Point(x=max(self.right_up.x, p.x), y=min(self.right_up.y, p.y))
        self.right_down = Point(x=max(self.right_down.x, p.x), y=max(self.right_down.y, p.y))
        self.left_down = Point(x=min(self.left_down.x, p.x), y=max(self.left_down.y, p.y))
        logger.debug("Rectangle grown to %s to enclose %s", self, p)

    # -------------------------------------------------------------------------
    # Принадлежность точки (границы включительно)
    # -------------------------------------------------------------------------

    def check_point_in(self, p: Point) -> bool:
        return not self.check_point_out(p)

    def check_point_out(self, p: Point) -> bool:
        """Точка снаружи, если строго левее, выше, правее или ниже прямоугольника."""
        return (
            p.is_left_of(self.left_up)
            or p.is_up_of(self.left_up)
            or p.is_right_of(self.right_down)
            or p.is_down_of(self.right_down)
        )

    # -------------------------------------------------------------------------
    # Столкновение (AABB, касание рёбрами = столкновение)
    # -------------------------------------------------------------------------

    def check_hit(self, other: "Rectangle") -> bool:
        return not self.check_no_hit(other)

    def check_no_hit(self, other: "Rectangle") -> bool:
        """Разделяющая ось: self целиком левее, выше, правее или ниже other."""
        return (
            self.right_down.is_left_of(other.left_up)
            or self.right_down.is_up_of(other.left_up)
            or self.left_up.is_right_of(other.right_down)
            or self.left_up.is_down_of(other.right_down)
        )

    def __str__(self) -> str:
        corners = (self.left_up, self.right_up, self.right_down, self.left_down)
        return "[" + ",".join(str(corner) for corner in corners) + "]"
