"""
Contract Validation Module

Модуль для валидации JSON формы геометрических типов.
"""

from .validators import (
    ContractValidator,
    FractionValidator,
    PointValidator,
    RectangleValidator,
    SchemaLoader,
    VectorValidator,
    get_validator,
    validate_fraction,
    validate_point,
    validate_rectangle,
    validate_vector,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FractionValidator",
    "VectorValidator",
    "PointValidator",
    "RectangleValidator",
    # Functions
    "get_validator",
    "validate_fraction",
    "validate_vector",
    "validate_point",
    "validate_rectangle",
]
