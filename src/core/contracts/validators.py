"""
JSON Schema Contract Validators

Модуль для валидации структурированной (dict/JSON) формы геометрических
типов согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (каталог schema/ рядом с модулем):
- fraction.json
- vector.json
- point.json
- rectangle.json

Схемы проверяют только структуру (типы, обязательные поля, диапазон i64,
denominator >= 1). Каноническая форма восстанавливается моделями при загрузке.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Type

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Каталог схем относительно этого модуля
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

FRACTION_SCHEMA: Final[str] = "fraction"
VECTOR_SCHEMA: Final[str] = "vector"
POINT_SCHEMA: Final[str] = "point"
RECTANGLE_SCHEMA: Final[str] = "rectangle"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из каталога schema/ внутри пакета contracts.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'rectangle')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class FractionValidator(ContractValidator):
    def __init__(self):
        super().__init__(FRACTION_SCHEMA)


class VectorValidator(ContractValidator):
    def __init__(self):
        super().__init__(VECTOR_SCHEMA)


class PointValidator(ContractValidator):
    def __init__(self):
        super().__init__(POINT_SCHEMA)


class RectangleValidator(ContractValidator):
    def __init__(self):
        super().__init__(RECTANGLE_SCHEMA)


# Один экземпляр валидатора на схему, создаётся при первом обращении
_VALIDATOR_TYPES: Dict[str, Type[ContractValidator]] = {
    FRACTION_SCHEMA: FractionValidator,
    VECTOR_SCHEMA: VectorValidator,
    POINT_SCHEMA: PointValidator,
    RECTANGLE_SCHEMA: RectangleValidator,
}
_VALIDATORS: Dict[str, ContractValidator] = {}


def get_validator(schema_name: str) -> ContractValidator:
    """
    Общий валидатор для схемы schema_name.

    Raises:
        ValueError: Если для схемы нет валидатора
    """
    if schema_name not in _VALIDATORS:
        if schema_name not in _VALIDATOR_TYPES:
            raise ValueError(f"No contract validator for schema: {schema_name}")
        _VALIDATORS[schema_name] = _VALIDATOR_TYPES[schema_name]()
    return _VALIDATORS[schema_name]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fraction(data: Dict[str, Any]) -> None:
    """
    Валидация структурированной формы Fraction.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator(FRACTION_SCHEMA).validate(data)


def validate_vector(data: Dict[str, Any]) -> None:
    get_validator(VECTOR_SCHEMA).validate(data)


def validate_point(data: Dict[str, Any]) -> None:
    get_validator(POINT_SCHEMA).validate(data)


def validate_rectangle(data: Dict[str, Any]) -> None:
    """
    Валидация структурированной формы Rectangle.

    Проверяется только структура; согласованность углов проверяет модель
    Rectangle при Rectangle.model_validate().

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator(RECTANGLE_SCHEMA).validate(data)
