"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (поставляются вместе с пакетом, contracts/schema/):
- envelope.json (Envelope: все границы числа или все null)
- geometry.json (GeoJSON geometry object)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# Python-геометрии используют кортежи наравне со списками (позиции,
# __geo_interface__), поэтому tuple тоже считается JSON array.
_TYPE_CHECKER = Draft202012Validator.TYPE_CHECKER.redefine(
    "array", lambda checker, instance: isinstance(instance, (list, tuple))
)

ContractDraftValidator = jsonschema.validators.extend(
    Draft202012Validator, type_checker=_TYPE_CHECKER
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'envelope')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл содержит невалидную JSON Schema
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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

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
        self.validator = ContractDraftValidator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class EnvelopeValidator(ContractValidator):
    """Валидатор для envelope контракта."""

    def __init__(self):
        super().__init__("envelope")


class GeometryValidator(ContractValidator):
    """Валидатор для GeoJSON geometry контракта."""

    def __init__(self):
        super().__init__("geometry")


# Глобальные экземпляры валидаторов для convenience функций
_ENVELOPE_VALIDATOR = EnvelopeValidator()
_GEOMETRY_VALIDATOR = GeometryValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_envelope(data: Dict[str, Any]) -> None:
    """
    Валидация envelope данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _ENVELOPE_VALIDATOR.validate(data)


def validate_geometry(data: Dict[str, Any]) -> None:
    """
    Валидация GeoJSON geometry данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _GEOMETRY_VALIDATOR.validate(data)
