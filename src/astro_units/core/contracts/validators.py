"""
Quantity Contract Validators

Проверка сериализованных величин против JSON Schema (Draft 2020-12),
поставляемых вместе с пакетом в contracts/schema/.

    >>> validate_quantity({"kind": "angle", "value": 3600.0})
    >>> QuantityValidator().is_valid({"kind": "mass", "value": 1})
    False
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List

from jsonschema import Draft202012Validator, SchemaError, ValidationError

logger = logging.getLogger(__name__)

# Каталог схем внутри пакета
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

QUANTITY_SCHEMA: Final[str] = "quantity"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение и meta-validation файлов <name>.json из каталога схем.

    Каждая схема читается с диска один раз, дальше отдаётся из кэша.
    """

    def __init__(self, schema_dir: Path | None = None):
        """
        Args:
            schema_dir: Каталог схем (default: SCHEMA_DIR)

        Raises:
            RuntimeError: Если каталог не существует
        """
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файла <schema_name>.json нет
            ValueError: Если файл не проходит meta-validation
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        logger.debug("Loaded schema %s from %s", schema_name, path)
        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной схемы из SchemaLoader."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение схемы
        """
        logger.debug("Validating %s contract", self.schema_name)
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения схемы, без остановки на первом"""
        return self._validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """
        Нарушения в виде строк "<json path>: <message>", отсортированные
        по пути.
        """
        errors = sorted(self.iter_errors(data), key=lambda e: e.json_path)
        return [f"{e.json_path}: {e.message}" for e in errors]


class QuantityValidator(ContractValidator):
    """Валидатор quantity.json"""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(QUANTITY_SCHEMA, loader)


@lru_cache(maxsize=1)
def _quantity_validator() -> QuantityValidator:
    return QuantityValidator()


def validate_quantity(data: Dict[str, Any]) -> None:
    """
    Проверка dict против quantity.json.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _quantity_validator().validate(data)
