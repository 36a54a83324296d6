"""
JSON Schema Contract Validators

Модуль для валидации dict-представления FixedDecimal
({"coefficient": int, "exponent": int}) согласно JSON Schema контракту.

Схема fixed_decimal.json поставляется как package data
(src/core/contracts/schema/) и загружается через importlib.resources
при первом использовании.

Тип "integer" сужен до Python int: draft 2020-12 считает 1.0 целым,
но coefficient/exponent FixedDecimal — только int (StrictInt).
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, validators

from src.core.domain.fixed_decimal import FixedDecimal

SCHEMA_NAME = "fixed_decimal"


def _is_strict_integer(checker, instance) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


# Draft 2020-12 с integer = только int (без 1.0 и bool)
StrictIntegerValidator = validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_fixed_decimal_schema() -> Dict[str, Any]:
    """
    Загрузка fixed_decimal.json из package data (кэшируется).

    Raises:
        ValueError: Если схема не проходит meta-валидацию
    """
    schema_file = resources.files(__package__).joinpath("schema").joinpath(f"{SCHEMA_NAME}.json")
    schema = json.loads(schema_file.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {SCHEMA_NAME}.json: {e}")

    return schema


@lru_cache(maxsize=None)
def fixed_decimal_validator() -> Draft202012Validator:
    """Валидатор fixed_decimal контракта (создаётся один раз)."""
    return StrictIntegerValidator(load_fixed_decimal_schema())


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fixed_decimal(data: Dict[str, Any]) -> None:
    """
    Валидация dict-представления FixedDecimal.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    fixed_decimal_validator().validate(data)


def fixed_decimal_from_contract(data: Dict[str, Any]) -> FixedDecimal:
    """
    Создание FixedDecimal из dict после проверки контракта.

    Контракт проверяет тип (только int) и диапазон exponent,
    поэтому модель строится из уже проверенных данных.

    Args:
        data: {"coefficient": int, "exponent": int}

    Returns:
        FixedDecimal

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
            (включая 1.0 вместо 1)
    """
    validate_fixed_decimal(data)
    return FixedDecimal.model_validate(data)


def fixed_decimal_to_contract(value: FixedDecimal) -> Dict[str, Any]:
    """Dict-представление FixedDecimal, проверенное по контракту."""
    data = value.model_dump()
    validate_fixed_decimal(data)
    return data
