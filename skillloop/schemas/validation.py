"""
Declarative per-field validation.

Each payload schema lists ``(field, predicate, message)`` rules. Every field's
rules run in order before type coercion; the first failing rule of a field
becomes that field's error and pydantic aggregates the errors of all fields,
which the error translator turns into a single 400 response.
"""

import re
from collections.abc import Callable, Iterable, Sequence
from typing import Any, ClassVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

Predicate = Callable[[Any], bool]
Rule = tuple[str, Predicate, str]


def required(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value)
    return value is not None


def min_length(n: int) -> Predicate:
    return lambda value: isinstance(value, str) and len(value) >= n


def max_length(n: int) -> Predicate:
    return lambda value: isinstance(value, str) and len(value) <= n


def max_bytes(n: int) -> Predicate:
    return lambda value: isinstance(value, str) and len(value.encode("utf-8")) <= n


def matches(pattern: str) -> Predicate:
    compiled = re.compile(pattern)
    return lambda value: isinstance(value, str) and compiled.fullmatch(value) is not None


def one_of(choices: Iterable[str]) -> Predicate:
    allowed = frozenset(choices)
    return lambda value: isinstance(value, str) and value in allowed


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def optional(predicate: Predicate) -> Predicate:
    """Skip the check when the field was not supplied."""
    return lambda value: value is None or predicate(value)


def string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python. Either is accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RuleModel(CamelModel):
    """Request payload validated by its ``rules`` table."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )

    rules: ClassVar[Sequence[Rule]] = ()
    # Fields passed through exactly as sent; every other string is trimmed
    raw_fields: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def _apply_rules(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, str) and info.field_name not in cls.raw_fields:
            value = value.strip()
        for field, predicate, message in cls.rules:
            if field == info.field_name and not predicate(value):
                raise ValueError(message)
        return value
