import os
from enum import StrEnum
from typing import TypeVar

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}

EnumT = TypeVar("EnumT", bound=StrEnum)


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var`` respecting common true strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return value.strip().lower() in TRUE_FLAG_VALUES


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_float(
    env_var: str,
    *,
    default: float,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    """Return the float value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a float") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    if maximum is not None and parsed > maximum:
        raise ValueError(f"{env_var} must be at most {maximum}")
    return parsed


def _env_enum(env_var: str, enum_cls: type[EnumT], *, default: EnumT) -> EnumT:
    """Return the ``enum_cls`` member named by ``env_var``."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        return enum_cls(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(repr(member.value) for member in enum_cls)
        raise ValueError(f"{env_var} must be one of {choices}") from exc
