"""Diagnostic rendering configuration and its runtime activation."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
import os
from typing import Callable, Iterator, TypeVar
import warnings

from assertpack.report.exceptions import ReportConfigError

MAX_REPR_ENV_VAR = "ASSERTKIT_MAX_REPR"
INCLUDE_STACK_ENV_VAR = "ASSERTKIT_INCLUDE_STACK"

MIN_REPR_LENGTH = 16

T = TypeVar("T")

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Controls how values are rendered into failure diagnostics."""

    max_repr_length: int = 2048
    include_stack: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.max_repr_length, bool) or not isinstance(self.max_repr_length, int):
            raise ReportConfigError("max_repr_length must be an integer")
        if self.max_repr_length < MIN_REPR_LENGTH:
            raise ReportConfigError(
                f"max_repr_length must be at least {MIN_REPR_LENGTH}, got {self.max_repr_length}"
            )
        if not isinstance(self.include_stack, bool):
            raise ReportConfigError("include_stack must be a boolean")


DEFAULT_REPORT_CONFIG = ReportConfig()

_ACTIVE_REPORT_CONFIG: ContextVar[ReportConfig | None] = ContextVar(
    "assertpack_active_report_config",
    default=None,
)


def get_active_report_config() -> ReportConfig:
    """Resolve the report config from a context override, then env vars, then defaults.

    Malformed env values never raise here. Each one is reported with a
    ``RuntimeWarning`` and its field falls back to the default, so a bad
    variable cannot mask the assertion failure being rendered.
    """
    config = _ACTIVE_REPORT_CONFIG.get()
    if config is not None:
        return config

    raw_max = os.getenv(MAX_REPR_ENV_VAR, "").strip()
    raw_stack = os.getenv(INCLUDE_STACK_ENV_VAR, "").strip()
    if not raw_max and not raw_stack:
        return DEFAULT_REPORT_CONFIG

    return ReportConfig(
        max_repr_length=_env_field(
            raw_max,
            name=MAX_REPR_ENV_VAR,
            parse=_parse_repr_length,
            default=DEFAULT_REPORT_CONFIG.max_repr_length,
        ),
        include_stack=_env_field(
            raw_stack,
            name=INCLUDE_STACK_ENV_VAR,
            parse=_parse_bool,
            default=DEFAULT_REPORT_CONFIG.include_stack,
        ),
    )


@contextmanager
def use_report_config(config: ReportConfig) -> Iterator[ReportConfig]:
    """Activate a report config for the current context."""
    token = _ACTIVE_REPORT_CONFIG.set(config)
    try:
        yield config
    finally:
        _ACTIVE_REPORT_CONFIG.reset(token)


def _parse_int(raw: str, *, name: str) -> int:
    try:
        return int(raw)
    except ValueError as error:
        raise ReportConfigError(f"{name} must be an integer, got {raw!r}") from error


def _parse_bool(raw: str, *, name: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ReportConfigError(
        f"{name} must be one of {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}, got {raw!r}"
    )


def _parse_repr_length(raw: str, *, name: str) -> int:
    value = _parse_int(raw, name=name)
    if value < MIN_REPR_LENGTH:
        raise ReportConfigError(f"{name} must be at least {MIN_REPR_LENGTH}, got {value}")
    return value


def _env_field(raw: str, *, name: str, parse: Callable[..., T], default: T) -> T:
    if not raw:
        return default
    try:
        return parse(raw, name=name)
    except ReportConfigError as error:
        warnings.warn(
            f"assertkit ignored {name}: {error}; using default {default!r}",
            RuntimeWarning,
            stacklevel=3,
        )
        return default
