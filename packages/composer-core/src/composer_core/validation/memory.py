"""
Memory size validation for the server composer form.

Raw input arrives as the user typed it, usually comma-grouped ("524,288").
Checks run in a fixed order and only the first failure is reported:
characters, minimum, maximum, then the multiple constraint.
"""

from __future__ import annotations

import re

from composer_core.codebase.debug import spy_trace
from composer_core.models.memory import MemoryErrorKind, MemoryLimits, MemoryValidation

DEFAULT_LIMITS = MemoryLimits()

GROUPING_SEPARATOR = ","
INVALID_INPUT_MESSAGE = "Please only enter numbers"
FIX_ERROR_BEFORE_SUBMIT = "Please fix the error above before submitting"

_DIGITS = re.compile(r"[0-9]+")
_GROUP_BOUNDARY = re.compile(r"\B(?=(\d{3})+(?!\d))")


class MemorySizeError(ValueError):
    """Raised by parse_memory_size when the raw input does not validate."""

    def __init__(self, kind: MemoryErrorKind, message: str, raw: str = ""):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.raw = raw


def helper_text(limits: MemoryLimits = DEFAULT_LIMITS) -> str:
    return f"Memory size range: {limits.min_mb} MB to {limits.max_mb} MB"


MEMORY_SIZE_HELPER_TEXT = helper_text()


def error_message(kind: MemoryErrorKind, limits: MemoryLimits = DEFAULT_LIMITS) -> str:
    if kind is MemoryErrorKind.INVALID_CHARACTERS:
        return INVALID_INPUT_MESSAGE
    if kind is MemoryErrorKind.MIN:
        return f"Memory size must be at least {limits.min_mb} MB"
    if kind is MemoryErrorKind.MAX:
        return f"Memory size must be at most {limits.max_mb} MB"
    return f"Memory size must be a multiple of {limits.multiple_mb} MB"


def strip_grouping(raw: str) -> str:
    return raw.replace(GROUPING_SEPARATOR, "")


def format_memory_size(raw: str) -> str:
    """Regroup a digit string with thousands separators ("524288" -> "524,288").

    Text with anything other than digits and separators is returned untouched so
    the validator can flag it.
    """
    digits = strip_grouping(raw)
    if not _DIGITS.fullmatch(digits):
        return raw
    return _GROUP_BOUNDARY.sub(GROUPING_SEPARATOR, digits)


def _classify(value: int, limits: MemoryLimits) -> MemoryErrorKind | None:
    if value < limits.min_mb:
        return MemoryErrorKind.MIN
    if value > limits.max_mb:
        return MemoryErrorKind.MAX
    if value % limits.multiple_mb != 0:
        return MemoryErrorKind.NOT_MULTIPLE
    return None


@spy_trace
def validate_memory_size(raw: str, limits: MemoryLimits = DEFAULT_LIMITS) -> MemoryValidation:
    """Validate a raw memory size string without raising."""
    digits = strip_grouping(raw)
    if not _DIGITS.fullmatch(digits):
        kind = MemoryErrorKind.INVALID_CHARACTERS
        return MemoryValidation(raw=raw, error=kind, message=error_message(kind, limits))

    # int() rejects strings past the interpreter digit limit
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(limits.max_mb)):
        kind = MemoryErrorKind.MAX
        return MemoryValidation(raw=raw, error=kind, message=error_message(kind, limits))

    value = int(significant)
    kind = _classify(value, limits)
    if kind is not None:
        return MemoryValidation(raw=raw, error=kind, message=error_message(kind, limits))
    return MemoryValidation(raw=raw, value=value)


def parse_memory_size(raw: str, limits: MemoryLimits = DEFAULT_LIMITS) -> int:
    """Return the memory size in MB or raise MemorySizeError."""
    outcome = validate_memory_size(raw, limits)
    if outcome.value is None:
        kind = outcome.error or MemoryErrorKind.INVALID_CHARACTERS
        raise MemorySizeError(kind, outcome.message or error_message(kind, limits), raw)
    return outcome.value
