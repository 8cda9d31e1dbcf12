# app/services/plate_validator.py
"""
Plate validation and error-message mapping.
Shared by the register and query operations. Length is the only structural
check: no trimming, case folding or regional format rules are applied.
"""

from enum import IntEnum
from typing import Any

PLATE_LENGTH = 8


class ErrorCode(IntEnum):
    OK = 0
    MISSING = 1
    INVALID = 2
    INFRA = 3     # plate store unreachable or failed


_MESSAGES = {
    ErrorCode.MISSING: "Plate not provided.",
    ErrorCode.INVALID: "Invalid plate.",
    ErrorCode.INFRA: "Plate store unavailable.",
}


def validate_plate(candidate: Any) -> ErrorCode:
    """Classify a candidate plate string. Returns ErrorCode.OK when usable."""
    if not candidate:
        return ErrorCode.MISSING
    if not isinstance(candidate, str) or len(candidate) != PLATE_LENGTH:
        return ErrorCode.INVALID
    return ErrorCode.OK


def error_message(code: int) -> str:
    """Human-readable message for an error code. Unknown codes (and OK) map to ''."""
    return _MESSAGES.get(code, "")
