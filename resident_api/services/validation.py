"""
Parse step for untyped request input.
Turns a decoded JSON body into a ResidentCreate, or raises ResidentValidationError
with the first failing rule (name before age).

Number conversion follows JavaScript's Number(): null and blank strings are 0,
booleans are 0/1, a one-element array converts its element, and strings are
ASCII decimal literals or 0x/0o/0b integers.
"""

import math
import re
from typing import Any

from resident_api.core.errors import ResidentValidationError, ValidationReason
from resident_api.schemas.resident import ResidentCreate

# String.prototype.trim() set: WhiteSpace + LineTerminator
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_DECIMAL = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_PREFIXED = {"0x": (re.compile(r"[0-9a-fA-F]+"), 16), "0o": (re.compile(r"[0-7]+"), 8), "0b": (re.compile(r"[01]+"), 2)}

_MISSING = object()


def js_trim(text: str) -> str:
    return text.strip(JS_WHITESPACE)


def _string_to_number(value: str) -> int | float | None:
    text = js_trim(value)
    if not text:
        return 0
    prefixed = _PREFIXED.get(text[:2].lower())
    if prefixed is not None:
        digits, base = prefixed
        return int(text[2:], base) if digits.fullmatch(text[2:]) else None
    if not _DECIMAL.fullmatch(text):
        return None
    return float(text)


def to_finite_number(value: Any) -> int | float | None:
    """Convert like JavaScript's Number(); None when the result is NaN or infinite."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        number = _string_to_number(value)
    elif isinstance(value, list):
        # String([x]) is String(x); two or more elements join with ","
        if not value:
            return 0
        if len(value) > 1 or isinstance(value[0], (bool, dict)):
            return None
        return to_finite_number(value[0])
    else:
        return None
    if number is None:
        return None
    try:
        finite = math.isfinite(number)
    except OverflowError:
        return None
    return number if finite else None


def parse_resident_create(payload: Any) -> ResidentCreate:
    """Validate a create body. Non-object bodies are treated as empty."""
    if not isinstance(payload, dict):
        payload = {}

    name = payload.get("name")
    if not isinstance(name, str) or not js_trim(name):
        raise ResidentValidationError(ValidationReason.NAME_REQUIRED)

    raw_age = payload.get("age", _MISSING)
    age = None if raw_age is _MISSING else to_finite_number(raw_age)
    if age is None or age < 0:
        raise ResidentValidationError(ValidationReason.AGE_INVALID)

    return ResidentCreate(name=js_trim(name), age=math.trunc(age))
