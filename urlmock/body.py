"""
urlmock/body.py
===============
Body normalization for request descriptions passed to wrapped HTTP calls.

A request description is either a mutable mapping with a "body" key or an
object with a "body" attribute. Only text bodies are touched; every other
shape is left alone without raising.
"""

from collections.abc import Mapping, MutableMapping, Sequence
from enum import Enum
from types import ModuleType
from typing import Any


class BodyKind(Enum):
    MISSING = "missing"
    NON_TEXT = "non_text"
    TEXT = "text"


_SCALARS = (str, bytes, bytearray, memoryview, int, float, complex, type(None))


def is_structured(value: Any) -> bool:
    """True when *value* can carry a settable "body" (dict-like or attribute-bearing)."""
    if isinstance(value, MutableMapping):
        return True
    if isinstance(value, _SCALARS) or isinstance(value, (Mapping, Sequence)):
        return False
    if isinstance(value, (type, ModuleType)) or callable(value):
        return False
    return hasattr(value, "__dict__") or hasattr(type(value), "__slots__")


def lookup_body(request: Any) -> tuple[BodyKind, Any]:
    try:
        if isinstance(request, MutableMapping):
            value = request.get("body")
        else:
            value = getattr(request, "body", None)
    except Exception:
        # a raising accessor is treated like an absent body
        return BodyKind.MISSING, None

    if value is None:
        return BodyKind.MISSING, None
    if isinstance(value, str):
        return BodyKind.TEXT, value
    return BodyKind.NON_TEXT, value


def transform_body(text: str) -> str:
    # Identity for now; content-aware rewriting of text bodies goes here.
    return text


def _set_body(request: Any, text: str) -> None:
    try:
        if isinstance(request, MutableMapping):
            request["body"] = text
        else:
            setattr(request, "body", text)
    except Exception:
        # read-only property, frozen dataclass or validating setter
        pass


def normalize_body(args: Sequence, index: int) -> None:
    """
    Re-set the text body of the request description at ``args[index]``.

    Out-of-range index, non-structured argument, missing/None body and
    non-text body are all silent no-ops.
    """
    if not 0 <= index < len(args):
        return

    request = args[index]
    if not is_structured(request):
        return

    kind, value = lookup_body(request)
    if kind is not BodyKind.TEXT:
        return

    _set_body(request, transform_body(value))
