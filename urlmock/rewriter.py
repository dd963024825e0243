"""
urlmock/rewriter.py
===================
Swaps production URLs for their mock counterparts using an exact-match lookup table.
"""

import logging
from collections.abc import Mapping, MutableSequence
from typing import Any

logger = logging.getLogger(__name__)


def rewrite(lookup: Mapping[str, str], value: Any) -> Any:
    """Return the mock URL for *value* if it is a known string, else *value* itself."""
    if not isinstance(value, str) or value not in lookup:
        return value

    new_value = lookup[value]
    logger.info("Redirecting %s -> %s", value, new_value)
    return new_value


def rewrite_arg(lookup: Mapping[str, str], args: MutableSequence, index: int) -> None:
    if 0 <= index < len(args):
        args[index] = rewrite(lookup, args[index])
