"""
urlmock/mock.py
===============
Wraps HTTP verb callables so every call is redirected through the lookup table
before reaching the real implementation.
"""

import functools
import logging
from collections.abc import Mapping
from typing import Any, Callable

from urlmock.body import normalize_body
from urlmock.rewriter import rewrite, rewrite_arg

logger = logging.getLogger(__name__)

# TODO: wrap a batch() export once one is added to the default exports.

URL_FIRST_METHODS = ("get", "head", "post", "put", "patch", "options", "delete")
URL_SECOND_METHODS = ("request", "async_request")

VERB_REGISTRY: dict[str, int] = {
    **{method: 0 for method in URL_FIRST_METHODS},
    **{method: 1 for method in URL_SECOND_METHODS},
}


class InvalidArgumentError(TypeError):
    """Raised when a wrap target does not expose the named callable."""


class MockModule:
    def __init__(self, lookup: Mapping[str, str] | None = None):
        self.lookup: dict[str, str] = dict(lookup or {})


    def rewrite(self, value: Any) -> Any:
        return rewrite(self.lookup, value)


    def wrap(self, target: Any, method: str, index: int) -> Callable:
        """
        Replace ``target.<method>`` with a redirecting wrapper and return it.

        Raises InvalidArgumentError if the attribute is missing or not callable.
        Whatever the original callable raises is propagated as is.
        """
        original = getattr(target, method, None)
        if not callable(original):
            raise InvalidArgumentError(f"{method} must be callable")

        lookup = self.lookup

        @functools.wraps(original)
        def wrapper(*args, **kwargs):
            if len(args) > index:
                args = list(args)
                rewrite_arg(lookup, args, index)
                normalize_body(args, index)

            return original(*args, **kwargs)

        setattr(target, method, wrapper)
        logger.debug("Wrapped %s (url argument at index %d).", method, index)
        return wrapper


    def wrap_http_exports(self, defaults: Any) -> None:
        for method, index in VERB_REGISTRY.items():
            self.wrap(defaults, method, index)
