"""
urlmock/exports.py
==================
Default HTTP namespace handed to test scripts as ``http``.

Verbs come from ``requests.api`` rather than the top-level ``requests``
attributes, which setup_mock_interceptor may already have wrapped.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from types import SimpleNamespace

import requests.api

_executor = ThreadPoolExecutor(thread_name_prefix="urlmock-async-request")


def async_request(method: str, url, **kwargs) -> Future:
    """Submit ``requests.api.request(method, url, **kwargs)`` and return its future."""
    return _executor.submit(requests.api.request, method, url, **kwargs)


def default_exports() -> SimpleNamespace:
    return SimpleNamespace(
        get=requests.api.get,
        head=requests.api.head,
        post=requests.api.post,
        put=requests.api.put,
        patch=requests.api.patch,
        options=requests.api.options,
        delete=requests.api.delete,
        request=requests.api.request,
        async_request=async_request,
    )
