import requests
import logging

from urlmock.mock import VERB_REGISTRY, MockModule

logger = logging.getLogger(__name__)

# the requests module has no async_request
REQUESTS_VERBS = {method: index for method, index in VERB_REGISTRY.items() if method != "async_request"}


def setup_mock_interceptor(module: MockModule, target=requests) -> dict:
    """
    Wrap the module-level verbs of *target* and return the originals.

    Only attribute lookups made after setup are redirected. Code that holds an
    earlier reference (``from requests import get``) or calls ``Session.request``
    directly is not intercepted; requests.api passes method and url to the
    session as keywords, which positional wrapping does not inspect.
    """
    originals = {method: getattr(target, method, None) for method in REQUESTS_VERBS}

    for method, index in REQUESTS_VERBS.items():
        module.wrap(target, method, index)

    logger.warning(
        "MOCK API INTERCEPTOR ENABLED: %d URL(s) redirected to mock endpoints.",
        len(module.lookup),
    )
    return originals
