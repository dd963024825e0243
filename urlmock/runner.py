"""
urlmock/runner.py
=================
Runs a Python load-test script with the redirected ``http`` namespace in scope.
"""

import logging
import runpy

from urlmock.exports import default_exports
from urlmock.mock import MockModule

logger = logging.getLogger(__name__)


def run_script(path: str, module: MockModule) -> dict:
    """Execute *path* with ``http`` bound to the wrapped default exports; return its globals."""
    http = default_exports()
    module.wrap_http_exports(http)

    logger.info("Running script '%s' with %d mock URL(s).", path, len(module.lookup))
    return runpy.run_path(path, init_globals={"http": http}, run_name="__main__")
