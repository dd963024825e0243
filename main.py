import logging
import sys

from urlmock.config import config
from urlmock.mock import MockModule
from urlmock.runner import run_script

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)-8s] %(name)s — %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main() -> None:  # pragma: no cover
    if len(sys.argv) < 2:
        print("Usage: python main.py <script.py>")
        sys.exit(1)

    module = MockModule(config.load_lookup())

    if config.USE_MOCK_API:
        from urlmock.mock_interceptor import setup_mock_interceptor
        setup_mock_interceptor(module)

    run_script(sys.argv[1], module)


if __name__ == "__main__":  # pragma: no cover
    main()
