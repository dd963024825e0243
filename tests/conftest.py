import pytest
import requests

from urlmock.mock import MockModule
from urlmock.mock_interceptor import REQUESTS_VERBS
from urlmock.mock_server import app as flask_app


@pytest.fixture()
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c


@pytest.fixture()
def module():
    return MockModule({"https://example.com": "https://example.net"})


@pytest.fixture()
def restore_requests():
    originals = {method: getattr(requests, method) for method in REQUESTS_VERBS}
    yield
    for method, original in originals.items():
        setattr(requests, method, original)
