import os

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-api", action="store_true", default=False, help="run tests that hit the YouTube API"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "api: test calls the live YouTube Data API")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-api"):
        skip_api = pytest.mark.skip(reason="need --run-api option to run")
        for item in items:
            if item.get_closest_marker("api"):
                item.add_marker(skip_api)
    elif not os.getenv("API_KEY") and not os.path.isfile(".env"):
        skip_key = pytest.mark.skip(reason="API_KEY not configured")
        for item in items:
            if item.get_closest_marker("api"):
                item.add_marker(skip_key)
