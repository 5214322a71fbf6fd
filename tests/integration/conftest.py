"""Integration tests need a migrated PostgreSQL database.

Set RUN_INTEGRATION_TESTS=1 (and DATABASE__URL) to run them.
"""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    if os.environ.get("RUN_INTEGRATION_TESTS") == "1":
        return
    skip = pytest.mark.skip(reason="set RUN_INTEGRATION_TESTS=1 to run")
    for item in items:
        if "integration" in item.nodeid.split("/"):
            item.add_marker(skip)
