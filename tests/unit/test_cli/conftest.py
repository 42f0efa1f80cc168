"""CLI command tests run without ambient configuration."""

import pytest


@pytest.fixture(autouse=True)
def _isolated(isolated_config):
    return isolated_config
