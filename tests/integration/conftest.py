"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_LAAKHAY_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LAAKHAY_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_LAAKHAY_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def bigquery_config():
    """Connector config from BIGQUERY_* variables; skips when unset."""
    from laakhay.query.connectors.bigquery import BigQueryConfig
    from laakhay.query.core import ConfigurationError

    try:
        return BigQueryConfig.from_env()
    except ConfigurationError as e:
        pytest.skip(str(e))
