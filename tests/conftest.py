"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['CHROMAMERGE_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    # The merge loggers emit one line per merge at DEBUG
    for logger_name in ['chromamerge.merge.cluster', 'chromamerge.merge.model']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
