from __future__ import annotations

import pytest
import structlog

from domix_problem.config.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
