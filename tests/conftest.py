"""
Pytest configuration and fixtures
"""
import pytest
import pytz
from datetime import datetime


@pytest.fixture(autouse=True)
def clean_chrono_env(monkeypatch):
    """Keep host settings from leaking a timezone or config file into tests"""
    monkeypatch.delenv("CHRONO_TIMEZONE", raising=False)
    monkeypatch.delenv("CHRONO_CONFIG", raising=False)


@pytest.fixture
def reference():
    """Thursday 2023-06-15 14:30:00 (naive)"""
    return datetime(2023, 6, 15, 14, 30, 0)


@pytest.fixture
def paris():
    """A zone with DST (switches on 2023-03-26 and 2023-10-29)"""
    return pytz.timezone("Europe/Paris")
