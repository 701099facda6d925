"""
Pytest configuration and shared fixtures for fast-permit tests.
"""

import pytest
from faker import Faker

from fast_permit import config
from fast_permit.core import localization

fake = Faker()


@pytest.fixture
def sample_payload():
    """A user-like payload with fields a caller never permits."""
    return {
        "name": fake.first_name(),
        "email": fake.email(),
        "company": fake.company(),
        "admin": True,
    }


@pytest.fixture(autouse=True)
def reset_locale():
    yield
    localization.set_locale(config.LOCALE_DEFAULT)
    localization.set_locale_path(config.LOCALE_PATH)
