"""
Shared pytest fixtures for signup service tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from signup_app.client.form_state import FormState


VALID_FORM = {
    "fullname": "Jane Doe",
    "email": "jane@example.com",
    "username": "jane.doe",
    "password": "Abcdef1!",
    "confirm": "Abcdef1!",
    "phone": "1234567890",
    "age": "30",
}


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "PORT": "4100",
        "LOG_LEVEL": "DEBUG",
        "SIGNUP_API_BASE_URL": "http://signup.test",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.host = "127.0.0.1"
    mock.port = 4000
    mock.log_level = "INFO"
    mock.cors_allow_origins = ["*"]
    mock.signup_api_base_url = "http://signup.test"
    mock.signup_client_timeout = 5.0

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("signup_app.core.config.get_settings", return_value=mock), patch(
        "signup_app.infrastructure.external.signup_client.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def valid_payload():
    """A server payload where every field passes."""
    return {
        "fullname": "Jane Doe",
        "email": "jane@example.com",
        "username": "jane.doe",
        "password": "Abcdef1!",
        "phone": "1234567890",
        "age": 30,
        "terms": True,
    }


@pytest.fixture
def filled_state():
    """A FormState whose inputs hold a fully valid form."""
    state = FormState()
    state.values.update(VALID_FORM)
    state.values["terms"] = True
    return state
