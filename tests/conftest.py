import logging

import pytest

from password_policy import PasswordPolicyEngine
from policy_config import PolicySettings

VALID_PASSWORD = "Abcdef1!23"


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo setup_logging() calls made by CLI tests.

    setup_logging() replaces the root handlers; put the originals back so
    later tests do not write to a closed capture stream.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture
def settings():
    return PolicySettings()


@pytest.fixture
def engine(settings):
    return PasswordPolicyEngine(settings)


@pytest.fixture
def valid_password():
    return VALID_PASSWORD


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
