import pytest

from fluentsql.settings import main as settings_main


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop the settings singleton so environment changes are picked up."""
    settings_main._settings = None
    yield
    settings_main._settings = None
