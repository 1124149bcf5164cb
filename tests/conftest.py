import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pin the settings environment before any application module is imported."""
    os.environ["SPM_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        # Get the test file path relative to the tests directory
        test_path = Path(item.fspath)

        # Mark tests based on their directory
        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests(tmp_path, monkeypatch):
    """Start every test with empty repositories, default settings and the fake gateway."""
    from payments.gateway import reset_gateway
    from shared.config import get_settings
    from shared.repository import reset_repositories

    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    reset_repositories()
    reset_gateway()

    yield

    reset_repositories()
    reset_gateway()
    get_settings.cache_clear()


@pytest.fixture()
def staff_token():
    """Bearer token for the owner account, which may open every screen."""
    from staff.session.session import login

    def _login(email="admin@spmcafe.id", password="spm-admin"):
        return login(email, password).token

    return _login


@pytest.fixture()
def auth_headers(staff_token):
    return {"Authorization": f"Bearer {staff_token()}"}
