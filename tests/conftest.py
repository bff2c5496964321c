"""
Pytest configuration and shared fixtures for scannerkit tests.
"""

import pytest

from tests.mocks import FakeServices


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def fake_services() -> FakeServices:
    """Recording fakes for every installer collaborator."""
    return FakeServices()


@pytest.fixture
def action_env(tmp_path):
    """Minimal GitHub Actions environment with a writable GITHUB_PATH file."""
    path_file = tmp_path / "github_path"
    path_file.touch()
    return {
        "GITHUB_ACTIONS": "true",
        "GITHUB_PATH": str(path_file),
    }


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset module-level caches between tests."""
    from scannerkit.core import platform

    platform.clear_platform_cache()
    yield
    platform.clear_platform_cache()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test from an empty directory so no scannerkit.yaml is picked up."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch):
    """Hide inputs of the CI job running the test suite."""
    for name in ("INPUT_VERSION", "INPUT_WITH-JRE", "GITHUB_PATH"):
        monkeypatch.delenv(name, raising=False)
