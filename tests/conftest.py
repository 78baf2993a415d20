import tempfile
from pathlib import Path

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def clean_env(monkeypatch):
    """
    Fixture removing every environment variable cloparse reads.

    Usage:
        def test_without_overrides(clean_env):
            assert EnvironmentHelper.get_extra_args() == []
    """
    for name in (
        "CLOPARSE_DEBUG",
        "CLOPARSE_OPTS",
        "CLOPARSE_SHORT_OPTION_LENGTH",
        "XDG_CONFIG_HOME",
        "HOME",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def temp_config_file():
    """Fixture for temporary config files."""
    temp_dir = tempfile.mkdtemp()
    config_path = Path(temp_dir) / "cloparse.conf"
    yield config_path
    # Cleanup after test
    import shutil

    shutil.rmtree(temp_dir)


@pytest.fixture
def temp_config_with_content(tmp_path):
    """Fixture for temporary config files with various content types."""

    def _create_config(content):
        config_path = tmp_path / "cloparse.conf"
        with open(config_path, "w") as f:
            f.write(content)
        return config_path

    yield _create_config


@pytest.fixture
def xdg_config(clean_env, tmp_path):
    """
    Fixture writing a config file under a fresh XDG_CONFIG_HOME.

    Usage:
        def test_config(xdg_config):
            path = xdg_config("require=1.2.0\\n")
    """

    def _write(content):
        config_dir = tmp_path / "xdg"
        config_dir.mkdir(exist_ok=True)
        config_path = config_dir / "cloparse.conf"
        config_path.write_text(content)
        clean_env.setenv("XDG_CONFIG_HOME", str(config_dir))
        return config_path

    return _write


@pytest.fixture
def versions_file(tmp_path):
    """Fixture for a temporary file listing versions."""

    def _create(content):
        path = tmp_path / "versions.txt"
        path.write_text(content)
        return path

    return _create
