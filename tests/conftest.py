import pytest

from store_registry.config import set_config_for_test
from store_registry.logging import configure_logging


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test from an empty directory with a known config."""
    for var in ["STORES_FILE", "LOG_LEVEL"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    set_config_for_test(stores_file="stores.dat", log_level="DEBUG")
    configure_logging()
    yield


@pytest.fixture
def stores_path(tmp_path):
    return tmp_path / "stores.dat"
