"""Shared test fixtures.

Settings are read from the environment and cached, so every test starts with
a fresh cache, and logs land in a temporary data dir instead of the repo.
"""

import pytest

from relcalc.config import get_settings


@pytest.fixture(scope="session", autouse=True)
def isolated_data_dir(tmp_path_factory):
    """Point RELCALC_DATA_DIR at a temporary directory for the whole run."""
    data_dir = tmp_path_factory.mktemp("relcalc_data")
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("RELCALC_DATA_DIR", str(data_dir))
        yield data_dir


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
