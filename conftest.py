import shutil
from pathlib import Path

import pytest

from scenes_db import storage

TEST_DATA_DIR = Path("data-tests")


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe and re-init data-tests/ (flat mode) before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    storage.init_storage(TEST_DATA_DIR)
    yield
    # leave data-tests around after tests for inspection; CI can ignore it


@pytest.fixture
def grouped():
    """Switch storage to grouped mode on a fresh document."""
    grouped_dir = TEST_DATA_DIR / "grouped"
    storage.init_storage(grouped_dir, grouped=True)
    return grouped_dir
