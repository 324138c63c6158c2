import sys
import os
from pathlib import Path

import pytest

# Ensure the project root is in the python path for all tests
# This solves the 'ModuleNotFoundError' issues encountered when running tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dineout_offers.models import CardIdentity, CardKind, Catalogs


@pytest.fixture
def data_dir() -> Path:
    """The sample CSV tables shipped with the repo."""
    return Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def make_catalogs():
    """Builds Catalogs from plain display-name lists."""
    def _make(credit=(), debit=()):
        return Catalogs(
            credit=tuple(CardIdentity.from_display(name, CardKind.CREDIT) for name in credit),
            debit=tuple(CardIdentity.from_display(name, CardKind.DEBIT) for name in debit),
        )
    return _make
