import datetime as dt

import pytest

from models.database import create_ledger_engine, init_db
from models.ledger import LedgerStore
from models.settings import Preferences

# A Wednesday afternoon; the ISO week starts on Monday 2024-03-11.
NOW = dt.datetime(2024, 3, 13, 15, 30)


@pytest.fixture
def now() -> dt.datetime:
    return NOW


@pytest.fixture
def engine(tmp_path):
    engine = create_ledger_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> LedgerStore:
    return LedgerStore(engine)


@pytest.fixture
def preferences(tmp_path) -> Preferences:
    return Preferences(tmp_path / "preferences.json")
