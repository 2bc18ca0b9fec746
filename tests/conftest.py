import os
import sys
import tempfile
from pathlib import Path
import pytest

# Ensure project root is on sys.path so tests can import 'orderboard' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Point the engine at a throwaway sqlite file before the package is imported
_TEST_DB = Path(tempfile.gettempdir()) / "orderboard_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB}"

# Ensure tests run against a clean DB schema for each test
from orderboard.db import Base, engine
from orderboard import models  # noqa: F401


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so the test DB matches the current models exactly
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
