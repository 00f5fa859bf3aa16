"""
Point the app at an in-memory SQLite database before anything imports
liftlog.settings, and create the schema once for the whole run.
Set DB_URL in the environment to run against PostgreSQL instead.
"""
import os

os.environ.setdefault("DB_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest

from liftlog.db import Base, engine
from liftlog import models  # noqa: F401


@pytest.fixture(scope="session", autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
