"""Tests for settings, logging setup and table bootstrap."""

import logging

from sqlalchemy import create_engine, inspect

from threadpost.core.logging import configure_logging
from threadpost.core.settings import Settings
from threadpost.db.session import get_db
from threadpost.init_db import init_db


def test_effective_database_url_respects_testing_mode(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///main.db")
    monkeypatch.setenv("TEST_DATABASE_URL", "sqlite://")

    assert Settings().effective_database_url == "sqlite:///main.db"

    monkeypatch.setenv("USE_TEST_DATABASE", "true")
    assert Settings().effective_database_url == "sqlite://"


def test_configure_logging_sets_package_level():
    logger = configure_logging("DEBUG")

    assert logger.name == "threadpost"
    assert logger.level == logging.DEBUG
    configure_logging(logging.WARNING)
    assert logger.level == logging.WARNING


def test_init_db_creates_tables():
    engine = create_engine("sqlite://")

    init_db(engine)

    assert set(inspect(engine).get_table_names()) == {"posts", "users"}


def test_get_db_yields_adapter():
    store = next(get_db())

    assert hasattr(store, "load")
    assert hasattr(store, "execute")
