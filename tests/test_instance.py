from unittest import mock

import pytest

from hivemimic.db.instance import DbInstance


class _DropFailed(Exception):
    pass


def _fake_db(name):
    database = mock.MagicMock()
    database.name = name
    db = mock.MagicMock()
    db.database.return_value = database
    return db, database


def test_init_resolves_database():
    db, database = _fake_db("go-mimic")
    instance = DbInstance(db, "go-mimic")
    instance.init()
    db.database.assert_called_once_with("go-mimic")
    assert instance.database is database


def test_clear_drops_database():
    db, database = _fake_db("scratch")
    database.client.drop_database.side_effect = _DropFailed("drop refused")
    instance = DbInstance(db, "scratch")
    instance.init()
    with pytest.raises(_DropFailed):
        instance.clear()
    database.client.drop_database.assert_called_once_with("scratch")


def test_clear_before_init_raises():
    db, _ = _fake_db("scratch")
    with pytest.raises(RuntimeError):
        DbInstance(db, "scratch").clear()


def test_start_resolves_to_none():
    db, _ = _fake_db("scratch")
    instance = DbInstance(db, "scratch")
    assert instance.start().result() is None
    assert instance.stop() is None