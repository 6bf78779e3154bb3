import pytest

from hivemimic.db.mimic import MimicDb
from hivemimic.db.state import StateDb


class FakeDatabase:
    def __init__(self, name):
        self.name = name
        self.collections = {}

    def get_collection(self, name):
        return self.collections.setdefault(name, object())


class FakeDb:
    def __init__(self):
        self.databases = {}

    def database(self, name):
        return self.databases.setdefault(name, FakeDatabase(name))


def test_uses_state_collection_in_go_mimic():
    fake = FakeDb()
    mimic_db = MimicDb(fake)
    mimic_db.init()
    state = StateDb(mimic_db)
    state.init()
    assert state.name == "state"
    assert state.collection is fake.databases["go-mimic"].collections["state"]


def test_init_before_database_raises():
    state = StateDb(MimicDb(FakeDb()))
    with pytest.raises(RuntimeError):
        state.init()


def test_start_resolves_to_none():
    mimic_db = MimicDb(FakeDb())
    mimic_db.init()
    state = StateDb(mimic_db)
    state.init()
    assert state.start().result() is None