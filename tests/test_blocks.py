import pytest

from hivemimic.db.blocks import BlockNotFoundError, Blocks, HiveBlock
from hivemimic.db.mimic import MimicDb


class FakeCollection:
    def __init__(self):
        self.docs = []

    def _match(self, filt):
        for doc in self.docs:
            if all(doc.get(k) == v for k, v in filt.items()):
                return doc
        return None

    def find_one(self, filt):
        doc = self._match(filt)
        return None if doc is None else dict(doc)

    def find_one_and_update(self, filt, update, upsert=False):
        doc = self._match(filt)
        if doc is not None:
            before = dict(doc)
            doc.update(update["$set"])
            return before
        if upsert:
            new = dict(filt)
            new.update(update["$set"])
            new["_id"] = len(self.docs)
            self.docs.append(new)
        return None


class FakeDatabase:
    def __init__(self, name):
        self.name = name
        self.collections = {}

    def get_collection(self, name):
        return self.collections.setdefault(name, FakeCollection())


class FakeDb:
    def __init__(self):
        self.databases = {}

    def database(self, name):
        return self.databases.setdefault(name, FakeDatabase(name))


@pytest.fixture
def blocks():
    mimic_db = MimicDb(FakeDb())
    mimic_db.init()
    store = Blocks(mimic_db)
    store.init()
    return store


def _block(height, witness="alice"):
    return HiveBlock(
        block_id="id-%d" % height,
        witness=witness,
        timestamp="2023-10-01T00:00:00",
        merkle_root="root",
        previous="prev",
        transaction_ids="tx",
        height=height,
    )


def test_document_uses_storage_keys():
    doc = _block(5).to_document()
    assert set(doc) == {"id", "witness", "ts", "merkle_root", "previous", "tx_ids", "height"}
    assert doc["ts"] == "2023-10-01T00:00:00"
    assert doc["height"] == 5


def test_document_round_trip():
    block = _block(7)
    assert HiveBlock.from_document(block.to_document()) == block


def test_from_document_ignores_extra_and_defaults_missing():
    block = HiveBlock.from_document({"_id": 1, "height": 3, "witness": "bob"})
    assert block == HiveBlock(witness="bob", height=3)


def test_insert_then_get(blocks):
    blocks.insert_block(_block(1))
    blocks.insert_block(_block(2))
    assert blocks.get_block_by_height(2) == _block(2)
    assert blocks.get_block_by_height(1) == _block(1)


def test_insert_same_height_updates(blocks):
    blocks.insert_block(_block(4, witness="alice"))
    blocks.insert_block(_block(4, witness="bob"))
    assert blocks.get_block_by_height(4).witness == "bob"
    assert len(blocks.collection.docs) == 1


def test_missing_height_raises(blocks):
    with pytest.raises(BlockNotFoundError):
        blocks.get_block_by_height(99)


def test_uses_blocks_collection_in_go_mimic():
    fake = FakeDb()
    mimic_db = MimicDb(fake)
    mimic_db.init()
    store = Blocks(mimic_db)
    store.init()
    assert store.name == "blocks"
    assert store.collection is fake.databases["go-mimic"].collections["blocks"]


def test_get_before_init_raises():
    mimic_db = MimicDb(FakeDb())
    mimic_db.init()
    with pytest.raises(RuntimeError):
        Blocks(mimic_db).get_block_by_height(1)