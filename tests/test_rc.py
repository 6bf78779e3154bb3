import pytest

from hivemimic.api.services.rc import RcApi


def test_find_rc_accounts_one_record_per_name_in_order():
    reply = RcApi().find_rc_accounts({"accounts": ["alice", "bob"]})
    assert [a["account"] for a in reply["rc_accounts"]] == ["alice", "bob"]


def test_find_rc_accounts_record_values():
    record = RcApi().find_rc_accounts({"accounts": ["alice"]})["rc_accounts"][0]
    assert record["max_rc"] == 1000000000
    assert record["delegated_rc"] == 0
    assert record["max_rc_creation_adjustment"] == "1000000000 VESTS"
    assert record["rc_manabar"] == {
        "current_mana": 1000000000,
        "last_update_time": 1550731380,
    }


def test_find_rc_accounts_without_accounts_is_null():
    assert RcApi().find_rc_accounts({"accounts": []}) == {"rc_accounts": None}
    assert RcApi().find_rc_accounts(None) == {"rc_accounts": None}


@pytest.mark.parametrize(
    "params", [{"accounts": ["alice", 3]}, {"accounts": "alice"}, ["alice"]]
)
def test_find_rc_accounts_rejects_bad_params(params):
    with pytest.raises(ValueError):
        RcApi().find_rc_accounts(params)


def test_expose_registers_method():
    api = RcApi()
    seen = []
    api.expose(lambda alias, name: seen.append((alias, name)))
    assert seen == [("find_rc_accounts", "find_rc_accounts")]
    assert callable(getattr(api, seen[0][1]))