from unittest import mock

import pytest

from hivemimic.cli import main


@pytest.fixture
def environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MONGO_URL", "mongodb://localhost:27099")


def test_main_connects_and_serves(environment):
    with mock.patch("hivemimic.db.client.MongoClient") as client_cls, mock.patch(
        "http.server.ThreadingHTTPServer.serve_forever", side_effect=KeyboardInterrupt
    ) as serve:
        status = main(["--port", "0"])
    assert status == 0
    client_cls.assert_called_once_with("mongodb://localhost:27099")
    client = client_cls.return_value
    client.admin.command.assert_called_once_with("ping")
    client.get_database.assert_called_once_with("go-mimic")
    collections = [c.args[0] for c in client.get_database.return_value.get_collection.call_args_list]
    assert collections == ["blocks", "state"]
    assert serve.call_count == 1
    client.close.assert_called_once_with()


def test_main_serves_even_if_database_unreachable(environment):
    with mock.patch("hivemimic.db.client.MongoClient") as client_cls, mock.patch(
        "http.server.ThreadingHTTPServer.serve_forever", side_effect=KeyboardInterrupt
    ) as serve:
        client_cls.return_value.admin.command.side_effect = ConnectionError("down")
        status = main(["--port", "0"])
    assert status == 0
    assert serve.call_count == 1
    client_cls.return_value.get_database.assert_not_called()
    client_cls.return_value.close.assert_not_called()


def test_main_rejects_bad_port(environment):
    with pytest.raises(SystemExit) as excinfo:
        main(["--port", "abc"])
    assert excinfo.value.code == 2