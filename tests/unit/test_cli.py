from __future__ import annotations

from typer.testing import CliRunner

from ipa_client.application.dtos.bag_dto import BagResultDTO, URLBagDTO
from ipa_client.application.dtos.lookup_dto import AppDTO, LookupResultDTO
from ipa_client.application.ports.http_client_port import Result
from ipa_client.config import Settings
from ipa_client.exceptions import RequestFailedError
from ipa_client.presentation.cli import main
from tests.unit._fakes_http import FakeClient, FakeMachine

runner = CliRunner()


def test_bag_prints_auth_endpoint(monkeypatch):
    client = FakeClient(result=Result(200, {}, BagResultDTO(url_bag=URLBagDTO(auth_endpoint="https://auth.example"))))
    monkeypatch.setattr(main, "build_client", lambda result_type: client)
    monkeypatch.setattr(main, "_machine", FakeMachine())

    res = runner.invoke(main.app, ["bag"])
    assert res.exit_code == 0
    assert "https://auth.example" in res.output


def test_lookup_prints_app(monkeypatch):
    app_dto = AppDTO(id=7, bundle_id="com.example.app", name="Example", version="2.0", price=0.0)
    client = FakeClient(result=Result(200, {}, LookupResultDTO(count=1, results=[app_dto])))
    monkeypatch.setattr(main, "build_client", lambda result_type: client)

    res = runner.invoke(main.app, ["lookup", "-b", "com.example.app", "-c", "JP"])
    assert res.exit_code == 0
    assert "Example (com.example.app) id=7 version=2.0" in res.output


def test_errors_exit_non_zero(monkeypatch):
    client = FakeClient(error=RequestFailedError("request failed: offline"))
    monkeypatch.setattr(main, "build_client", lambda result_type: client)

    res = runner.invoke(main.app, ["lookup", "-b", "com.example.app"])
    assert res.exit_code == 1


def test_corrupt_cookie_file_exits_cleanly(monkeypatch, tmp_path):
    path = tmp_path / "cookies"
    path.write_text("garbage\n")
    monkeypatch.setattr(main, "settings", Settings(cookie_path=str(path)))

    res = runner.invoke(main.app, ["lookup", "-b", "com.example.app"])
    assert res.exit_code == 1
    assert isinstance(res.exception, SystemExit)
