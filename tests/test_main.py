"""Tests for the command line entry point."""

import json
from pathlib import Path
from typing import Any

import httpx
import pytest
from respx import MockRouter

from tests.conftest import BASE_URL, OAUTH_URL, TOKEN_PAYLOAD, form_fields
from twobbble.main import build_parser, main


@pytest.fixture(autouse=True)
def _cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DRIBBBLE_BASE_URL", BASE_URL)
    monkeypatch.setenv("DRIBBBLE_OAUTH_URL", OAUTH_URL)
    monkeypatch.setenv("DRIBBBLE_ACCESS_TOKEN", "cli-token")
    monkeypatch.setenv("DRIBBBLE_CLIENT_ID", "app-id")
    monkeypatch.setenv("DRIBBBLE_CLIENT_SECRET", "app-secret")
    monkeypatch.setenv("LOG_FORMAT", "json")


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_rejects_unknown_sort() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["shots", "--sort", "popular"])


@pytest.mark.asyncio
async def test_me_prints_user_json(
    respx_mock: MockRouter, user_payload: dict[str, Any], capsys: pytest.CaptureFixture[str]
) -> None:
    route = respx_mock.get(f"{BASE_URL}/user").mock(
        return_value=httpx.Response(200, json=user_payload)
    )

    exit_code = await main(["me"])

    assert exit_code == 0
    assert route.calls.last.request.url.params["access_token"] == "cli-token"
    printed = json.loads(capsys.readouterr().out)
    assert printed["username"] == "simplebits"


@pytest.mark.asyncio
async def test_shots_passes_filters(
    respx_mock: MockRouter, shot_payload: dict[str, Any], capsys: pytest.CaptureFixture[str]
) -> None:
    route = respx_mock.get(f"{BASE_URL}/shots").mock(
        return_value=httpx.Response(200, json=[shot_payload])
    )

    exit_code = await main(["shots", "--list", "debuts", "--timeframe", "month", "--page", "2"])

    assert exit_code == 0
    params = route.calls.last.request.url.params
    assert params["list"] == "debuts"
    assert params["timeframe"] == "month"
    assert params["page"] == "2"
    assert "sort" not in params
    assert [shot["id"] for shot in json.loads(capsys.readouterr().out)] == [471756]


@pytest.mark.asyncio
async def test_user_shots_without_id_targets_authenticated_user(
    respx_mock: MockRouter, shot_payload: dict[str, Any]
) -> None:
    respx_mock.get(f"{BASE_URL}/user/shots").mock(
        return_value=httpx.Response(200, json=[shot_payload])
    )

    assert await main(["user-shots"]) == 0


@pytest.mark.asyncio
async def test_user_shots_with_id_targets_other_user(
    respx_mock: MockRouter, shot_payload: dict[str, Any]
) -> None:
    respx_mock.get(f"{BASE_URL}/users/42/shots").mock(
        return_value=httpx.Response(200, json=[shot_payload])
    )

    assert await main(["user-shots", "--user-id", "42"]) == 0


@pytest.mark.asyncio
async def test_token_exchange(respx_mock: MockRouter, capsys: pytest.CaptureFixture[str]) -> None:
    route = respx_mock.post(f"{OAUTH_URL}/oauth/token").mock(
        return_value=httpx.Response(200, json=TOKEN_PAYLOAD)
    )

    assert await main(["token", "code-123"]) == 0
    assert form_fields(route.calls.last.request)["code"] == "code-123"
    assert json.loads(capsys.readouterr().out)["token_type"] == "bearer"


@pytest.mark.asyncio
async def test_api_error_exits_non_zero(
    respx_mock: MockRouter, capsys: pytest.CaptureFixture[str]
) -> None:
    respx_mock.get(f"{BASE_URL}/user/buckets").mock(
        return_value=httpx.Response(401, json={"message": "Bad credentials."})
    )

    assert await main(["buckets"]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_missing_access_token_exits_without_request(
    respx_mock: MockRouter, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("DRIBBBLE_ACCESS_TOKEN")

    assert await main(["likes"]) == 1
    assert len(respx_mock.calls) == 0
