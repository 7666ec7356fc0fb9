"""Paginated people table served in the requested language."""

from __future__ import annotations

from http import HTTPStatus

import pytest
from flask.testing import FlaskClient


def test_first_page_in_default_language(client: FlaskClient) -> None:
    response = client.get("/api/v1/people")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()

    assert payload["locale"] == "en"
    assert [column["label"] for column in payload["columns"]] == ["ID", "Name", "Age", "Country"]
    assert [row["name"] for row in payload["rows"]] == ["John Doe", "Jane Smith"]
    assert payload["page"] == 1
    assert payload["total_pages"] == 2
    assert payload["page_info"] == "Page 1 of 2"


def test_second_page_in_french(client: FlaskClient) -> None:
    payload = client.get("/api/v1/people?page=2&locale=fr").get_json()

    assert payload["rows"] == [{"id": 3, "name": "Bob Johnson", "age": 35, "country": "UK"}]
    assert payload["columns"][0]["label"] == "Identifiant"
    assert payload["page_info"] == "Page 2 sur 2"
    assert payload["previous_label"] == "Précédent"


def test_accept_language_selects_the_locale(client: FlaskClient) -> None:
    payload = client.get("/api/v1/people", headers={"Accept-Language": "zh-TW,zh;q=0.9"}).get_json()

    assert payload["locale"] == "zh"
    assert payload["next_label"] == "下一頁"


def test_page_size_follows_settings(client: FlaskClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LANGSWITCH_PAGE_SIZE", "5")

    payload = client.get("/api/v1/people").get_json()

    assert len(payload["rows"]) == 3
    assert payload["total_pages"] == 1


@pytest.mark.parametrize(("page", "message"), [("abc", "integer"), ("9", "out of range")])
def test_invalid_pages_are_rejected(client: FlaskClient, page: str, message: str) -> None:
    response = client.get(f"/api/v1/people?page={page}")

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert message in response.get_json()["message"]
