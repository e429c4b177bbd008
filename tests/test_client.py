"""Tests for the requests based API client."""

import json
from datetime import datetime
from unittest.mock import MagicMock

import requests

from chukgo_client import ChukgoAPI

BASE = "http://api.test/api/v1"


def _response(payload, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


def _client(*responses) -> ChukgoAPI:
    session = MagicMock()
    session.request.side_effect = list(responses)
    return ChukgoAPI(BASE, session=session)


class TestRequests:
    def test_success_returns_data(self) -> None:
        api = _client(_response([{"id": 1}]))
        coaches, error = api.top_coaches(limit=1)
        assert coaches == [{"id": 1}]
        assert error is None

        kwargs = api.session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == f"{BASE}/coaches/top"
        assert kwargs["params"] == {"limit": 1}
        assert "Authorization" not in kwargs["headers"]

    def test_http_error_is_reported(self) -> None:
        api = _client(_response({"detail": "Coach not found"}, status_code=404))
        coach, error = api.get_coach(9)
        assert coach is None
        assert error == {"status_code": 404, "message": "Coach not found"}

    def test_validation_errors_are_joined(self) -> None:
        body = {"detail": [{"msg": "field required"}, {"msg": "value is not a valid email address"}]}
        api = _client(_response(body, status_code=422))
        _, error = api.submit_inquiry({"name": "홍길동"})
        assert error["status_code"] == 422
        assert error["message"] == "field required; value is not a valid email address"

    def test_network_error(self) -> None:
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("connection refused")
        api = ChukgoAPI(BASE, session=session)
        lessons, error = api.search_lessons(location="서울")
        assert lessons == []
        assert error == {"status_code": None, "message": "connection refused"}

    def test_list_filters_skip_missing_values(self) -> None:
        api = _client(_response([]))
        api.list_coaches(province="서울", specializations=["유소년"], sort_by="rating")
        assert api.session.request.call_args.kwargs["params"] == {
            "province": "서울",
            "specialization": ["유소년"],
            "sort_by": "rating",
        }


class TestAuthenticatedCalls:
    def test_login_stores_token(self) -> None:
        login = _response({"access_token": "abc", "token_type": "bearer", "user": {"id": 4}})
        booking = _response({"id": 1, "status": "pending"})
        api = _client(login, booking)

        user, error = api.login("student1", "password123")
        assert (user, error) == ({"id": 4}, None)
        assert api.api_key == "abc"

        data, error = api.create_booking(1, datetime(2025, 5, 10, 10, 0))
        assert data["status"] == "pending"
        kwargs = api.session.request.call_args.kwargs
        assert kwargs["headers"]["Authorization"] == "Bearer abc"
        assert kwargs["json"] == {"lesson_id": 1, "schedule_date": "2025-05-10T10:00:00", "status": "pending"}

    def test_failed_login_keeps_no_token(self) -> None:
        api = _client(_response({"detail": "Invalid username or password"}, status_code=401))
        user, error = api.login("student1", "wrong")
        assert user is None
        assert error["status_code"] == 401
        assert api.api_key is None

    def test_create_review_payload(self) -> None:
        api = _client(_response({"id": 2}))
        api.api_key = "token"
        api.create_review(1, 5, "정말 유익한 수업이었습니다")
        kwargs = api.session.request.call_args.kwargs
        assert kwargs["url"] == f"{BASE}/reviews"
        assert kwargs["json"]["tags"] == []
