"""Chukgo lessons API client.

A thin wrapper around the REST API served by ``chukgo_api`` built on
the ``requests`` library.  Every method returns a tuple
``(data, error)``: on success ``error`` is ``None``; on failure ``data``
is empty and ``error`` is a dictionary with the keys ``status_code``
and ``message``.  Methods never raise for HTTP or network errors.

The client exposes the operations a front end needs:

* :meth:`login` – authenticate and keep the returned token.
* :meth:`list_coaches` / :meth:`top_coaches` / :meth:`get_coach`.
* :meth:`search_lessons` / :meth:`recommended_lessons` / :meth:`get_lesson`.
* :meth:`create_booking` / :meth:`create_review` – need a token.
* :meth:`submit_inquiry` – send the contact form.

``base_url`` is the API root including the version prefix, e.g.
``http://localhost:8000/api/v1``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ChukgoAPI:
    """Client for the Chukgo lessons API."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: API root, e.g. ``http://localhost:8000/api/v1``.
            api_key: Optional bearer token.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is included
                in all requests.  :meth:`login` sets it.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()

    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/coaches``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=15,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = _detail_message(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def login(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log in and remember the access token for later calls.

        Returns the logged in user on success.
        """
        data, error = self._request(
            "POST", "/auth/login", json_body={"username": username, "password": password}
        )
        if error:
            return None, error
        if not isinstance(data, dict) or not data.get("access_token"):
            return None, {"status_code": None, "message": "Login response without access token"}
        self.api_key = data["access_token"]
        return data.get("user"), None

    # ------------------------------------------------------------------
    # Coaches
    # ------------------------------------------------------------------
    def list_coaches(
        self,
        *,
        query: Optional[str] = None,
        province: Optional[str] = None,
        district: Optional[str] = None,
        specializations: Optional[Iterable[str]] = None,
        min_rate: Optional[int] = None,
        max_rate: Optional[int] = None,
        min_rating: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List coaches; every filter is optional and only sent when set."""
        params = {
            "q": query,
            "province": province,
            "district": district,
            "specialization": list(specializations) if specializations else None,
            "min_rate": min_rate,
            "max_rate": max_rate,
            "min_rating": min_rating,
            "sort_by": sort_by,
        }
        return self._list("/coaches", {k: v for k, v in params.items() if v is not None})

    def top_coaches(self, limit: Optional[int] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/coaches/top", {"limit": limit} if limit else None)

    def get_coach(self, coach_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/coaches/{coach_id}")

    # ------------------------------------------------------------------
    # Lessons
    # ------------------------------------------------------------------
    def search_lessons(
        self,
        location: Optional[str] = None,
        lesson_type_id: Optional[int] = None,
        skill_level_id: Optional[int] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        params = {
            "location": location,
            "lesson_type_id": lesson_type_id,
            "skill_level_id": skill_level_id,
        }
        return self._list("/lessons/search", {k: v for k, v in params.items() if v is not None})

    def recommended_lessons(self, limit: Optional[int] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/lessons/recommended", {"limit": limit} if limit else None)

    def get_lesson(self, lesson_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/lessons/{lesson_id}")

    # ------------------------------------------------------------------
    # Bookings, reviews and contact
    # ------------------------------------------------------------------
    def create_booking(
        self, lesson_id: int, schedule_date: datetime | str, status: str = "pending"
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Book a lesson for the logged in user."""
        if isinstance(schedule_date, datetime):
            schedule_date = schedule_date.isoformat()
        payload = {"lesson_id": lesson_id, "schedule_date": schedule_date, "status": status}
        return self._request("POST", "/bookings", json_body=payload)

    def create_review(
        self, lesson_id: int, rating: int, comment: str, tags: Optional[List[str]] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {"lesson_id": lesson_id, "rating": rating, "comment": comment, "tags": tags or []}
        return self._request("POST", "/reviews", json_body=payload)

    def submit_inquiry(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send the contact form (name, email, phone, subject, message)."""
        return self._request("POST", "/contact", json_body=payload)


def _detail_message(body: Any) -> str:
    """Extract a readable message from a FastAPI error body."""
    if not isinstance(body, dict):
        return str(body)
    detail = body.get("detail") or body.get("message")
    if isinstance(detail, list):
        # 422 responses carry a list of validation errors.
        return "; ".join(str(item.get("msg", item)) if isinstance(item, dict) else str(item) for item in detail)
    return str(detail) if detail else str(body)
