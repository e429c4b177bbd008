"""Tests for booking and review endpoints."""

from httpx import AsyncClient

from tests.conftest import ADMIN_ID, KIM_USER_ID, LEE_USER_ID, STUDENT_ID, auth_headers

REVIEW = "기본기부터 차근차근 알려주셔서 좋았어요"


async def _book(client: AsyncClient, lesson_id: int = 1) -> dict:
    response = await client.post(
        "/api/v1/bookings",
        json={"lesson_id": lesson_id, "schedule_date": "2025-05-10T10:00:00"},
        headers=auth_headers(STUDENT_ID),
    )
    assert response.status_code == 201
    return response.json()


# ── bookings ────────────────────────────────────────────────────────


async def test_create_and_list_bookings(client: AsyncClient) -> None:
    first = await _book(client)
    second = await _book(client)
    assert first["status"] == "pending"
    assert first["user_id"] == STUDENT_ID
    assert second["id"] == first["id"] + 1

    response = await client.get("/api/v1/bookings/me", headers=auth_headers(STUDENT_ID))
    assert [b["id"] for b in response.json()] == [first["id"], second["id"]]


async def test_booking_requires_login(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/bookings", json={"lesson_id": 1, "schedule_date": "2025-05-10T10:00:00"}
    )
    assert response.status_code == 401


async def test_booking_unknown_lesson(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/bookings",
        json={"lesson_id": 77, "schedule_date": "2025-05-10T10:00:00"},
        headers=auth_headers(STUDENT_ID),
    )
    assert response.status_code == 404


async def test_get_booking_visibility(client: AsyncClient) -> None:
    booking = await _book(client)
    url = f"/api/v1/bookings/{booking['id']}"

    assert (await client.get(url, headers=auth_headers(STUDENT_ID))).status_code == 200
    assert (await client.get(url, headers=auth_headers(ADMIN_ID))).status_code == 200
    assert (await client.get(url, headers=auth_headers(LEE_USER_ID))).status_code == 403
    assert (await client.get("/api/v1/bookings/99", headers=auth_headers(ADMIN_ID))).status_code == 404


async def test_update_status_permissions(client: AsyncClient) -> None:
    booking = await _book(client)
    url = f"/api/v1/bookings/{booking['id']}/status"

    # Lee coaches lesson 2, not lesson 1.
    response = await client.put(url, json={"status": "confirmed"}, headers=auth_headers(LEE_USER_ID))
    assert response.status_code == 403

    response = await client.put(url, json={"status": "confirmed"}, headers=auth_headers(KIM_USER_ID))
    assert response.status_code == 200
    assert response.json()["status"] == "confirmed"

    response = await client.put(url, json={"status": "cancelled"}, headers=auth_headers(STUDENT_ID))
    assert response.json()["status"] == "cancelled"

    response = await client.put(
        "/api/v1/bookings/99/status", json={"status": "confirmed"}, headers=auth_headers(ADMIN_ID)
    )
    assert response.status_code == 404


async def test_lesson_bookings_for_coach_only(client: AsyncClient) -> None:
    await _book(client, lesson_id=1)
    url = "/api/v1/lessons/1/bookings"

    assert (await client.get(url, headers=auth_headers(STUDENT_ID))).status_code == 403
    response = await client.get(url, headers=auth_headers(KIM_USER_ID))
    assert response.status_code == 200
    assert len(response.json()) == 1
    assert (await client.get(url, headers=auth_headers(ADMIN_ID))).status_code == 200


# ── reviews ─────────────────────────────────────────────────────────


async def test_review_updates_coach_rating(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/reviews",
        json={"lesson_id": 1, "rating": 3, "comment": REVIEW, "tags": ["친절함"]},
        headers=auth_headers(STUDENT_ID),
    )
    assert response.status_code == 201
    review = response.json()

    coach = (await client.get("/api/v1/coaches/1")).json()
    assert coach["rating"] == 40
    assert coach["review_count"] == 2

    response = await client.get(f"/api/v1/reviews/{review['id']}")
    assert response.json()["tags"] == ["친절함"]


async def test_review_validation(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/reviews",
        json={"lesson_id": 1, "rating": 6, "comment": REVIEW},
        headers=auth_headers(STUDENT_ID),
    )
    assert response.status_code == 422

    response = await client.post(
        "/api/v1/reviews",
        json={"lesson_id": 1, "rating": 5, "comment": "짧아요"},
        headers=auth_headers(STUDENT_ID),
    )
    assert response.status_code == 422


async def test_review_unknown_lesson(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/reviews",
        json={"lesson_id": 50, "rating": 5, "comment": REVIEW},
        headers=auth_headers(STUDENT_ID),
    )
    assert response.status_code == 404
    assert (await client.get("/api/v1/reviews/50")).status_code == 404
