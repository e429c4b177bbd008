"""Tests for coach, lesson and catalogue read endpoints."""

from httpx import AsyncClient

from tests.conftest import STUDENT_ID, auth_headers


# ── catalogue ───────────────────────────────────────────────────────


async def test_lesson_types_and_skill_levels(client: AsyncClient) -> None:
    response = await client.get("/api/v1/lesson-types")
    assert response.status_code == 200
    assert [t["name"] for t in response.json()] == ["개인 레슨", "그룹 레슨", "팀 코칭", "축구 캠프"]

    response = await client.get("/api/v1/skill-levels/4")
    assert response.json()["name"] == "고급"

    response = await client.get("/api/v1/skill-levels/9")
    assert response.status_code == 404


# ── coaches ─────────────────────────────────────────────────────────


async def test_top_coaches_default_limit(client: AsyncClient) -> None:
    response = await client.get("/api/v1/coaches/top")
    assert response.status_code == 200
    data = response.json()
    assert [c["rating"] for c in data] == [50, 48, 47]
    assert data[0]["user"]["full_name"] == "김민수"
    assert "password" not in data[0]["user"]


async def test_top_coaches_limit(client: AsyncClient) -> None:
    response = await client.get("/api/v1/coaches/top", params={"limit": 1})
    assert [c["user"]["username"] for c in response.json()] == ["kimcoach"]


async def test_coach_finder(client: AsyncClient) -> None:
    response = await client.get("/api/v1/coaches", params={"province": "서울", "district": "송파구"})
    assert response.status_code == 200
    assert [c["user"]["username"] for c in response.json()] == ["leejiyeon"]

    response = await client.get(
        "/api/v1/coaches", params={"specialization": ["팀 코칭", "여성 특화"], "sort_by": "price_high"}
    )
    assert [c["hourly_rate"] for c in response.json()] == [60000, 45000]


async def test_coach_profile_and_related(client: AsyncClient) -> None:
    response = await client.get("/api/v1/coaches/1")
    assert response.status_code == 200
    assert response.json()["review_count"] == 1

    lessons = (await client.get("/api/v1/coaches/1/lessons")).json()
    assert [lesson["title"] for lesson in lessons] == ["기초부터 배우는 축구 입문 코스"]

    reviews = (await client.get("/api/v1/coaches/1/reviews")).json()
    assert [r["rating"] for r in reviews] == [5]

    schedules = await client.get("/api/v1/coaches/1/schedules")
    assert schedules.json() == []


async def test_unknown_coach(client: AsyncClient) -> None:
    response = await client.get("/api/v1/coaches/99")
    assert response.status_code == 404
    assert response.json()["detail"] == "Coach not found"


# ── lessons ─────────────────────────────────────────────────────────


async def test_list_lessons(client: AsyncClient) -> None:
    response = await client.get("/api/v1/lessons")
    assert response.status_code == 200
    assert [lesson["id"] for lesson in response.json()] == [1, 2, 3]
    assert "coach" not in response.json()[0]


async def test_recommended_lessons(client: AsyncClient) -> None:
    response = await client.get("/api/v1/lessons/recommended", params={"limit": 2})
    data = response.json()
    assert [lesson["id"] for lesson in data] == [1, 2]
    assert data[1]["coach"]["user"]["full_name"] == "이지연"


async def test_search_lessons(client: AsyncClient) -> None:
    response = await client.get("/api/v1/lessons/search", params={"location": "서울"})
    assert [lesson["id"] for lesson in response.json()] == [1, 2]

    response = await client.get("/api/v1/lessons/search", params={"location": "모든 지역", "skill_level_id": 4})
    assert [lesson["id"] for lesson in response.json()] == [3]


async def test_lesson_detail(client: AsyncClient) -> None:
    response = await client.get("/api/v1/lessons/3")
    assert response.status_code == 200
    data = response.json()
    assert data["lesson_type"]["name"] == "팀 코칭"
    assert data["skill_level"]["name"] == "고급"
    assert data["coach"]["location"] == "경기 분당구"

    response = await client.get("/api/v1/lessons/30")
    assert response.status_code == 404


async def test_lesson_reviews(client: AsyncClient) -> None:
    response = await client.get("/api/v1/lessons/1/reviews")
    assert len(response.json()) == 1
    assert (await client.get("/api/v1/lessons/2/reviews")).json() == []


async def test_coach_finder_default_sort_is_rating(client: AsyncClient) -> None:
    # A new review drops the first coach below the other two.
    await client.post(
        "/api/v1/reviews",
        json={"lesson_id": 1, "rating": 1, "comment": "시간 약속을 지키지 않았어요"},
        headers=auth_headers(STUDENT_ID),
    )
    response = await client.get("/api/v1/coaches")
    assert [c["rating"] for c in response.json()] == [48, 47, 30]
    assert [c["user"]["username"] for c in response.json()] == ["leejiyeon", "parkjunho", "kimcoach"]
