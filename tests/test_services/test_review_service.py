import pytest

from chukgo_api.app.core.store import COACHES, LESSONS, USERS, EntityStore
from chukgo_api.app.schemas.review import ReviewCreate
from chukgo_api.app.services.coach_service import CoachService
from chukgo_api.app.services.review_service import ReviewService, scaled_mean_rating

COMMENT = "코치님 덕분에 실력이 많이 늘었습니다"


@pytest.mark.parametrize(
    "ratings, expected",
    [
        ([5, 3, 4], 40),
        ([5, 4], 45),
        ([4, 4, 5], 43),
        ([1, 2], 15),
        ([5], 50),
        ([], None),
    ],
)
def test_scaled_mean_rating(ratings, expected) -> None:
    assert scaled_mean_rating(ratings) == expected


def _bare_store_with_lesson() -> EntityStore:
    store = EntityStore()
    user = store.insert(USERS, {"username": "coach", "full_name": "코치"})
    coach = store.insert(
        COACHES, {"user_id": user["id"], "location": "서울", "hourly_rate": 1, "rating": None, "review_count": 0}
    )
    for title in ("첫 번째", "두 번째"):
        store.insert(
            LESSONS,
            {
                "coach_id": coach["id"],
                "title": title,
                "description": "레슨",
                "location": "서울",
                "group_size": 1,
                "duration": 60,
                "price": 1,
            },
        )
    return store


async def test_rating_recomputed_from_all_reviews() -> None:
    store = _bare_store_with_lesson()
    for rating in (5, 3, 4):
        await ReviewService.create_review(store, 1, ReviewCreate(lesson_id=1, rating=rating, comment=COMMENT))

    coach = await CoachService.get_coach(store, 1)
    assert coach.rating == 40
    assert coach.review_count == 3


async def test_reviews_on_every_lesson_of_the_coach_count() -> None:
    store = _bare_store_with_lesson()
    await ReviewService.create_review(store, 1, ReviewCreate(lesson_id=1, rating=5, comment=COMMENT))
    await ReviewService.create_review(store, 1, ReviewCreate(lesson_id=2, rating=4, comment=COMMENT))

    coach = await CoachService.get_coach(store, 1)
    assert coach.rating == 45
    assert coach.review_count == 2
    assert [r.lesson_id for r in await ReviewService.get_reviews_by_coach(store, 1)] == [1, 2]
    assert len(await ReviewService.get_reviews_by_lesson(store, 2)) == 1


async def test_seeded_rating_is_replaced_by_recomputation(seeded_store: EntityStore) -> None:
    # Seeded with 49/56; the single stored review (5 stars) overrides it.
    coach = await CoachService.get_coach(seeded_store, 1)
    assert coach.rating == 50
    assert coach.review_count == 1

    await ReviewService.create_review(seeded_store, 4, ReviewCreate(lesson_id=1, rating=3, comment=COMMENT))
    coach = await CoachService.get_coach(seeded_store, 1)
    assert coach.rating == 40
    assert coach.review_count == 2


async def test_review_for_unknown_lesson_is_stored_without_cascade(seeded_store: EntityStore) -> None:
    before = [c.model_dump() for c in await CoachService.list_coaches(seeded_store)]
    review = await ReviewService.create_review(
        seeded_store, 4, ReviewCreate(lesson_id=99, rating=1, comment=COMMENT)
    )

    assert (await ReviewService.get_review(seeded_store, review.id)).lesson_id == 99
    after = [c.model_dump() for c in await CoachService.list_coaches(seeded_store)]
    assert after == before


async def test_review_for_lesson_with_unknown_coach(seeded_store: EntityStore) -> None:
    seeded_store.update(LESSONS, 3, {"coach_id": 99})
    review = await ReviewService.create_review(
        seeded_store, 4, ReviewCreate(lesson_id=3, rating=1, comment=COMMENT)
    )
    assert review.id == 2
    park = await CoachService.get_coach(seeded_store, 3)
    assert (park.rating, park.review_count) == (47, 38)
