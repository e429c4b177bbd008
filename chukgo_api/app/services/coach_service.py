"""
Business logic for coach profiles.

A coach profile belongs to exactly one user.  ``CoachWithUser`` joins
the two; a coach whose user cannot be found is treated as if it did
not exist, so it is left out of every listing.  ``rating`` and
``review_count`` are maintained by ``ReviewService`` and are never set
through this service after creation.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..core.store import COACHES, USERS, EntityStore
from ..schemas.coach import CoachCreate, CoachRead, CoachWithUser

logger = logging.getLogger(__name__)

# sort key name -> (key function, descending)
COACH_SORTS: Dict[str, Tuple[Callable[[CoachWithUser], int], bool]] = {
    "rating": (lambda c: c.rating or 0, True),
    "reviews": (lambda c: c.review_count or 0, True),
    "price_low": (lambda c: c.hourly_rate or 0, False),
    "price_high": (lambda c: c.hourly_rate or 0, True),
}


def _matches_query(coach: CoachWithUser, query: str) -> bool:
    needle = query.lower()
    haystacks = (
        coach.user.full_name or "",
        " ".join(coach.specializations or []),
        coach.location or "",
        coach.user.bio or "",
        coach.certifications or "",
    )
    return any(needle in text.lower() for text in haystacks)


class CoachService:
    """Service for coach profiles and coach queries."""

    @classmethod
    async def get_coach(cls, store: EntityStore, coach_id: int) -> Optional[CoachRead]:
        record = store.get(COACHES, coach_id)
        return CoachRead.model_validate(record) if record else None

    @classmethod
    async def get_coach_with_user(cls, store: EntityStore, coach_id: int) -> Optional[CoachWithUser]:
        """Return the coach merged with its user, or ``None``.

        ``None`` is returned both when the coach is unknown and when its
        ``user_id`` does not resolve.
        """
        coach = store.get(COACHES, coach_id)
        if coach is None:
            return None
        user = store.get(USERS, coach["user_id"])
        if user is None:
            return None
        return CoachWithUser.model_validate({**coach, "user": user})

    @classmethod
    async def get_coach_by_user(cls, store: EntityStore, user_id: int) -> Optional[CoachRead]:
        for record in store.list(COACHES):
            if record["user_id"] == user_id:
                return CoachRead.model_validate(record)
        return None

    @classmethod
    async def list_coaches(cls, store: EntityStore) -> List[CoachWithUser]:
        """All coaches that resolve to a user, in store order."""
        coaches: List[CoachWithUser] = []
        for record in store.list(COACHES):
            coach = await cls.get_coach_with_user(store, record["id"])
            if coach:
                coaches.append(coach)
        return coaches

    @classmethod
    async def get_top_coaches(cls, store: EntityStore, limit: int) -> List[CoachWithUser]:
        """Highest rated coaches first; a missing rating counts as 0.

        Coaches with equal ratings keep their store order.
        """
        coaches = await cls.list_coaches(store)
        ranked = sorted(coaches, key=lambda c: c.rating or 0, reverse=True)
        return ranked[: max(limit, 0)]

    @classmethod
    async def search_coaches(
        cls,
        store: EntityStore,
        query: Optional[str] = None,
        province: Optional[str] = None,
        district: Optional[str] = None,
        specializations: Optional[Iterable[str]] = None,
        min_rate: Optional[int] = None,
        max_rate: Optional[int] = None,
        min_rating: Optional[int] = None,
        sort_by: Optional[str] = "rating",
    ) -> List[CoachWithUser]:
        """Filter and sort coaches for the coach finder.

        All filters are optional and combined with AND.  ``query`` is a
        case‑insensitive match over name, specializations, location,
        bio and certifications.  ``province`` and ``district`` are
        substring tests on the location; ``district`` only applies with
        a province.  ``specializations`` matches coaches having any of
        the given values.  ``min_rating`` is in stars×10 units.
        ``sort_by`` is one of ``COACH_SORTS`` and defaults to
        ``"rating"``; unknown values also sort by rating and ``None``
        keeps store order.
        """
        coaches = await cls.list_coaches(store)

        if query:
            coaches = [c for c in coaches if _matches_query(c, query)]
        if province:
            coaches = [
                c
                for c in coaches
                if province in c.location and (not district or district in c.location)
            ]
        if min_rate is not None:
            coaches = [c for c in coaches if (c.hourly_rate or 0) >= min_rate]
        if max_rate is not None:
            coaches = [c for c in coaches if (c.hourly_rate or 0) <= max_rate]
        wanted = [s for s in (specializations or []) if s]
        if wanted:
            coaches = [c for c in coaches if any(s in (c.specializations or []) for s in wanted)]
        if min_rating:
            coaches = [c for c in coaches if (c.rating or 0) >= min_rating]

        if sort_by is not None:
            key, descending = COACH_SORTS.get(sort_by, COACH_SORTS["rating"])
            coaches = sorted(coaches, key=key, reverse=descending)
        return coaches

    @classmethod
    async def create_coach(
        cls,
        store: EntityStore,
        user_id: int,
        data: CoachCreate,
        *,
        rating: Optional[int] = None,
        review_count: int = 0,
    ) -> CoachRead:
        """Create the coach profile of ``user_id``.

        A user owns at most one profile; a second one raises
        ``ValueError``.  ``rating``/``review_count`` are only passed
        when loading existing data.
        """
        if await cls.get_coach_by_user(store, user_id):
            raise ValueError(f"User {user_id} already has a coach profile")
        record = data.model_dump()
        record.update(user_id=user_id, rating=rating, review_count=review_count)
        stored = store.insert(COACHES, record)
        logger.info("Created coach %s for user %s", stored["id"], user_id)
        return CoachRead.model_validate(stored)
