"""
Initial data for a fresh store.

``init_store`` is run once at application startup.  It loads the
sample catalogue (skill levels, lesson types, three coaches with one
lesson each, a student and a first review) when ``settings.seed_data``
is enabled, then makes sure the administrator account exists.  The
sample review goes through ``ReviewService`` so the first coach's
rating is recomputed exactly as for any other review.
"""

import logging
from typing import Any, Dict, List

from ..schemas.coach import CoachCreate
from ..schemas.company_info import CompanyInfoCreate
from ..schemas.lesson import LessonCreate
from ..schemas.review import ReviewCreate
from ..schemas.user import UserCreate
from ..services.catalog_service import CatalogService
from ..services.coach_service import CoachService
from ..services.company_info_service import CompanyInfoService
from ..services.lesson_service import LessonService
from ..services.review_service import ReviewService
from ..services.user_service import UserService
from .config import settings
from .store import EntityStore

logger = logging.getLogger(__name__)

SKILL_LEVELS = [
    ("입문", "축구를 처음 접하는 초보자"),
    ("초급", "기본 기술을 익히고 있는 단계"),
    ("중급", "경기를 즐길 수 있는 수준"),
    ("고급", "전술과 심화 기술을 배우는 단계"),
]

LESSON_TYPES = [
    ("개인 레슨", "1:1 맞춤형 레슨"),
    ("그룹 레슨", "소그룹 단위 수업"),
    ("팀 코칭", "팀 전체를 위한 체계적인 코칭"),
    ("축구 캠프", "집중 트레이닝 캠프"),
]

# Each coach entry carries its user, its profile and its one lesson.
SAMPLE_COACHES: List[Dict[str, Any]] = [
    {
        "user": {
            "username": "kimcoach",
            "email": "kim@example.com",
            "full_name": "김민수",
            "phone": "010-1234-5678",
            "profile_image": "https://images.pexels.com/photos/3785424/pexels-photo-3785424.jpeg?auto=compress&cs=tinysrgb&w=800",
            "bio": "전 프로축구 선수 출신으로 10년 이상의 코칭 경력을 보유. 기초부터 고급 기술까지 체계적인 교육.",
        },
        "coach": {
            "specializations": ["개인 레슨", "그룹 레슨", "유소년", "성인"],
            "experience": "10년 이상의 코칭 경력, 전 프로축구 선수",
            "certifications": "KFA 지도자 라이센스",
            "location": "서울 강남구",
            "hourly_rate": 50000,
        },
        "rating": 49,
        "review_count": 56,
        "lesson": {
            "title": "기초부터 배우는 축구 입문 코스",
            "description": "축구를 처음 접하는 분들을 위한 기초 기술 교육. 패스, 드리블, 슈팅의 기본기를 배우는 4주 과정.",
            "lesson_type_id": 2,
            "skill_level_id": 1,
            "location": "서울 강남구",
            "group_size": 5,
            "duration": 90,
            "price": 180000,
            "image": "https://images.pexels.com/photos/3041176/pexels-photo-3041176.jpeg?auto=compress&cs=tinysrgb&w=800",
            "tags": ["입문자 대상", "소그룹", "기초 기술"],
        },
    },
    {
        "user": {
            "username": "leejiyeon",
            "email": "lee@example.com",
            "full_name": "이지연",
            "phone": "010-2345-6789",
            "profile_image": "https://images.pexels.com/photos/6952392/pexels-photo-6952392.jpeg?auto=compress&cs=tinysrgb&w=800",
            "bio": "여성 축구 국가대표 출신으로 여성 및 유소년 선수 전문 코치. 친절하고 체계적인 교육 방식으로 인기가 높음.",
        },
        "coach": {
            "specializations": ["개인 레슨", "여성 특화", "유소년", "피지컬"],
            "experience": "여성 국가대표 출신, 8년 코칭 경력",
            "certifications": "KFA 여성 축구 지도자",
            "location": "서울 송파구",
            "hourly_rate": 45000,
        },
        "rating": 48,
        "review_count": 42,
        "lesson": {
            "title": "주말 축구 기술 향상 프로그램",
            "description": "주말에만 진행되는 집중 기술 향상 프로그램. 드리블, 패스, 슈팅 등 종합적인 기술 훈련.",
            "lesson_type_id": 2,
            "skill_level_id": 2,
            "location": "서울 송파구",
            "group_size": 8,
            "duration": 120,
            "price": 120000,
            "image": "https://images.pexels.com/photos/6638829/pexels-photo-6638829.jpeg?auto=compress&cs=tinysrgb&w=800",
            "tags": ["주말 수업", "초중급자", "기술 향상"],
        },
    },
    {
        "user": {
            "username": "parkjunho",
            "email": "park@example.com",
            "full_name": "박준호",
            "phone": "010-3456-7890",
            "profile_image": "https://images.pexels.com/photos/6551072/pexels-photo-6551072.jpeg?auto=compress&cs=tinysrgb&w=800",
            "bio": "AFC A급 라이센스 보유, 중/고급자를 위한 전술 훈련 전문. 팀 코칭 및 개인 기술 향상에 특화.",
        },
        "coach": {
            "specializations": ["팀 코칭", "전술 훈련", "중/고급자", "GK 특화"],
            "experience": "15년 코칭 경력, 프로팀 코치 경험",
            "certifications": "AFC A급 라이센스",
            "location": "경기 분당구",
            "hourly_rate": 60000,
        },
        "rating": 47,
        "review_count": 38,
        "lesson": {
            "title": "전술 마스터 클래스",
            "description": "팀 전술과 포지션별 역할에 대한 고급 훈련. 실전 경기 분석 및 전술 응용 능력 향상.",
            "lesson_type_id": 3,
            "skill_level_id": 4,
            "location": "경기 분당구",
            "group_size": 10,
            "duration": 150,
            "price": 300000,
            "image": "https://images.pexels.com/photos/4008431/pexels-photo-4008431.jpeg?auto=compress&cs=tinysrgb&w=800",
            "tags": ["팀 전술", "고급자", "경기 분석"],
        },
    },
]

SAMPLE_STUDENT = {
    "username": "student1",
    "email": "student1@example.com",
    "full_name": "이영준",
}

SAMPLE_PASSWORD = "password123"

SAMPLE_REVIEW = (
    "김민수 코치님의 기초 축구 레슨을 받았어요. 30대 중반에 처음 축구를 시작했는데, "
    "너무 쉽고 재미있게 알려주셔서 빠르게 실력이 향상되었습니다. "
    "개인의 특성에 맞춰 교육해주시는 점이 정말 좋았습니다."
)

SAMPLE_COMPANY_INFO = {
    "section": "vision",
    "title": "비전 및 미션",
    "content": "누구나 가까운 곳에서 좋은 코치를 만나 축구를 즐길 수 있도록 돕습니다.",
}


async def seed_store(store: EntityStore) -> None:
    """Load the sample catalogue into ``store``."""
    for name, description in SKILL_LEVELS:
        await CatalogService.create_skill_level(store, name, description)
    for name, description in LESSON_TYPES:
        await CatalogService.create_lesson_type(store, name, description)

    for sample in SAMPLE_COACHES:
        user = await UserService.create_user(
            store, UserCreate(password=SAMPLE_PASSWORD, **sample["user"]), is_coach=True
        )
        coach = await CoachService.create_coach(
            store,
            user.id,
            CoachCreate(**sample["coach"]),
            rating=sample["rating"],
            review_count=sample["review_count"],
        )
        await LessonService.create_lesson(store, coach.id, LessonCreate(**sample["lesson"]))

    student = await UserService.create_user(store, UserCreate(password=SAMPLE_PASSWORD, **SAMPLE_STUDENT))
    await ReviewService.create_review(
        store, student.id, ReviewCreate(lesson_id=1, rating=5, comment=SAMPLE_REVIEW)
    )
    await CompanyInfoService.create_company_info(store, CompanyInfoCreate(**SAMPLE_COMPANY_INFO))
    logger.info("Seeded store with %s coaches", len(SAMPLE_COACHES))


async def init_store(store: EntityStore) -> None:
    """Prepare a freshly created store for serving requests."""
    if settings.seed_data:
        await seed_store(store)
    await UserService.ensure_admin(
        store, settings.admin_username, settings.admin_password, settings.admin_email
    )
