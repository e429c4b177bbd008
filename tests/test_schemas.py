import pytest
from pydantic import ValidationError

from chukgo_api.app.schemas.company_info import CompanyInfoCreate, CompanyInfoUpdate
from chukgo_api.app.schemas.inquiry import ContactForm
from chukgo_api.app.schemas.lesson import LessonCreate
from chukgo_api.app.schemas.review import ReviewCreate
from chukgo_api.app.schemas.schedule import ScheduleCreate
from chukgo_api.app.schemas.user import UserCreate


class TestReviewSchemas:
    def test_comment_is_stripped(self) -> None:
        review = ReviewCreate(lesson_id=1, rating=4, comment="   재미있고 유익한 수업이었어요   ")
        assert review.comment == "재미있고 유익한 수업이었어요"

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, rating: int) -> None:
        with pytest.raises(ValidationError):
            ReviewCreate(lesson_id=1, rating=rating, comment="재미있고 유익한 수업이었어요")

    def test_short_comment(self) -> None:
        with pytest.raises(ValidationError):
            ReviewCreate(lesson_id=1, rating=5, comment="   좋아요     ")

    def test_long_comment(self) -> None:
        with pytest.raises(ValidationError):
            ReviewCreate(lesson_id=1, rating=5, comment="가" * 1001)


class TestContactForm:
    def test_valid(self) -> None:
        form = ContactForm(
            name="홍길동", email="hong@example.com", subject="레슨 문의", message="주말 레슨이 가능한지 궁금합니다."
        )
        assert form.phone is None

    def test_invalid_email(self) -> None:
        with pytest.raises(ValidationError):
            ContactForm(name="홍길동", email="not-an-email", subject="레슨 문의", message="주말 레슨이 가능한지 궁금합니다.")

    def test_short_phone(self) -> None:
        with pytest.raises(ValidationError):
            ContactForm(
                name="홍길동",
                email="hong@example.com",
                phone="010",
                subject="레슨 문의",
                message="주말 레슨이 가능한지 궁금합니다.",
            )


class TestOtherSchemas:
    def test_unknown_company_section(self) -> None:
        with pytest.raises(ValidationError):
            CompanyInfoCreate(section="careers", title="채용", content="함께 일할 코치를 찾습니다.")

    def test_company_update_partial(self) -> None:
        update = CompanyInfoUpdate(title="연혁")
        assert update.model_dump(exclude_unset=True) == {"title": "연혁"}

    def test_schedule_time_format(self) -> None:
        with pytest.raises(ValidationError):
            ScheduleCreate(day_of_week=1, start_time="25:00", end_time="26:00")

    def test_schedule_day_range(self) -> None:
        with pytest.raises(ValidationError):
            ScheduleCreate(day_of_week=7, start_time="18:00", end_time="20:00")

    def test_lesson_group_size(self) -> None:
        with pytest.raises(ValidationError):
            LessonCreate(
                title="입문", description="기초", location="서울", group_size=0, duration=60, price=10000
            )

    def test_short_password(self) -> None:
        with pytest.raises(ValidationError):
            UserCreate(username="student", password="123", email="s@example.com", full_name="학생")
