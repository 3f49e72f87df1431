from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin


class Quiz(Base, TimestampMixin):
    __tablename__ = "quizzes"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    time_limit: Mapped[int] = mapped_column(Integer, nullable=False)  # 분 단위
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    qr_code: Mapped[str | None] = mapped_column(String, default=None, unique=True, index=True)

    questions: Mapped[list["Question"]] = relationship(
        "Question",
        back_populates="quiz",
        order_by="[Question.order_index, Question.id]",
    )
    participants: Mapped[list["Participant"]] = relationship(
        "Participant",
        back_populates="quiz",
    )
