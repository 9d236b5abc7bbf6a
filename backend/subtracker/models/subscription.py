"""Subscription model — one row per tracked service subscription."""

from datetime import date

from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from subtracker.database import Base


class Subscription(Base):
    """A user's paid subscription to an external service."""

    __tablename__ = "subscriptions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    service_name: Mapped[str] = mapped_column(Text, nullable=False)
    cost: Mapped[int] = mapped_column(Integer, nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    start_date: Mapped[date] = mapped_column(nullable=False)
    end_date: Mapped[date | None] = mapped_column(nullable=True)  # NULL = open-ended

    __table_args__ = (
        CheckConstraint("cost >= 0", name="ck_subscriptions_cost_non_negative"),
        CheckConstraint("service_name <> ''", name="ck_subscriptions_service_name_not_empty"),
    )

    def __repr__(self) -> str:
        return (
            f"<Subscription(id={self.id}, service_name={self.service_name}, "
            f"user_id={self.user_id}, cost={self.cost})>"
        )
