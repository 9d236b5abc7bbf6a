"""Pydantic v2 request/response schemas for subscription endpoints."""

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, StrictInt


def _truncate_timestamp(value: Any) -> Any:
    """Accept RFC3339 timestamps and keep only their calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value.upper():
        try:
            return datetime.fromisoformat(value.upper()).date()
        except ValueError:
            return value  # let pydantic report the bad date
    return value


CalendarDate = Annotated[date, BeforeValidator(_truncate_timestamp)]

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class SubscriptionCreate(BaseModel):
    """Schema for creating a subscription. A client-sent ``id`` is ignored."""

    service_name: str
    cost: StrictInt
    user_id: StrictInt
    start_date: CalendarDate
    end_date: CalendarDate | None = None


class SubscriptionUpdate(BaseModel):
    """Replacement values for an existing subscription.

    ``id`` and ``user_id`` may appear in the body but are ignored.
    """

    service_name: str
    cost: StrictInt
    start_date: CalendarDate
    end_date: CalendarDate | None = None


class SubscriptionDelete(BaseModel):
    """Delete payload; the target id comes from the body, not the path."""

    id: StrictInt


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class SubscriptionResponse(BaseModel):
    """Subscription as returned by the API. ``end_date`` is omitted when absent."""

    id: int
    service_name: str
    cost: int
    user_id: int
    start_date: date
    end_date: date | None = None

    model_config = ConfigDict(from_attributes=True)
