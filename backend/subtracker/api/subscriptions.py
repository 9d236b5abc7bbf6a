"""Subscriptions CRUD API router.

Handlers are thin adapters: decode the body, make exactly one store call,
and return the result. Store and decode failures are rendered by the
handlers in ``subtracker.core.error_handlers``.
"""

from fastapi import APIRouter, Depends, Response, status

from subtracker.api.deps import get_subscription_store, json_body
from subtracker.models import Subscription
from subtracker.schemas.subscription import (
    SubscriptionCreate,
    SubscriptionDelete,
    SubscriptionResponse,
    SubscriptionUpdate,
)
from subtracker.services.subscription_store import SubscriptionStore

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])


@router.get(
    "",
    response_model=list[SubscriptionResponse],
    response_model_exclude_none=True,
    summary="List all subscriptions",
)
async def list_subscriptions(
    store: SubscriptionStore = Depends(get_subscription_store),
) -> list[Subscription]:
    """Return every subscription, ordered by id."""
    return await store.list_all()


@router.get(
    "/{subscription_id}",
    response_model=SubscriptionResponse,
    response_model_exclude_none=True,
    summary="Get a subscription by ID",
)
async def read_subscription(
    subscription_id: int,
    store: SubscriptionStore = Depends(get_subscription_store),
) -> Subscription:
    return await store.read(subscription_id)


@router.post(
    "",
    response_model=SubscriptionResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Create a subscription",
)
async def create_subscription(
    body: SubscriptionCreate = Depends(json_body(SubscriptionCreate)),
    store: SubscriptionStore = Depends(get_subscription_store),
) -> Subscription:
    """Create a subscription. Any ``id`` in the body is ignored; the store assigns one."""
    return await store.create(body)


@router.put(
    "/{subscription_id}",
    response_model=SubscriptionResponse,
    response_model_exclude_none=True,
    summary="Update a subscription",
)
async def update_subscription(
    subscription_id: int,
    body: SubscriptionUpdate = Depends(json_body(SubscriptionUpdate)),
    store: SubscriptionStore = Depends(get_subscription_store),
) -> Subscription:
    """Replace service name, cost and dates. ``user_id`` cannot be changed."""
    return await store.update(subscription_id, body)


@router.delete(
    "/{subscription_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete a subscription",
)
async def delete_subscription(
    subscription_id: str,
    body: SubscriptionDelete = Depends(json_body(SubscriptionDelete)),
    store: SubscriptionStore = Depends(get_subscription_store),
) -> Response:
    """Delete the subscription whose id is given in the body.

    The path id is accepted but not used. Deleting a missing id succeeds.
    """
    await store.delete(body.id)
    return Response(status_code=status.HTTP_200_OK)
