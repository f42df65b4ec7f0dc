"""Place domain router.

Owner-scoped place routes. The owner is always the authenticated user; no
route accepts a user id from the client.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.auth.dependencies import CurrentUserDep, require_auth
from app.core.constants import CommonResponses, Routes
from app.core.deps import SessionDep
from app.place.schemas import (
    DeletePlaceResult,
    PlaceCreate,
    PlaceFilter,
    PlaceRead,
    PlaceStats,
    PlaceUpdate,
)
from app.place.service import (
    create_place,
    delete_place,
    get_user_places,
    get_user_stats,
    update_place,
)

router = APIRouter(
    prefix=Routes.PLACE.prefix,
    tags=[Routes.PLACE.tag],
    dependencies=[Depends(require_auth)],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.UNPROCESSABLE,
    },
)


@router.post(
    "",
    response_model=PlaceRead,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.NOT_FOUND},
)
async def create(place_data: PlaceCreate, user: CurrentUserDep, session: SessionDep):
    """Save a new place. New places always start unvisited."""
    return create_place(session, user.id, place_data)


@router.get("", response_model=list[PlaceRead])
async def list_places(
    filters: Annotated[PlaceFilter, Query()],
    user: CurrentUserDep,
    session: SessionDep,
):
    """List the current user's places, optionally filtered by city, type and
    visited flag."""
    return get_user_places(session, user.id, filters)


@router.get("/stats", response_model=PlaceStats)
async def stats(user: CurrentUserDep, session: SessionDep):
    """Aggregate counts over the current user's places."""
    return get_user_stats(session, user.id)


@router.patch(
    "/{place_id}",
    response_model=PlaceRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def update(
    place_id: int,
    place_update: PlaceUpdate,
    user: CurrentUserDep,
    session: SessionDep,
):
    """Partially update one of the current user's places.

    Returns 404 both for a missing place and for someone else's place.
    """
    return update_place(session, place_id, user.id, place_update)


@router.delete("/{place_id}", response_model=DeletePlaceResult)
async def delete(place_id: int, user: CurrentUserDep, session: SessionDep):
    """Delete one of the current user's places.

    Always 200; ``success`` is false when nothing was deleted.
    """
    return DeletePlaceResult(success=delete_place(session, place_id, user.id))
