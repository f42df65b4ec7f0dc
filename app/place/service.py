"""Place domain service.

Owner-scoped CRUD and statistics over the places table. Every function takes
the caller's database session and commits its own writes.
"""

import logging
from collections import Counter
from collections.abc import Iterable

from sqlalchemy import delete, update
from sqlmodel import Session, select

from app.core.mixins import utc_now
from app.place.exceptions import OwnerNotFoundError, PlaceNotFoundError
from app.place.models import City, Place, PlaceType
from app.place.schemas import PlaceCreate, PlaceFilter, PlaceStats, PlaceUpdate
from app.user.models import User

logger = logging.getLogger(__name__)


def create_place(session: Session, user_id: int, data: PlaceCreate) -> Place:
    """Save a new place for ``user_id``.

    Raises:
        OwnerNotFoundError: If no user with ``user_id`` exists
    """
    if session.get(User, user_id) is None:
        raise OwnerNotFoundError(f"User with id {user_id} not found")

    place = Place(**data.model_dump(), user_id=user_id, is_visited=False)
    session.add(place)
    session.commit()
    session.refresh(place)

    logger.info(
        "Place created", extra={"user_id": user_id, "place_id": place.id}
    )
    return place


def get_user_places(
    session: Session, user_id: int, filters: PlaceFilter | None = None
) -> list[Place]:
    """List the places owned by ``user_id``, narrowed by any supplied filter."""
    statement = select(Place).where(Place.user_id == user_id)

    if filters is not None:
        if filters.city is not None:
            statement = statement.where(Place.city == filters.city)
        if filters.type is not None:
            statement = statement.where(Place.type == filters.type)
        if filters.is_visited is not None:
            statement = statement.where(Place.is_visited == filters.is_visited)

    return list(session.exec(statement).all())


def update_place(
    session: Session, place_id: int, user_id: int, data: PlaceUpdate
) -> Place:
    """Apply a partial update to a place owned by ``user_id``.

    Ownership is part of the UPDATE's WHERE clause, so the check and the write
    are one statement. ``updated_at`` is refreshed even when nothing changed.

    Raises:
        PlaceNotFoundError: If the place does not exist or is not owned by user_id
    """
    values = data.model_dump(exclude_unset=True)
    values["updated_at"] = utc_now()

    statement = (
        update(Place)
        .where(Place.id == place_id, Place.user_id == user_id)
        .values(**values)
    )
    result = session.exec(statement)

    if result.rowcount == 0:
        session.rollback()
        raise PlaceNotFoundError()

    session.commit()

    place = session.get(Place, place_id, populate_existing=True)
    if place is None:
        # Deleted between commit and reload.
        raise PlaceNotFoundError()

    logger.info(
        "Place updated",
        extra={"user_id": user_id, "place_id": place_id},
    )
    return place


def delete_place(session: Session, place_id: int, user_id: int) -> bool:
    """Delete a place owned by ``user_id``.

    Returns:
        True if a row was deleted, False if the place is missing or not owned
        by the user. Never raises for either case.
    """
    statement = delete(Place).where(Place.id == place_id, Place.user_id == user_id)
    result = session.exec(statement)
    session.commit()

    deleted = result.rowcount > 0
    if deleted:
        logger.info(
            "Place deleted", extra={"user_id": user_id, "place_id": place_id}
        )
    return deleted


def summarize_places(places: Iterable[Place]) -> PlaceStats:
    """Count places overall, by visited flag, by city and by type."""
    total = 0
    visited = 0
    by_city: Counter[str] = Counter()
    by_type: Counter[str] = Counter()

    for place in places:
        total += 1
        if place.is_visited:
            visited += 1
        by_city[City(place.city).value] += 1
        by_type[PlaceType(place.type).value] += 1

    return PlaceStats(
        total_places=total,
        visited_places=visited,
        unvisited_places=total - visited,
        places_by_city=dict(by_city),
        places_by_type=dict(by_type),
    )


def get_user_stats(session: Session, user_id: int) -> PlaceStats:
    """Compute statistics over every place owned by ``user_id``."""
    return summarize_places(get_user_places(session, user_id))
