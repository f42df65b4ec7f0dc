"""Place domain schemas.

Request and response schemas for place operations.
"""

from datetime import datetime
from typing import Annotated, Self

from pydantic import (
    AfterValidator,
    BaseModel,
    Field,
    HttpUrl,
    TypeAdapter,
    field_serializer,
    model_validator,
)
from sqlmodel import SQLModel

from app.place.models import City, PlaceType
from app.user.schemas import serialize_utc

_url_adapter = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    """Reject anything but http(s) URLs; keep the caller's spelling of valid ones."""
    _url_adapter.validate_python(value)
    return value


GoogleMapsUrl = Annotated[str, AfterValidator(_check_url)]

# Columns that may be cleared with an explicit null on update
NULLABLE_FIELDS = frozenset({"google_maps_url", "google_place_id", "notes"})


class PlaceCreate(SQLModel):
    """Request schema for saving a new place.

    There is no is_visited field: new places always start unvisited.
    """

    name: str = Field(min_length=1, max_length=200)
    address: str = Field(min_length=1, max_length=500)
    google_maps_url: GoogleMapsUrl | None = None
    google_place_id: str | None = None
    type: PlaceType
    city: City
    notes: str | None = Field(default=None, max_length=1000)


class PlaceUpdate(SQLModel):
    """Partial update for a place.

    Only fields present in the payload are written. Nullable columns accept an
    explicit null to clear them; required columns do not.
    """

    name: str | None = Field(default=None, min_length=1, max_length=200)
    address: str | None = Field(default=None, min_length=1, max_length=500)
    google_maps_url: GoogleMapsUrl | None = None
    google_place_id: str | None = None
    type: PlaceType | None = None
    city: City | None = None
    notes: str | None = Field(default=None, max_length=1000)
    is_visited: bool | None = None

    @model_validator(mode="after")
    def reject_null_for_required_fields(self) -> Self:
        for field in self.model_fields_set - NULLABLE_FIELDS:
            if getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class PlaceFilter(BaseModel):
    """Optional filters for listing places, combined with AND."""

    city: City | None = None
    type: PlaceType | None = None
    is_visited: bool | None = None


class PlaceRead(SQLModel):
    """Response schema for a place."""

    id: int
    user_id: int
    name: str
    address: str
    google_maps_url: str | None
    google_place_id: str | None
    type: PlaceType
    city: City
    notes: str | None
    is_visited: bool
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_datetime(self, value: datetime) -> str:
        return serialize_utc(value)


class PlaceStats(BaseModel):
    """Aggregate counts over one user's places.

    Cities and types without places are absent from the mappings.
    """

    total_places: int
    visited_places: int
    unvisited_places: int
    places_by_city: dict[str, int]
    places_by_type: dict[str, int]


class DeletePlaceResult(BaseModel):
    """Response schema for place deletion."""

    success: bool
