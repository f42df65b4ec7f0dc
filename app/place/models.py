"""Place domain models.

SQLModel table definition for Place and the two closed enums it uses.
"""

from enum import Enum

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from app.core.mixins import TimestampMixin


class PlaceType(str, Enum):
    """Category of a saved place."""

    restaurant = "restaurant"
    cafe = "cafe"
    park = "park"
    museum = "museum"
    beach = "beach"
    temple = "temple"
    market = "market"
    shopping_mall = "shopping_mall"
    hotel = "hotel"
    attraction = "attraction"
    bar = "bar"
    nightlife = "nightlife"
    entertainment = "entertainment"
    cultural_site = "cultural_site"
    nature = "nature"
    other = "other"


class City(str, Enum):
    """Major Vietnamese cities a place can belong to."""

    ho_chi_minh_city = "Ho Chi Minh City"
    hanoi = "Hanoi"
    da_nang = "Da Nang"
    hai_phong = "Hai Phong"
    can_tho = "Can Tho"
    bien_hoa = "Bien Hoa"
    hue = "Hue"
    nha_trang = "Nha Trang"
    buon_ma_thuot = "Buon Ma Thuot"
    quy_nhon = "Quy Nhon"
    vung_tau = "Vung Tau"
    nam_dinh = "Nam Dinh"
    phan_thiet = "Phan Thiet"
    long_xuyen = "Long Xuyen"
    thai_nguyen = "Thai Nguyen"
    thanh_hoa = "Thanh Hoa"
    rach_gia = "Rach Gia"
    cam_ranh = "Cam Ranh"
    vinh_long = "Vinh Long"
    my_tho = "My Tho"


def _enum_values(enum_cls: type[Enum]) -> list[str]:
    # Store "Ho Chi Minh City", not the member name "ho_chi_minh_city".
    return [member.value for member in enum_cls]


class Place(TimestampMixin, SQLModel, table=True):
    """Favorite place owned by exactly one user.

    Rows go away with their owner through ``ON DELETE CASCADE``.
    """

    __tablename__: str = "places"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    name: str = Field(max_length=200)
    address: str = Field(max_length=500)
    google_maps_url: str | None = Field(default=None)
    google_place_id: str | None = Field(default=None)
    type: PlaceType = Field(
        sa_type=sa.Enum(PlaceType, name="place_type", values_callable=_enum_values)
    )
    city: City = Field(
        sa_type=sa.Enum(City, name="vietnamese_city", values_callable=_enum_values)
    )
    notes: str | None = Field(default=None, max_length=1000)
    is_visited: bool = Field(default=False)
