"""Tests for place statistics (summarize_places / get_user_stats)."""

from hypothesis import given
from hypothesis import settings as hypothesis_settings
from hypothesis import strategies as st
from sqlmodel import Session

from app.place.models import City, Place, PlaceType
from app.place.service import get_user_stats, summarize_places
from app.user.models import User


def _place(city: City, type: PlaceType, is_visited: bool) -> Place:
    return Place(
        user_id=1,
        name="p",
        address="a",
        city=city,
        type=type,
        is_visited=is_visited,
    )


def test_summarize_no_places():
    """Test zero places gives zero counts and empty mappings."""
    stats = summarize_places([])

    assert stats.total_places == 0
    assert stats.visited_places == 0
    assert stats.unvisited_places == 0
    assert stats.places_by_city == {}
    assert stats.places_by_type == {}


def test_summarize_four_places():
    """Test exact counts for 2 restaurants, 1 cafe and 1 park with 2 visited."""
    places = [
        _place(City.ho_chi_minh_city, PlaceType.restaurant, True),
        _place(City.ho_chi_minh_city, PlaceType.restaurant, False),
        _place(City.hanoi, PlaceType.cafe, True),
        _place(City.da_nang, PlaceType.park, False),
    ]

    stats = summarize_places(places)

    assert stats.total_places == 4
    assert stats.visited_places == 2
    assert stats.unvisited_places == 2
    assert stats.places_by_city == {"Ho Chi Minh City": 2, "Hanoi": 1, "Da Nang": 1}
    assert stats.places_by_type == {"restaurant": 2, "cafe": 1, "park": 1}


@hypothesis_settings(max_examples=100)
@given(
    st.lists(
        st.tuples(
            st.sampled_from(City), st.sampled_from(PlaceType), st.booleans()
        ),
        max_size=30,
    )
)
def test_summarize_counts_are_consistent(rows):
    """Property: totals add up and the mappings hold only non-zero counts."""
    stats = summarize_places([_place(*row) for row in rows])

    assert stats.total_places == len(rows)
    assert stats.visited_places + stats.unvisited_places == stats.total_places
    assert sum(stats.places_by_city.values()) == stats.total_places
    assert sum(stats.places_by_type.values()) == stats.total_places
    assert all(count > 0 for count in stats.places_by_city.values())
    assert all(count > 0 for count in stats.places_by_type.values())
    assert set(stats.places_by_city) == {city.value for city, _, _ in rows}
    assert set(stats.places_by_type) == {type_.value for _, type_, _ in rows}


def test_get_user_stats_is_owner_scoped(
    session: Session, test_user: User, other_user: User, make_place
):
    """Test statistics only count the requested user's places."""
    make_place(test_user, city=City.hue, type=PlaceType.temple, is_visited=True)
    make_place(test_user, city=City.hue, type=PlaceType.museum)
    make_place(other_user, city=City.nha_trang, type=PlaceType.beach)

    stats = get_user_stats(session, test_user.id)

    assert stats.total_places == 2
    assert stats.visited_places == 1
    assert stats.unvisited_places == 1
    assert stats.places_by_city == {"Hue": 2}
    assert stats.places_by_type == {"temple": 1, "museum": 1}


def test_get_user_stats_without_places(session: Session, test_user: User):
    """Test a user without places gets all-zero statistics."""
    stats = get_user_stats(session, test_user.id)

    assert stats.model_dump() == {
        "total_places": 0,
        "visited_places": 0,
        "unvisited_places": 0,
        "places_by_city": {},
        "places_by_type": {},
    }
