from sqladmin import ModelView

from app.place.models import Place
from app.user.models import User


class UserAdmin(ModelView, model=User):
    """Users can only be deleted from here; their places cascade with them."""

    name = "User"
    name_plural = "Users"

    column_list = [
        User.id,
        User.email,
        User.name,
        User.google_id,
        User.created_at,
        User.updated_at,
    ]

    column_searchable_list = [User.email, User.name, User.google_id]
    column_sortable_list = [User.id, User.email, User.name, User.created_at]

    # Hashes are never shown or edited by hand.
    column_details_exclude_list = [User.password_hash]
    form_excluded_columns = [User.password_hash, User.created_at, User.updated_at]


class PlaceAdmin(ModelView, model=Place):
    name = "Place"
    name_plural = "Places"

    column_list = [
        Place.id,
        Place.name,
        Place.city,
        Place.type,
        Place.is_visited,
        Place.user_id,
        Place.created_at,
        Place.updated_at,
    ]

    column_searchable_list = [Place.name, Place.address]
    column_sortable_list = [getattr(Place, field) for field in Place.model_fields]
    form_excluded_columns = [Place.created_at, Place.updated_at]
