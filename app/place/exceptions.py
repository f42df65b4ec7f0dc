"""Place domain exceptions."""

from app.core.exceptions import NotFoundError


class OwnerNotFoundError(NotFoundError):
    """Raised when a place is created for a user that does not exist."""

    error_type = "owner_not_found"

    def __init__(self, message: str = "Owner not found"):
        super().__init__(message)


class PlaceNotFoundError(NotFoundError):
    """Raised when a place is missing or belongs to someone else.

    The two cases share one error so callers cannot probe for other users' places.
    """

    error_type = "place_not_found"

    def __init__(self, message: str = "Place not found or access denied"):
        super().__init__(message)
