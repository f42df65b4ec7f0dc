from firebase_admin import get_app, initialize_app

from app.core.settings import get_settings


def init_firebase() -> None:
    """Initialize Firebase Admin SDK (idempotent).

    Uses GOOGLE_APPLICATION_CREDENTIALS environment variable for credentials.
    Google sign-in only needs the project id to verify ID tokens.
    """
    try:
        get_app()
    except ValueError:
        project_id = get_settings().firebase_project_id
        options = {"projectId": project_id} if project_id else None
        initialize_app(options=options)
