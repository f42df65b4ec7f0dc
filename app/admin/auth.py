import secrets

from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from app.core.settings import get_settings


class AdminAuth(AuthenticationBackend):
    """SQLAdmin auth using Starlette sessions.

    Admin credentials come from settings and are independent of app users.
    """

    def __init__(self) -> None:
        # SQLAdmin signs its session cookie with this secret.
        settings = get_settings()
        super().__init__(secret_key=settings.session_secret_key)

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = str(form.get("username", form.get("email", ""))).strip()
        password = str(form.get("password", ""))

        settings = get_settings()
        ok = secrets.compare_digest(
            username.encode(), settings.admin_username.encode()
        ) & secrets.compare_digest(password.encode(), settings.admin_password.encode())
        if ok:
            request.session["admin_user"] = username
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get("admin_user"))
