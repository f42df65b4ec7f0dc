from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.settings import get_settings


def add_cors_middleware(app: FastAPI):
    settings = get_settings()

    # Browsers reject credentialed requests against a wildcard origin.
    allow_credentials = "*" not in settings.cors_origins_list

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=allow_credentials,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )
