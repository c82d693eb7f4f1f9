"""
Shared dependencies for the application.

Provides dependency injection functions used by the route handlers.
"""

from fastapi import Request

from app.config import Settings
from app.repositories import IEmployeeRepository


def get_repository(request: Request) -> IEmployeeRepository:
    """
    Get the repository owned by the running application.

    The repository is created by ``create_app`` and stored on
    ``app.state``; handlers receive it only through this dependency.
    """
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise RuntimeError("Employee repository not initialized")
    return repository


def get_settings(request: Request) -> Settings:
    """Get the settings the running application was built with."""
    return request.app.state.settings
