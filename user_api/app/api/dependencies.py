"""
FastAPI dependencies shared by the endpoint modules.

The entity store is created once by the application factory and kept
on ``app.state``; each request gets a ``UserService`` wrapping it.
Tests replace ``get_user_service`` through ``app.dependency_overrides``.
"""

from fastapi import Request

from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return UserService(request.app.state.user_repository)
