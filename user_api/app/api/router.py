"""
Top-level API router.

Aggregates the domain-specific routers under their prefixes.  When a
new domain is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
