"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules, organised by layer: ``api`` (HTTP routes), ``services``
(business rules), ``repositories`` (entity store), ``schemas``
(pydantic payloads) and ``core`` (configuration, logging, database
helpers and domain errors).
"""

from .main import app, create_app  # noqa: F401
