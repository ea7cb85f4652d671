"""
Domain errors raised by the service layer.

The entity store never signals absence with an exception; it returns
``None`` or ``False``.  Services turn that absence into one of the
errors below and the API layer maps them onto HTTP status codes.
"""


class UserNotFoundError(Exception):
    """Raised when no user exists with the requested identifier."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")
