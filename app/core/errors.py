"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these and never catch them; the exception handlers in
``app.main`` turn each one into a JSON response using ``status_code``.
"""

from typing import Optional


class TaskboardError(Exception):
    """Base class for every error the services surface to callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TaskboardError):
    """A required request field is missing or malformed."""

    status_code = 422

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(TaskboardError):
    """An entity id did not resolve to a row."""

    status_code = 404

    def __init__(self, entity: str, entity_id: Optional[str] = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        if entity_id is None:
            message = f"{entity.capitalize()} not found"
        else:
            message = f"{entity.capitalize()} {entity_id} not found"
        super().__init__(message)


class ConstraintError(TaskboardError):
    """The store rejected a write because of a relational constraint."""

    status_code = 409


class StoreError(TaskboardError):
    """The store is unreachable, timed out, or failed in an unexpected way."""

    status_code = 503
