"""Domain errors raised by the subject service layer.

Each error carries the HTTP status the router responds with, so the
mapping from store outcome to status code lives next to the operation
that produced it.
"""


class SubjectStoreError(Exception):
    """Base error for a failed subject operation."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class SubjectNotFoundError(SubjectStoreError):
    """Document could not be fetched (absent or store unreachable)."""

    status_code = 404


class SubjectWriteError(SubjectStoreError):
    """Index, update or delete call failed, or the payload could not be encoded."""

    status_code = 500


class SubjectDecodeError(SubjectStoreError):
    """Stored document does not decode into a ``Subject``."""

    status_code = 500
