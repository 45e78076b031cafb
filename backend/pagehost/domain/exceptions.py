class ContentError(Exception):
    """Base class for errors raised by the content layer."""

    status_code = 500
    error = "ContentError"

    def __init__(self, message: str, *, details=None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(ContentError):
    status_code = 400
    error = "ValidationError"


class ContentNotFound(ContentError):
    status_code = 404
    error = "NotFound"


class ContentConflict(ContentError):
    status_code = 409
    error = "Conflict"


class RemoteFailure(ContentError):
    status_code = 500
    error = "RemoteFailure"


class NoDraftChanges(ContentError):
    status_code = 400
    error = "NoDraftChanges"
