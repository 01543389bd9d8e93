class DomainError(Exception):
    """
    Base class for every error a CMS operation reports to its caller.

    `kind` is the stable, machine-readable name returned by the API;
    `status_code` is the HTTP status the error handler maps it to.
    """
    kind = "DomainError"
    status_code = 400

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind)
        self.message = message or self.kind


class NotFound(DomainError):
    kind = "NotFound"
    status_code = 404


class Conflict(DomainError):
    kind = "Conflict"
    status_code = 409


class Forbidden(DomainError):
    kind = "Forbidden"
    status_code = 403


class BadInput(DomainError):
    kind = "BadInput"
    status_code = 400


class CircularReference(DomainError):
    kind = "CircularReference"
    status_code = 400
