"""Modeled request outcomes that are not successes.

Each error carries the HTTP status the boundary answers with; none of them
is transient, so none is retried.
"""


class CatalogError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(CatalogError):
    status_code = 400


class Unauthenticated(CatalogError):
    status_code = 401

    def __init__(self, message: str = "Full authentication is required to access this resource"):
        super().__init__(message)


class Forbidden(CatalogError):
    status_code = 403

    def __init__(self, message: str = "Access is denied"):
        super().__init__(message)


class NotFound(CatalogError):
    status_code = 404
