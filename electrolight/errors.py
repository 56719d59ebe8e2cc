"""
Errors raised by catalog operations.
The HTTP layer in main.py turns them into `{"message": ...}` responses.
"""


class CatalogError(Exception):
    """Base error for catalog operations."""
    status_code = 500


class NotFound(CatalogError):
    """Requested entity does not exist (HTTP 404)."""
    status_code = 404


class InvalidRequest(CatalogError):
    """Payload failed validation (HTTP 400)."""
    status_code = 400
