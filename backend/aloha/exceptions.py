"""
Taste of Aloha Backend — Custom Exception Hierarchy
====================================================

What:  Application-specific exceptions for the three failure kinds a request
       can end in.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into JSON
       error responses with the matching HTTP status code.
Who:   Raised by the mapping layer and resource handlers.

Exception Hierarchy:
    AlohaError (base)
    ├── ValidationError   → 500 (malformed or missing input)
    ├── NotFoundError     → 404 (identifier absent)
    └── DatabaseError     → 500 (unexpected store failure)

Every failure is terminal for the request: nothing here is retried.
"""

from typing import Any, Dict, Optional


class AlohaError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (returned in the response)
        context:  Extra details; returned under "details" by the handlers
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(AlohaError):
    """
    Raised when an item payload cannot be mapped to a record.

    When:  Missing or blank name on create, non-numeric price, a body that
           is not a JSON object.
    HTTP:  500, with the failure message echoed back to the caller.

    Example response:
        {
            "error": "validation_error",
            "message": "price must be a number",
            "details": {"field": "price"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(AlohaError):
    """
    Raised when a requested item does not exist.

    When:  GET/PUT/DELETE /api/menu/{id} (or /api/snacks/{id}) with an id
           that matches no row in the resource's scope.
    HTTP:  404 Not Found

    Stores report absence as None/False; the resource handlers convert that
    outcome into this exception.
    """

    def __init__(
        self,
        resource: str = "Item",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(AlohaError):
    """
    Raised when a store operation fails unexpectedly.

    When:  Connection lost, constraint violation, driver error.
    HTTP:  500 Internal Server Error

    The underlying error message travels in context["reason"] and is echoed
    in the response details.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(message=message, context=ctx)
        self.reason = reason
