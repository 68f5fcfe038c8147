"""Errors the onboarding API reports to clients.

Every subclass carries the HTTP status and the machine-readable code that
app.main renders into the {"error": {...}} envelope.
"""


class APIError(Exception):
    """Failure with a client-facing code, message and HTTP status.

    Attributes:
        code: Machine-readable error code (e.g., "NOT_FOUND").
        message: Human-readable description.
        status_code: HTTP status of the response.
        details: Optional per-field detail entries.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: list[dict] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ValidationError(APIError):
    """Malformed request parameters (400)."""

    def __init__(
        self,
        message: str = "Request validation failed",
        details: list[dict] | None = None,
    ) -> None:
        super().__init__("VALIDATION_ERROR", message, 400, details)


class UnauthorizedError(APIError):
    """No user identity for the request (401)."""

    def __init__(self) -> None:
        super().__init__("UNAUTHORIZED", "Authentication required", 401)


class NotFoundError(APIError):
    """Requested record is absent or belongs to another user (404)."""

    def __init__(self, resource: str, resource_id: str | None = None) -> None:
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__("NOT_FOUND", message, 404)


class QueryError(APIError):
    """A read, insert, or update against the data store failed (503).

    Raised by repositories for transport, permission, and constraint
    failures. Callers propagate it unchanged; nothing retries.

    Args:
        operation: Short description of the failed operation
            (e.g., "select candidate_onboarding_steps").
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            "QUERY_FAILED", f"Data store query failed: {operation}", 503
        )


class InternalError(APIError):
    """Anything unexpected (500). The message never carries exception text."""

    def __init__(self) -> None:
        super().__init__("INTERNAL_ERROR", "An unexpected error occurred", 500)
