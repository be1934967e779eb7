"""Error Hierarchy - typed exceptions rendered as the {"error": ...} envelope.

Invariants:
    - Every error has a code (str) and an http_status (int)
    - to_response() yields exactly {"error": message} - no internal details
    - RouteNotFoundError always carries the message "Not Found"

Design Decisions:
    - Single hierarchy with HelloServiceError base: one global handler catches all
"""


class HelloServiceError(Exception):
    """Base exception for all service errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


class RouteNotFoundError(HelloServiceError):
    """No route matches the request method and path."""
    def __init__(self, method: str = "", path: str = ""):
        super().__init__("Not Found", "ROUTE_NOT_FOUND", 404)
        self.method = method
        self.path = path


class InternalServiceError(HelloServiceError):
    """Unexpected failure. Message is fixed so internals never leak."""
    def __init__(self):
        super().__init__("Internal Server Error", "INTERNAL_ERROR", 500)
