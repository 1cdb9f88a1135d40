"""ID generation utilities."""

import secrets
import string


def generate_nanoid(length: int = 21) -> str:
    """
    Generate a nanoid-style ID.

    Args:
        length: Length of the ID to generate

    Returns:
        A string ID matching /^[A-Za-z0-9_-]{length}$/
    """
    alphabet = string.ascii_letters + string.digits + "_-"
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_request_id() -> str:
    """Generate a request ID for log correlation and error tracking."""
    return generate_nanoid(21)


def get_request_id(request) -> str:
    """Request id assigned by RequestLoggingMiddleware, or a fresh one."""
    return getattr(request.state, "request_id", None) or generate_request_id()[:8]
