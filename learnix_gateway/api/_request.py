"""Helpers shared by the API endpoints."""

from ..utils.error_handlers import create_validation_error
from ..utils.id_generator import get_request_id

__all__ = ["get_request_id", "require_language"]


def require_language(language: str) -> str:
    """Reject whitespace-only language labels."""
    if not language.strip():
        raise create_validation_error("language", "Language must not be blank", code="blank_language")
    return language.strip()
