"""API endpoints for the code execution gateway."""

from . import code_execution, exercises, health

__all__ = ["code_execution", "exercises", "health"]
