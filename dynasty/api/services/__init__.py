"""API services for the calculator session."""

from dynasty.api.services.calculator_service import (
    CalculatorSession,
    get_session,
    reset_session,
)

__all__ = ["CalculatorSession", "get_session", "reset_session"]
