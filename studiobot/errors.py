"""Exceptions raised while driving the Studio UI."""
from __future__ import annotations

from typing import Any, Dict, Optional


class ElementNotFoundError(RuntimeError):
    """Raised when a required element never appears before its deadline."""

    def __init__(
        self,
        message: str,
        *,
        selector: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.selector = selector
        self.timeout_ms = timeout_ms
        self.data = data or {}


class MenuEmptyError(ElementNotFoundError):
    """Raised when a context menu opens without any actionable entry."""


class StepConsumedError(RuntimeError):
    """Raised when a wizard or menu step is advanced a second time."""
