"""
Exceptions raised by the Domain Watch core.

The core has a single failure mode: a search invoked without a term. Every
other operation is total over its inputs.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class DomainWatchError(Exception):
    """Base exception for Domain Watch errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(DomainWatchError, ValueError):
    """Raised when an operation is called with an absent required argument."""

    def __init__(self, argument: str, reason: Optional[str] = None):
        message = f"Invalid argument '{argument}'"
        if reason:
            message += f": {reason}"
        super().__init__(message=message, details={"argument": argument, "reason": reason})
        self.argument = argument


__all__ = ["DomainWatchError", "InvalidArgumentError"]
