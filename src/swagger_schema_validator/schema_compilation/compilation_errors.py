"""Schema compilation errors."""

from __future__ import annotations


class UnknownDefinitionError(Exception):
    """Raised when a definition pointer or reference does not resolve inside the spec document."""

    def __init__(self, pointer: str) -> None:
        super().__init__(f"Unknown definition {pointer}")
        self.pointer = pointer
