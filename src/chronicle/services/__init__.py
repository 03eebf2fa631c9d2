"""Service layer for Chronicle."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsClose(Protocol):
    """Protocol describing resources that can be closed."""

    def close(self) -> None:
        """Release any acquired resources."""


__all__ = ["SupportsClose"]
