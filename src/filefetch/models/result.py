"""
Result models for file retrieval.

A retrieval either produces the complete file content or fails. There is
no model for partial content.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class Complete(BaseModel):
    """Fully assembled file content."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["complete"] = "complete"
    content: str = ""

    @property
    def ok(self) -> bool:
        return True

    @property
    def size(self) -> int:
        """Content length in characters."""
        return len(self.content)

    def unwrap_or(self, default: str | None = None) -> str | None:
        return self.content

    def __str__(self) -> str:
        return self.content

    def __repr__(self) -> str:
        return f"Complete({self.size} chars)"


class Failed(BaseModel):
    """Retrieval failed; nothing read is exposed."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["failed"] = "failed"

    @property
    def ok(self) -> bool:
        return False

    def unwrap_or(self, default: str | None = None) -> str | None:
        return default

    def __repr__(self) -> str:
        return "Failed()"


RetrievalResult = Union[Complete, Failed]


__all__ = ["Complete", "Failed", "RetrievalResult"]
