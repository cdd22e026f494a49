"""
Operation result returned by every command handler.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a handler invocation.

    A failure carries a human-readable reason which is only ever reported,
    never inspected for control flow.
    """

    ok: bool
    reason: Optional[str] = None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> "OperationResult":
        return cls(ok=False, reason=reason)

    @property
    def failed(self) -> bool:
        return not self.ok

    def __str__(self) -> str:
        return "Success" if self.ok else f"Failure({self.reason})"
