"""Contract between the reconcilers and the resource framework driving them."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

REQUEUE_DELAY = 5.0  # seconds


@dataclass(frozen=True)
class ReconcileResult:
    """What the framework should do after a reconcile call that did not raise."""

    requeue: bool = False
    requeue_after: float | None = None

    @classmethod
    def done(cls) -> "ReconcileResult":
        return cls()

    @classmethod
    def retry_later(cls, delay: float = REQUEUE_DELAY) -> "ReconcileResult":
        return cls(requeue=True, requeue_after=delay)


def wire_value(value: Any) -> Any:
    """Plain value of an enum member, anything else unchanged."""
    if isinstance(value, Enum):
        return value.value
    return value
