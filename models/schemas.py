from dataclasses import dataclass, field
from typing import Any, List, Optional

from models.enums import ResolveStatus


@dataclass
class ResolveAttempt:
    descriptor: str
    status: ResolveStatus
    error: Optional[str] = None


@dataclass
class Resolution:
    """First visible match of a selector chain, or nothing."""
    descriptor: Optional[str] = None
    locator: Any = None
    attempts: List[ResolveAttempt] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.locator is not None

    @property
    def status(self) -> ResolveStatus:
        return ResolveStatus.FOUND if self.found else ResolveStatus.NOT_FOUND
