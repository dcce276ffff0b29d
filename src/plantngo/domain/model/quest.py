"""Quest: a time-windowed challenge that awards green points."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from plantngo.domain.exceptions import ValidationError
from plantngo.domain.model.value_objects import ActivationWindow


@dataclass
class Quest:

    id: int | None
    title: str
    description: str
    points: int
    target_count: int
    window: ActivationWindow
    is_active: bool = False

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValidationError("Quest title is required")
        if self.points <= 0:
            raise ValidationError("Quest points must be positive")
        if self.target_count <= 0:
            raise ValidationError("Quest target count must be positive")

    def refresh(self, now: datetime) -> bool:
        """Re-derive ``is_active`` from the window; True if it changed."""
        active = self.window.contains(now)
        changed = active != self.is_active
        self.is_active = active
        return changed
