"""Abstract repository for Quest."""

from __future__ import annotations

from abc import ABC, abstractmethod

from plantngo.domain.model.quest import Quest


class QuestRepository(ABC):

    @abstractmethod
    def get_by_id(self, quest_id: int) -> Quest | None:
        """Return a quest by ID, or None."""

    @abstractmethod
    def list_all(self) -> list[Quest]:
        """Return every quest."""

    @abstractmethod
    def save(self, quest: Quest) -> None:
        """Persist a new or updated quest, assigning an ID if needed."""

    @abstractmethod
    def delete(self, quest: Quest) -> None:
        """Remove a quest."""
