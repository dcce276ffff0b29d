"""JSON-file-backed implementation of QuestRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from plantngo.domain.model.quest import Quest
from plantngo.domain.model.value_objects import ActivationWindow
from plantngo.domain.repository.quest_repository import QuestRepository
from plantngo.infrastructure.persistence.json_file import JsonFile


class JsonQuestRepository(QuestRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, quest_id: int) -> Quest | None:
        for raw in self._file.load_raw():
            if raw["id"] == quest_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Quest]:
        return [self._to_domain(raw) for raw in self._file.load_raw()]

    def save(self, quest: Quest) -> None:
        records = self._file.load_raw()
        if quest.id is None:
            quest.id = JsonFile.next_id(records)
        self._file.upsert(records, self._to_raw(quest), key="id")

    def delete(self, quest: Quest) -> None:
        self._file.remove("id", quest.id)

    @staticmethod
    def _to_raw(quest: Quest) -> dict:
        return {
            "id": quest.id,
            "title": quest.title,
            "description": quest.description,
            "points": quest.points,
            "target_count": quest.target_count,
            "start": quest.window.start.isoformat(),
            "end": quest.window.end.isoformat(),
            "is_active": quest.is_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Quest:
        return Quest(
            id=raw["id"],
            title=raw["title"],
            description=raw.get("description", ""),
            points=raw["points"],
            target_count=raw["target_count"],
            window=ActivationWindow(
                datetime.fromisoformat(raw["start"]),
                datetime.fromisoformat(raw["end"]),
            ),
            is_active=raw.get("is_active", False),
        )
