"""Application services: Quest use cases.

A quest is active while the clock is inside its window. The stored
``is_active`` flag is only brought up to date by a refresh.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from plantngo.application.clock import Clock, utc_now
from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.model.quest import Quest
from plantngo.domain.model.value_objects import ActivationWindow
from plantngo.domain.repository.quest_repository import QuestRepository

logger = structlog.get_logger(__name__)


class AddQuestHandler:

    def __init__(self, quest_repo: QuestRepository, clock: Clock = utc_now) -> None:
        self._quest_repo = quest_repo
        self._clock = clock

    def handle(
        self,
        title: str,
        description: str,
        points: int,
        target_count: int,
        start: datetime,
        end: datetime,
    ) -> Quest:
        quest = Quest(
            id=None,
            title=title.strip(),
            description=description,
            points=points,
            target_count=target_count,
            window=ActivationWindow(start, end),
        )
        quest.refresh(self._clock())
        self._quest_repo.save(quest)
        logger.info("quest_added", quest_id=quest.id, active=quest.is_active)
        return quest


class DeleteQuestHandler:

    def __init__(self, quest_repo: QuestRepository) -> None:
        self._quest_repo = quest_repo

    def handle(self, quest_id: int) -> None:
        quest = self._quest_repo.get_by_id(quest_id)
        if quest is None:
            raise EntityNotFoundError("Quest")
        self._quest_repo.delete(quest)
        logger.info("quest_deleted", quest_id=quest_id)


class ShowQuestsHandler:

    def __init__(self, quest_repo: QuestRepository) -> None:
        self._quest_repo = quest_repo

    def all(self) -> list[Quest]:
        return self._quest_repo.list_all()

    def get(self, quest_id: int) -> Quest:
        quest = self._quest_repo.get_by_id(quest_id)
        if quest is None:
            raise EntityNotFoundError("Quest")
        return quest

    def active(self) -> list[Quest]:
        return [q for q in self._quest_repo.list_all() if q.is_active]

    def inactive(self) -> list[Quest]:
        return [q for q in self._quest_repo.list_all() if not q.is_active]


class RefreshQuestsHandler:

    def __init__(self, quest_repo: QuestRepository, clock: Clock = utc_now) -> None:
        self._quest_repo = quest_repo
        self._clock = clock

    def refresh_one(self, quest_id: int) -> Quest:
        quest = self._quest_repo.get_by_id(quest_id)
        if quest is None:
            raise EntityNotFoundError("Quest")
        if quest.refresh(self._clock()):
            self._quest_repo.save(quest)
        return quest

    def refresh_all(self) -> int:
        """Refresh every quest; returns how many changed state."""
        now = self._clock()
        changed = 0
        for quest in self._quest_repo.list_all():
            if quest.refresh(now):
                self._quest_repo.save(quest)
                changed += 1
        logger.info("quests_refreshed", changed=changed)
        return changed
