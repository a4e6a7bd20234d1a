"""
In-memory pursuit store. Data lives for the process lifetime only.
"""

from typing import Dict, Optional

from pursuit_registry.models.pursuit import DeadlineEntry, PriorityEntry, PursuitRecord
from pursuit_registry.store.base import PursuitStore


class InMemoryPursuitStore(PursuitStore):
    """Three plain dicts keyed by participant identity."""

    def __init__(self):
        self._pursuits: Dict[str, PursuitRecord] = {}
        self._priorities: Dict[str, PriorityEntry] = {}
        self._deadlines: Dict[str, DeadlineEntry] = {}

    def get_pursuit(self, participant: str) -> Optional[PursuitRecord]:
        return self._pursuits.get(participant)

    def put_pursuit(self, participant: str, record: PursuitRecord) -> None:
        self._pursuits[participant] = record

    def delete_pursuit(self, participant: str) -> bool:
        return self._pursuits.pop(participant, None) is not None

    def all_pursuits(self) -> Dict[str, PursuitRecord]:
        return dict(self._pursuits)

    def get_priority(self, participant: str) -> Optional[PriorityEntry]:
        return self._priorities.get(participant)

    def put_priority(self, participant: str, entry: PriorityEntry) -> None:
        self._priorities[participant] = entry

    def delete_priority(self, participant: str) -> bool:
        return self._priorities.pop(participant, None) is not None

    def all_priorities(self) -> Dict[str, PriorityEntry]:
        return dict(self._priorities)

    def get_deadline(self, participant: str) -> Optional[DeadlineEntry]:
        return self._deadlines.get(participant)

    def put_deadline(self, participant: str, entry: DeadlineEntry) -> None:
        self._deadlines[participant] = entry

    def delete_deadline(self, participant: str) -> bool:
        return self._deadlines.pop(participant, None) is not None

    def all_deadlines(self) -> Dict[str, DeadlineEntry]:
        return dict(self._deadlines)

    def delete_participant(self, participant: str) -> bool:
        removed = self.delete_pursuit(participant)
        self._priorities.pop(participant, None)
        self._deadlines.pop(participant, None)
        return removed
