"""Storage contract for the three participant-keyed maps."""

from typing import Dict, Optional

from pursuit_registry.models.pursuit import DeadlineEntry, PriorityEntry, PursuitRecord


class PursuitStore:
    """
    Three independent maps indexed by participant identity.
    Stores do no validation; the registry owns every invariant.
    """

    # --- Pursuit map ---

    def get_pursuit(self, participant: str) -> Optional[PursuitRecord]:
        raise NotImplementedError

    def put_pursuit(self, participant: str, record: PursuitRecord) -> None:
        raise NotImplementedError

    def delete_pursuit(self, participant: str) -> bool:
        raise NotImplementedError

    def all_pursuits(self) -> Dict[str, PursuitRecord]:
        raise NotImplementedError

    # --- Priority map ---

    def get_priority(self, participant: str) -> Optional[PriorityEntry]:
        raise NotImplementedError

    def put_priority(self, participant: str, entry: PriorityEntry) -> None:
        raise NotImplementedError

    def delete_priority(self, participant: str) -> bool:
        raise NotImplementedError

    def all_priorities(self) -> Dict[str, PriorityEntry]:
        raise NotImplementedError

    # --- Deadline map ---

    def get_deadline(self, participant: str) -> Optional[DeadlineEntry]:
        raise NotImplementedError

    def put_deadline(self, participant: str, entry: DeadlineEntry) -> None:
        raise NotImplementedError

    def delete_deadline(self, participant: str) -> bool:
        raise NotImplementedError

    def all_deadlines(self) -> Dict[str, DeadlineEntry]:
        raise NotImplementedError

    def delete_participant(self, participant: str) -> bool:
        """Drop the pursuit, priority and deadline for a key as one unit."""
        raise NotImplementedError

    def close(self) -> None:
        """Release any backing resources."""
