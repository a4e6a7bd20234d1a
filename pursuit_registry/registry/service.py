"""
Pursuit Registry — owns the three participant maps and every rule that keeps them coherent.

Behavioral Contract:
- At most one pursuit per participant identity
- Priority and deadline entries are only written while a pursuit exists
- A stored description is never empty; a weight is always 1-3
- A deadline target is always later than the clock value it was set at
- Existence checks run before argument checks
- A failed call writes nothing
"""

import logging
import threading
from typing import Optional

from pursuit_registry.clock.logical import LogicalClock, ManualClock, MonotonicClock
from pursuit_registry.models.config import RegistryConfig
from pursuit_registry.models.pursuit import DeadlineEntry, PriorityEntry, PursuitRecord
from pursuit_registry.models.results import ErrorKind, OperationResult, VerificationResult
from pursuit_registry.store.base import PursuitStore
from pursuit_registry.store.memory import InMemoryPursuitStore
from pursuit_registry.store.sqlite import SQLitePursuitStore

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when a registry operation's precondition is violated."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EntityMissingError(RegistryError):
    """The addressed participant has no pursuit."""
    kind = ErrorKind.ENTITY_MISSING


class InputInvalidError(RegistryError):
    """An argument violates a documented constraint."""
    kind = ErrorKind.INPUT_INVALID


class RecordConflictError(RegistryError):
    """The addressed participant already has a pursuit."""
    kind = ErrorKind.RECORD_CONFLICT


class PursuitRegistry:
    """
    Per-participant goal registry.
    Every public operation holds the registry lock for its whole duration,
    so check-then-write sequences never interleave.
    """

    def __init__(
        self,
        store: Optional[PursuitStore] = None,
        clock: Optional[LogicalClock] = None,
        config: Optional[RegistryConfig] = None,
    ):
        self.config = config or RegistryConfig()
        self.store = store or InMemoryPursuitStore()
        self.clock = clock or ManualClock(self.config.initial_clock)
        self._lock = threading.RLock()

    # --- Validation ---

    def _validate_charter(self, charter: str) -> None:
        if not isinstance(charter, str):
            raise InputInvalidError("Charter must be text")
        if not charter:
            raise InputInvalidError("Charter must not be empty")
        if len(charter) > self.config.max_charter_length:
            raise InputInvalidError(
                f"Charter exceeds {self.config.max_charter_length} characters"
            )
        if not charter.isascii():
            raise InputInvalidError("Charter must be ASCII text")

    def _require_pursuit(self, participant: str) -> PursuitRecord:
        record = self.store.get_pursuit(participant)
        if record is None:
            raise EntityMissingError(f"No pursuit registered for {participant}")
        return record

    def _require_absent(self, participant: str) -> None:
        if self.store.get_pursuit(participant) is not None:
            raise RecordConflictError(f"Pursuit already registered for {participant}")

    def _create(self, participant: str, charter: str) -> None:
        self._require_absent(participant)
        self._validate_charter(charter)
        self.store.put_pursuit(participant, PursuitRecord(description=charter))

    # --- Write path ---

    def initialize_pursuit(self, caller: str, charter: str) -> OperationResult:
        """Register the caller's pursuit."""
        with self._lock:
            try:
                self._create(caller, charter)
            except RegistryError as e:
                logger.warning(f"initialize_pursuit rejected for {caller}: {e.kind.value}")
                raise
        logger.info(f"Pursuit initialized for {caller}")
        return OperationResult(participant=caller, message="Pursuit initialized")

    def allocate_pursuit_responsibility(
        self, caller: str, target: str, charter: str
    ) -> OperationResult:
        """
        Register a pursuit on behalf of another participant.

        Any caller may assign to any target that has no pursuit yet; there is
        no ownership check on who may do this.
        """
        with self._lock:
            try:
                self._create(target, charter)
            except RegistryError as e:
                logger.warning(
                    f"allocate_pursuit_responsibility by {caller} for {target} "
                    f"rejected: {e.kind.value}"
                )
                raise
        logger.info(f"Pursuit allocated to {target} by {caller}")
        return OperationResult(participant=target, message="Pursuit allocated")

    def modify_pursuit_specifications(
        self, caller: str, charter: str, completed: bool
    ) -> OperationResult:
        """Replace the caller's description and completion flag wholesale."""
        with self._lock:
            try:
                self._require_pursuit(caller)
                self._validate_charter(charter)
            except RegistryError as e:
                logger.warning(
                    f"modify_pursuit_specifications rejected for {caller}: {e.kind.value}"
                )
                raise
            self.store.put_pursuit(
                caller, PursuitRecord(description=charter, completed=bool(completed))
            )
        logger.info(f"Pursuit modified for {caller} (completed={bool(completed)})")
        return OperationResult(participant=caller, message="Pursuit modified")

    def eliminate_pursuit_record(self, caller: str) -> OperationResult:
        """
        Delete the caller's pursuit.

        Priority and deadline entries survive unless cascade_delete is set,
        so a re-created pursuit inherits them.
        """
        with self._lock:
            try:
                self._require_pursuit(caller)
            except RegistryError as e:
                logger.warning(f"eliminate_pursuit_record rejected for {caller}: {e.kind.value}")
                raise
            if self.config.cascade_delete:
                self.store.delete_participant(caller)
            else:
                self.store.delete_pursuit(caller)
        logger.info(f"Pursuit eliminated for {caller}")
        return OperationResult(participant=caller, message="Pursuit eliminated")

    def configure_priority_weight(self, caller: str, tier: int) -> OperationResult:
        """Set the caller's priority tier (1 minimal, 2 moderate, 3 critical)."""
        with self._lock:
            try:
                self._require_pursuit(caller)
                if isinstance(tier, bool) or not isinstance(tier, int):
                    raise InputInvalidError("Priority tier must be an integer")
                if not self.config.min_priority <= tier <= self.config.max_priority:
                    raise InputInvalidError(
                        f"Priority tier must be between {self.config.min_priority} "
                        f"and {self.config.max_priority}"
                    )
            except RegistryError as e:
                logger.warning(f"configure_priority_weight rejected for {caller}: {e.kind.value}")
                raise
            self.store.put_priority(caller, PriorityEntry(weight=int(tier)))
        logger.info(f"Priority {int(tier)} configured for {caller}")
        return OperationResult(participant=caller, message="Priority configured")

    def establish_temporal_constraint(self, caller: str, offset: int) -> OperationResult:
        """Set the caller's deadline to the current clock plus offset."""
        with self._lock:
            try:
                self._require_pursuit(caller)
                if isinstance(offset, bool) or not isinstance(offset, int):
                    raise InputInvalidError("Deadline offset must be an integer")
                if offset <= 0:
                    raise InputInvalidError("Deadline offset must be positive")
            except RegistryError as e:
                logger.warning(
                    f"establish_temporal_constraint rejected for {caller}: {e.kind.value}"
                )
                raise
            target = self.clock.now() + offset
            self.store.put_deadline(caller, DeadlineEntry(target=target, alert=False))
        logger.info(f"Deadline {target} established for {caller}")
        return OperationResult(participant=caller, message="Deadline established")

    # --- Read path ---

    def conduct_pursuit_verification(self, caller: str) -> VerificationResult:
        """Report whether the caller has a pursuit, its length and completion."""
        with self._lock:
            record = self.store.get_pursuit(caller)
        if record is None:
            return VerificationResult()
        return VerificationResult(
            present=True,
            length=len(record.description),
            completed=record.completed,
        )

    def get_pursuit(self, participant: str) -> Optional[PursuitRecord]:
        with self._lock:
            return self.store.get_pursuit(participant)

    def get_priority(self, participant: str) -> Optional[PriorityEntry]:
        with self._lock:
            return self.store.get_priority(participant)

    def get_deadline(self, participant: str) -> Optional[DeadlineEntry]:
        with self._lock:
            return self.store.get_deadline(participant)

    def snapshot(self) -> dict:
        """Serializable view of all three maps and the current clock."""
        with self._lock:
            return {
                "clock": self.clock.now(),
                "pursuits": {
                    k: v.model_dump(mode="json")
                    for k, v in self.store.all_pursuits().items()
                },
                "priorities": {
                    k: v.model_dump(mode="json")
                    for k, v in self.store.all_priorities().items()
                },
                "deadlines": {
                    k: v.model_dump(mode="json")
                    for k, v in self.store.all_deadlines().items()
                },
            }


def build_registry(
    config: Optional[RegistryConfig] = None,
    clock: Optional[LogicalClock] = None,
) -> PursuitRegistry:
    """Create a registry with the store and clock the config asks for."""
    config = config or RegistryConfig()
    if config.db_path:
        store: PursuitStore = SQLitePursuitStore(db_path=config.db_path)
    else:
        store = InMemoryPursuitStore()
    if clock is None:
        if config.clock == "monotonic":
            clock = MonotonicClock(config.initial_clock)
        else:
            clock = ManualClock(config.initial_clock)
    return PursuitRegistry(store=store, clock=clock, config=config)
