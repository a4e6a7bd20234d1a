"""Tests for core data models."""

import pytest
from pydantic import ValidationError

from pursuit_registry.models import (
    DeadlineEntry,
    ErrorKind,
    OperationResult,
    PriorityEntry,
    PriorityTier,
    PursuitRecord,
    RegistryConfig,
    VerificationResult,
)


class TestPursuitRecord:
    def test_defaults_to_incomplete(self):
        record = PursuitRecord(description="Learn Rust")
        assert record.completed is False

    def test_description_bounds(self):
        with pytest.raises(ValidationError):
            PursuitRecord(description="")
        with pytest.raises(ValidationError):
            PursuitRecord(description="x" * 101)
        assert len(PursuitRecord(description="x" * 100).description) == 100


class TestPriorityEntry:
    def test_tier_values(self):
        assert PriorityTier.MINIMAL == 1
        assert PriorityTier.MODERATE == 2
        assert PriorityTier.CRITICAL == 3
        assert PriorityEntry(weight=PriorityTier.CRITICAL).weight == 3

    def test_weight_bounds(self):
        with pytest.raises(ValidationError):
            PriorityEntry(weight=0)
        with pytest.raises(ValidationError):
            PriorityEntry(weight=4)


class TestDeadlineEntry:
    def test_alert_defaults_false(self):
        entry = DeadlineEntry(target=110)
        assert entry.alert is False


class TestResults:
    def test_verification_defaults_to_absent(self):
        result = VerificationResult()
        assert result.model_dump() == {"present": False, "length": 0, "completed": False}

    def test_operation_result(self):
        result = OperationResult(participant="alice", message="Pursuit initialized")
        assert result.ok is True

    def test_error_kind_values(self):
        assert ErrorKind.ENTITY_MISSING.value == "EntityMissing"
        assert ErrorKind.INPUT_INVALID.value == "InputInvalid"
        assert ErrorKind.RECORD_CONFLICT.value == "RecordConflict"


class TestRegistryConfig:
    def test_defaults(self):
        config = RegistryConfig()
        assert config.max_charter_length == 100
        assert config.min_priority == 1
        assert config.max_priority == 3
        assert config.db_path is None
        assert config.initial_clock == 0
        assert config.cascade_delete is False
        assert config.clock == "monotonic"

    def test_from_env(self):
        config = RegistryConfig.from_env({
            "PURSUIT_REGISTRY_INITIAL_CLOCK": "100",
            "PURSUIT_REGISTRY_CASCADE_DELETE": "true",
            "PURSUIT_REGISTRY_DB_PATH": "/tmp/pursuits.db",
            "UNRELATED": "ignored",
        })
        assert config.initial_clock == 100
        assert config.cascade_delete is True
        assert config.db_path == "/tmp/pursuits.db"

    def test_limits_cannot_be_loosened(self):
        with pytest.raises(ValidationError):
            RegistryConfig(max_charter_length=200)
        with pytest.raises(ValidationError):
            RegistryConfig(max_priority=5)
        with pytest.raises(ValidationError):
            RegistryConfig(min_priority=0)
        with pytest.raises(ValidationError):
            RegistryConfig.from_env({"PURSUIT_REGISTRY_MAX_PRIORITY": "5"})

    def test_limits_can_be_tightened(self):
        config = RegistryConfig(max_charter_length=20, min_priority=2, max_priority=2)
        assert config.max_charter_length == 20
        assert config.min_priority == config.max_priority == 2

    def test_inverted_priority_range_rejected(self):
        with pytest.raises(ValidationError):
            RegistryConfig(min_priority=3, max_priority=1)

    def test_unknown_clock_rejected(self):
        with pytest.raises(ValidationError):
            RegistryConfig(clock="wallclock")
