"""
Pursuit Registry API — FastAPI endpoints.

The caller identity travels in the X-Participant-Id header. Exposes:
- Pursuit lifecycle (initialize, allocate, modify, eliminate)
- Priority and deadline configuration
- Verification and registry inspection
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from pursuit_registry.clock.logical import LogicalClock
from pursuit_registry.logging_setup import configure_logging
from pursuit_registry.models.config import RegistryConfig
from pursuit_registry.models.results import ErrorKind
from pursuit_registry.registry.service import PursuitRegistry, RegistryError, build_registry

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorKind.ENTITY_MISSING: 404,
    ErrorKind.RECORD_CONFLICT: 409,
    ErrorKind.INPUT_INVALID: 422,
}


# --- Request Models ---

class CharterRequest(BaseModel):
    charter: str


class AllocateRequest(BaseModel):
    target: str
    charter: str


class ModifyRequest(BaseModel):
    charter: str
    completed: bool


class PriorityRequest(BaseModel):
    tier: int


class DeadlineRequest(BaseModel):
    offset: int


def _participant(x_participant_id: Optional[str]) -> str:
    if not x_participant_id:
        raise HTTPException(400, "X-Participant-Id header is required")
    return x_participant_id


# --- Application Factory ---

def create_app(
    registry: Optional[PursuitRegistry] = None,
    config: Optional[RegistryConfig] = None,
    clock: Optional[LogicalClock] = None,
    setup_logging: bool = False,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    With setup_logging the root logger is configured when the server starts,
    never at import or construction time.
    """

    config = config or (registry.config if registry else RegistryConfig())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if setup_logging:
            configure_logging(config.log_level)
        yield

    app = FastAPI(
        title="Pursuit Registry API",
        description="Per-participant goal registry",
        version="0.1.0",
        lifespan=lifespan,
    )

    reg = registry or build_registry(config=config, clock=clock)
    app.state.registry = reg

    @app.exception_handler(RegistryError)
    async def handle_registry_error(request: Request, exc: RegistryError):
        return JSONResponse(
            status_code=ERROR_STATUS[exc.kind],
            content={"kind": exc.kind.value, "detail": exc.message},
        )

    # === PURSUIT LIFECYCLE ===

    @app.post("/pursuit")
    def initialize_pursuit(
        req: CharterRequest,
        x_participant_id: Optional[str] = Header(default=None),
    ):
        """Register the caller's pursuit."""
        caller = _participant(x_participant_id)
        return reg.initialize_pursuit(caller, req.charter).model_dump()

    @app.post("/pursuit/assign")
    def allocate_pursuit(
        req: AllocateRequest,
        x_participant_id: Optional[str] = Header(default=None),
    ):
        """Register a pursuit for another participant."""
        caller = _participant(x_participant_id)
        if not req.target:
            raise HTTPException(400, "Target participant is required")
        return reg.allocate_pursuit_responsibility(caller, req.target, req.charter).model_dump()

    @app.put("/pursuit")
    def modify_pursuit(
        req: ModifyRequest,
        x_participant_id: Optional[str] = Header(default=None),
    ):
        """Replace the caller's pursuit description and completion flag."""
        caller = _participant(x_participant_id)
        return reg.modify_pursuit_specifications(caller, req.charter, req.completed).model_dump()

    @app.delete("/pursuit")
    def eliminate_pursuit(x_participant_id: Optional[str] = Header(default=None)):
        """Delete the caller's pursuit."""
        caller = _participant(x_participant_id)
        return reg.eliminate_pursuit_record(caller).model_dump()

    @app.get("/pursuit")
    def verify_pursuit(x_participant_id: Optional[str] = Header(default=None)):
        """Presence, description length and completion of the caller's pursuit."""
        caller = _participant(x_participant_id)
        return reg.conduct_pursuit_verification(caller).model_dump()

    # === PRIORITY & DEADLINE ===

    @app.put("/pursuit/priority")
    def configure_priority(
        req: PriorityRequest,
        x_participant_id: Optional[str] = Header(default=None),
    ):
        caller = _participant(x_participant_id)
        return reg.configure_priority_weight(caller, req.tier).model_dump()

    @app.put("/pursuit/deadline")
    def establish_deadline(
        req: DeadlineRequest,
        x_participant_id: Optional[str] = Header(default=None),
    ):
        caller = _participant(x_participant_id)
        return reg.establish_temporal_constraint(caller, req.offset).model_dump()

    # === INSPECTION ===

    @app.get("/registry/state")
    def get_registry_state():
        """All three maps and the current clock."""
        return reg.snapshot()

    @app.get("/clock")
    def get_clock():
        return {"clock": reg.clock.now()}

    return app


# Default application instance
app = create_app(config=RegistryConfig.from_env(), setup_logging=True)
