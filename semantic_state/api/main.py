"""
HTTP host for a single semantic state engine.
Translates JSON requests into engine calls and engine results into camelCase JSON.
"""

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime
from typing import Optional
import threading

from .schemas import (
    UpdateRequest,
    UpdateResponse,
    SnapshotResponse,
    NormalizeRequest,
    NormalizeResponse,
    ResetResponse,
    HealthResponse,
    DebugResponse,
)
from .tracker import SemanticStateTracker
from ..core.config import VERSION, debug_enabled, create_engine
from ..core.engine import normalize
from ..core.errors import SemanticStateError

# Initialize the FastAPI application
app = FastAPI(
    title="Semantic State API",
    version=VERSION,
    description="EMA semantic state tracking with drift detection over one embedding stream",
    docs_url="/docs" if debug_enabled() else None,
    redoc_url="/redoc" if debug_enabled() else None
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Sync endpoints run in a thread pool; the engine expects one call at a time.
_engine_lock = threading.Lock()
_tracker = None


def get_tracker() -> SemanticStateTracker:
    """Get the process-wide tracker, building the engine from config on first use."""
    global _tracker
    if _tracker is None:
        _tracker = SemanticStateTracker(create_engine())
    return _tracker


@app.get("/health", response_model=HealthResponse)
def health_check_endpoint(tracker: SemanticStateTracker = Depends(get_tracker)):
    """Check service health and engine lifecycle state."""
    engine = tracker.engine
    return HealthResponse(
        status="healthy",
        version=VERSION,
        tracking=engine.is_tracking,
        dimension=engine.dimension,
        update_count=engine.update_count
    )


@app.post("/state/update", response_model=UpdateResponse)
def update_endpoint(request: UpdateRequest, tracker: SemanticStateTracker = Depends(get_tracker)):
    """Fuse one embedding into the state and report drift."""
    try:
        with _engine_lock:
            result = tracker.update(request.embedding, request.now_ms)
    except SemanticStateError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return UpdateResponse(**result.to_dict())


@app.get("/state/snapshot", response_model=SnapshotResponse)
def snapshot_endpoint(nowMs: Optional[float] = None, tracker: SemanticStateTracker = Depends(get_tracker)):
    """Get the current state vector, health score and summary."""
    with _engine_lock:
        snapshot = tracker.get_snapshot(nowMs)

    return SnapshotResponse(**snapshot.to_dict())


@app.post("/state/reset", response_model=ResetResponse)
def reset_endpoint(tracker: SemanticStateTracker = Depends(get_tracker)):
    """Forget the current stream, including its dimension."""
    with _engine_lock:
        previous = tracker.engine.update_count
        tracker.reset()

    return ResetResponse(success=True, previous_update_count=previous)


@app.post("/vector/normalize", response_model=NormalizeResponse)
def normalize_endpoint(request: NormalizeRequest):
    """Scale a vector to unit length."""
    return NormalizeResponse(vector=normalize(request.vector).tolist())


@app.get("/debug", response_model=DebugResponse)
def debug_endpoint(tracker: SemanticStateTracker = Depends(get_tracker)):
    """Get engine bookkeeping (debug mode only)."""
    if not debug_enabled():
        raise HTTPException(status_code=403, detail="Debug endpoint disabled")

    with _engine_lock:
        info = tracker.engine.debug_info()

    return DebugResponse(engine=info, timestamp=datetime.now())
