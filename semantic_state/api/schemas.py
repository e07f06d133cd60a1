"""
Request and response models for the semantic state HTTP host.
Field names serialize as camelCase to match the engine's canonical host contract.
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any
from datetime import datetime


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateRequest(CamelModel):
    embedding: List[float]
    now_ms: Optional[float] = None


class UpdateResponse(CamelModel):
    drift_detected: bool
    drift_score: float
    vector: List[float]


class SnapshotResponse(CamelModel):
    vector: List[float]
    health_score: float
    timestamp: float
    semantic_summary: str

    @field_validator('semantic_summary')
    @classmethod
    def summary_must_be_valid(cls, v):
        valid_summaries = ['stable', 'drifting', 'volatile']
        if v not in valid_summaries:
            raise ValueError(f'semantic_summary must be one of: {valid_summaries}')
        return v


class NormalizeRequest(CamelModel):
    vector: List[float]


class NormalizeResponse(CamelModel):
    vector: List[float]


class ResetResponse(CamelModel):
    success: bool
    previous_update_count: int


class HealthResponse(CamelModel):
    status: str
    version: str
    tracking: bool
    dimension: Optional[int] = None
    update_count: int


class DebugResponse(CamelModel):
    engine: Dict[str, Any]
    timestamp: datetime
