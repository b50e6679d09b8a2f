"""
Pydantic models for matcher statistics and performance reports.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from enum import Enum


class MatchVariant(str, Enum):
    """Evaluator variant"""
    NO_DEFAULT = "no_default"
    WITH_DEFAULT = "with_default"


class MatchStats(BaseModel):
    """Counters collected by a matcher while it is being pulled"""
    variant: MatchVariant = Field(..., description="Which evaluator produced these counters")
    arms: int = Field(..., description="Number of registered arms", ge=0)
    consumed: int = Field(0, description="Source items pulled so far", ge=0)
    produced: int = Field(0, description="Outputs returned so far", ge=0)
    skipped: int = Field(0, description="Items discarded because no arm matched", ge=0)
    defaulted: int = Field(0, description="Outputs produced by the default", ge=0)
    arm_hits: List[int] = Field(
        default_factory=list,
        description="Match count per arm, in registration order"
    )
    exhausted: bool = Field(False, description="Whether the source has signalled completion")

    model_config = ConfigDict(
        use_enum_values=True,
        json_schema_extra={
            "example": {
                "variant": "with_default",
                "arms": 1,
                "consumed": 10,
                "produced": 10,
                "skipped": 0,
                "defaulted": 5,
                "arm_hits": [5],
                "exhausted": True
            }
        }
    )


class PerformanceReport(BaseModel):
    """Timing and memory usage of a single measured call"""
    operation: str = Field(..., description="Operation name")
    execution_time_ms: float = Field(..., description="Wall time in milliseconds", ge=0)
    memory_usage_mb: float = Field(..., description="Peak traced memory in MB", ge=0)
    success: bool = Field(..., description="Whether the call returned normally")
    result_size: Optional[int] = Field(None, description="len() of the result when available", ge=0)
    error: Optional[str] = Field(None, description="Error message for failed calls")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the call finished")


class PerformanceSummary(BaseModel):
    """Aggregate over all recorded performance reports"""
    total_operations: int = Field(0, ge=0)
    failed_operations: int = Field(0, ge=0)
    total_time_ms: float = Field(0.0, ge=0)
    total_memory_mb: float = Field(0.0, ge=0)
    avg_time_ms: float = Field(0.0, ge=0)
    avg_memory_mb: float = Field(0.0, ge=0)
