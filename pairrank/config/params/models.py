"""
Parameter Pydantic models for PairRank.

Defines the parameter groups consumed by the scheduler and the solver.
"""

from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, Field, field_validator

from pairrank.core.constants import SOLVER_METHODS


class ParamType(str, Enum):
    """Parameter type identifiers."""
    SCHEDULER = "scheduler"
    SOLVER = "solver"


class SchedulerParams(BaseModel):
    """Question scheduling parameters."""

    adaptive_phase: bool = Field(
        default=True,
        description="Ask further pairs after the spanning phase"
    )
    target_link_count: Optional[int] = Field(
        default=None,
        ge=1,
        description="Stop the adaptive phase once every remaining pair reaches this link count"
    )
    max_adaptive_questions: Optional[int] = Field(
        default=None,
        ge=0,
        description="Upper bound on questions asked in the adaptive phase"
    )

    model_config = {"extra": "forbid"}


class SolverParams(BaseModel):
    """Least-squares solver parameters."""

    method: str = Field(
        default="cholesky",
        description="Normal-equation solve: 'cholesky' (falls back to 'general') or 'general'"
    )
    rank_tolerance: Optional[float] = Field(
        default=None,
        gt=0,
        description="Singular value cutoff for the rank check (numpy default if None)"
    )
    renormalize: bool = Field(
        default=True,
        description="Divide the solution by the anchor's own value after solving"
    )

    model_config = {"extra": "forbid"}

    @field_validator("method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        if v not in SOLVER_METHODS:
            raise ValueError(f"method must be one of {SOLVER_METHODS}, got {v!r}")
        return v


class SystemParams(BaseModel):
    """All parameter groups."""

    scheduler: SchedulerParams = Field(default_factory=SchedulerParams)
    solver: SolverParams = Field(default_factory=SolverParams)

    model_config = {"extra": "forbid"}

    def get_param_group(self, param_type: ParamType) -> BaseModel:
        """Get parameter group by type."""
        mapping = {
            ParamType.SCHEDULER: self.scheduler,
            ParamType.SOLVER: self.solver,
        }
        return mapping[param_type]


# Mapping from param type to model class
PARAM_TYPE_TO_CLASS: Dict[ParamType, type] = {
    ParamType.SCHEDULER: SchedulerParams,
    ParamType.SOLVER: SolverParams,
}


def get_default_params(param_type: ParamType) -> BaseModel:
    """Get default parameters for a given type."""
    return PARAM_TYPE_TO_CLASS[param_type]()
