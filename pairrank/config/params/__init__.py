"""
Parameter Management System for PairRank.

Provides validated, runtime-adjustable parameter groups:
- Scheduler: adaptive-phase stopping rules
- Solver: normal-equation solve method and normalization
"""

from pairrank.config.params.models import (
    SchedulerParams,
    SolverParams,
    SystemParams,
    ParamType,
)
from pairrank.config.params.manager import (
    ParameterManager,
    get_parameter_manager,
    reset_parameter_manager,
)

__all__ = [
    # Parameter models
    "SchedulerParams",
    "SolverParams",
    "SystemParams",
    "ParamType",
    # Manager
    "ParameterManager",
    "get_parameter_manager",
    "reset_parameter_manager",
]
