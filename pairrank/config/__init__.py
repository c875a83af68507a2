"""
Configuration module for PairRank.

Provides environment-backed settings and validated parameter management.
"""

from pairrank.config.settings import Settings, get_settings, configure
from pairrank.config.params import (
    ParameterManager,
    get_parameter_manager,
    ParamType,
    SchedulerParams,
    SolverParams,
    SystemParams,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "configure",
    # Parameter Management
    "ParameterManager",
    "get_parameter_manager",
    "ParamType",
    "SchedulerParams",
    "SolverParams",
    "SystemParams",
]
