"""
Parameter Manager for PairRank.

Holds the active scheduler and solver parameters with:
- Runtime parameter updates
- Validation of updates through the pydantic models
- Fallback to defaults after a reset
"""

import logging
from typing import Any, Dict, Optional, Union
from pydantic import BaseModel

from pairrank.config.params.models import (
    ParamType,
    SchedulerParams,
    SolverParams,
    PARAM_TYPE_TO_CLASS,
    get_default_params,
)

logger = logging.getLogger(__name__)


class ParameterManager:
    """
    Centralized in-memory parameter management.

    Parameters set through `set_params` override the defaults until
    `reset` is called.
    """

    def __init__(self, overrides: Optional[Dict[Union[ParamType, str], Any]] = None):
        self._params: Dict[ParamType, BaseModel] = {}
        for param_type, params in (overrides or {}).items():
            self.set_params(param_type, params)

    # =========================================================================
    # Generic Parameter Access
    # =========================================================================

    def get_params(self, param_type: Union[ParamType, str]) -> BaseModel:
        """
        Get parameters for a given type.

        Args:
            param_type: Parameter type

        Returns:
            Parameter model instance (defaults when never set)
        """
        if isinstance(param_type, str):
            param_type = ParamType(param_type)
        params = self._params.get(param_type)
        if params is None:
            params = get_default_params(param_type)
        return params

    def set_params(
        self,
        param_type: Union[ParamType, str],
        params: Union[BaseModel, Dict[str, Any]]
    ) -> BaseModel:
        """
        Set parameters for a given type.

        Args:
            param_type: Parameter type
            params: Parameter values (model or dict)

        Returns:
            The validated parameter model now in effect

        Raises:
            pydantic.ValidationError: If a dict fails validation
            TypeError: If a model of the wrong class is given
        """
        if isinstance(param_type, str):
            param_type = ParamType(param_type)

        param_class = PARAM_TYPE_TO_CLASS[param_type]
        if isinstance(params, dict):
            params = param_class(**params)
        elif not isinstance(params, param_class):
            raise TypeError(
                f"Expected {param_class.__name__} for {param_type.value}, "
                f"got {type(params).__name__}"
            )

        self._params[param_type] = params
        logger.info(f"Updated {param_type.value} params: {params.model_dump()}")
        return params

    def update_params(self, param_type: Union[ParamType, str], **changes) -> BaseModel:
        """Apply field-level changes on top of the current parameters."""
        current = self.get_params(param_type)
        merged = {**current.model_dump(), **changes}
        return self.set_params(param_type, merged)

    def reset(self, param_type: Optional[Union[ParamType, str]] = None) -> None:
        """Drop overrides for one type, or for all types when None."""
        if param_type is None:
            self._params.clear()
            return
        if isinstance(param_type, str):
            param_type = ParamType(param_type)
        self._params.pop(param_type, None)

    # =========================================================================
    # Typed Accessors
    # =========================================================================

    def get_scheduler_params(self) -> SchedulerParams:
        return self.get_params(ParamType.SCHEDULER)

    def get_solver_params(self) -> SolverParams:
        return self.get_params(ParamType.SOLVER)

    def export_all(self) -> Dict[str, Dict[str, Any]]:
        """Current values of every parameter group."""
        return {
            param_type.value: self.get_params(param_type).model_dump()
            for param_type in ParamType
        }


# =============================================================================
# Global Instance
# =============================================================================

_parameter_manager: Optional[ParameterManager] = None


def get_parameter_manager() -> ParameterManager:
    """Get or create global ParameterManager instance."""
    global _parameter_manager
    if _parameter_manager is None:
        _parameter_manager = ParameterManager()
    return _parameter_manager


def reset_parameter_manager() -> None:
    """Discard the global ParameterManager (mainly for tests)."""
    global _parameter_manager
    _parameter_manager = None
