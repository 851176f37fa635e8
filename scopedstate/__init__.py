"""Scoped State - closure-backed handles over private mutable state."""

__version__ = "1.0.0"

from scopedstate.closures import capture_each, create_greeting, create_id_generator, memoize
from scopedstate.factory import create, create_from_config
from scopedstate.models import ScenarioReport, ScenarioResult, StatefulHandle
from scopedstate.utils.validation import InvalidArgumentError

__all__ = [
    "InvalidArgumentError",
    "ScenarioReport",
    "ScenarioResult",
    "StatefulHandle",
    "capture_each",
    "create",
    "create_from_config",
    "create_greeting",
    "create_id_generator",
    "memoize",
]
