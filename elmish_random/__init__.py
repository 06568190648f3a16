"""
Elmish Random: composable random value generators.

Small primitives (floats, ints, booleans, uniform and weighted choice,
constants) plugged together with map / then / pair / list_.
"""

from .generator import Generator
from .sources import (
    DeterministicSource,
    SimpleSeededSource,
    Source,
    ambient_source,
    sequence_source,
    simple_seeded,
)
from .numeric import boolean, float_, float_with_precision, int_
from .structural import constant, list_, pair
from .selection import (
    WeightInvariantError,
    cumulative_weights,
    pick_by_weight,
    uniform,
    weighted,
)
from .config import (
    ConfigError,
    RandomConfig,
    build_source,
    default_source,
    load_config,
    reset_default_source,
    set_default_source,
)
from .diagnostics import SampleMetrics, collect_metrics, compare_to_weights, frequencies, sample

__all__ = [
    "Generator",
    "Source",
    "DeterministicSource",
    "SimpleSeededSource",
    "ambient_source",
    "sequence_source",
    "simple_seeded",
    "boolean",
    "float_",
    "float_with_precision",
    "int_",
    "constant",
    "list_",
    "pair",
    "WeightInvariantError",
    "cumulative_weights",
    "pick_by_weight",
    "uniform",
    "weighted",
    "ConfigError",
    "RandomConfig",
    "build_source",
    "default_source",
    "load_config",
    "reset_default_source",
    "set_default_source",
    "SampleMetrics",
    "collect_metrics",
    "compare_to_weights",
    "frequencies",
    "sample",
]
