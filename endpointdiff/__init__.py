"""
EndpointDiff - JSONPath-based equivalence checks between two REST endpoints

Fetches a JSON document from each of two endpoints, selects values from
each with a JSONPath expression, flattens them to string leaves and reports
which values are shared and which appear on one side only.
"""

from .engine import ComparisonEngine, compare
from .models import ComparisonResult, DiffOutcome, Side
from .jsonpath_utils import PathExpression, select
from .flattener import ValueFlattener, flatten
from .differ import SetDiffer, diff
from .exceptions import (
    EndpointDiffError,
    ConfigError,
    FetchError,
    PathEvaluationError,
    PathSyntaxError,
)
from .config import (
    DiffConfig,
    EndpointSpec,
    GeneralConfig,
    load_config,
)
from .client import JSONClient
from .reporter import ComparisonReporter
from .runner import (
    EndpointDiffRunner,
    run_comparison,
)

__version__ = "1.0.0"
__all__ = [
    # Engine
    "ComparisonEngine",
    "compare",
    "ComparisonResult",
    "DiffOutcome",
    "Side",
    # Pipeline stages
    "PathExpression",
    "select",
    "ValueFlattener",
    "flatten",
    "SetDiffer",
    "diff",
    # Errors
    "EndpointDiffError",
    "ConfigError",
    "FetchError",
    "PathEvaluationError",
    "PathSyntaxError",
    # Configuration
    "DiffConfig",
    "EndpointSpec",
    "GeneralConfig",
    "load_config",
    # Fetching and reporting
    "JSONClient",
    "ComparisonReporter",
    # Runner
    "EndpointDiffRunner",
    "run_comparison",
]
