"""shapesaver package root."""

from shapesaver.exceptions import NeverThrown, ShapeSaverError
from shapesaver.infer import generate_schema, generate_schema_from_samples, infer
from shapesaver.invariants import never
from shapesaver.merge import merge
from shapesaver.trim import trim

__all__ = [
    "__version__",
    "NeverThrown",
    "ShapeSaverError",
    "generate_schema",
    "generate_schema_from_samples",
    "infer",
    "merge",
    "never",
    "trim",
]

__version__ = "0.1.0"
