"""Function combinators and sequence transforms.

``arrays`` shadows builtin names (map, filter), so it is usually imported as
a module: ``from fpkit.functions import arrays as A``.
"""

from . import arrays
from .arrays import group_by, index_by, reduce
from .combinators import compose, identity, partial, pipe, tap, trace

__all__ = [
    "arrays",
    # Composition
    "pipe", "compose", "tap", "partial", "identity", "trace",
    # Sequences
    "reduce", "group_by", "index_by",
]
