r"""
'   ___  ___  __ _ _   _
'  / __|/ _ \/ _` | | | |
'  \__ \  __/ (_| | |_| |
'  |___/\___|\__, |\__, |
'               |_| |___/
"""

# expose the main class
from .enumerable import Sequence

# expose the factory functions
from .factories import (
    of,
    from_iterable,
    empty,
    once,
    repeat_forever,
    repeat,
    generate,
    from_range,
    is_sequence,
    seq,
    S
)

# expose supporting types
from .types import Position, Ordering
from .errors import SeqyError, ValidationError, OrderingError
from .utils import equal, identity
from .config import Settings, settings, configure, reset

# define what `import *` does
__all__ = [
    "Sequence",
    "of",
    "from_iterable",
    "empty",
    "once",
    "repeat_forever",
    "repeat",
    "generate",
    "from_range",
    "is_sequence",
    "seq",
    "S",
    "Position",
    "Ordering",
    "SeqyError",
    "ValidationError",
    "OrderingError",
    "equal",
    "identity",
    "Settings",
    "settings",
    "configure",
    "reset"
]
