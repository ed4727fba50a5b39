"""Pure filter combinators.

Built by the chaining methods of Filter; importing them directly is only
needed to construct trees by hand.
"""

from filterops.domain.ops.bridge import IntoFailable
from filterops.domain.ops.constant import Bool
from filterops.domain.ops.logical import And, Not, Or, XOr
from filterops.domain.ops.mapping import MapInput

__all__ = [
    "And",
    "Bool",
    "IntoFailable",
    "MapInput",
    "Not",
    "Or",
    "XOr",
]
