"""Transfer functions, one module per acceleration family."""

from accelconv.core.curves.functions.classic import classic, linear
from accelconv.core.curves.functions.jump import jump
from accelconv.core.curves.functions.lookup import lookup
from accelconv.core.curves.functions.motivity import motivity
from accelconv.core.curves.functions.natural import natural
from accelconv.core.curves.functions.power import power
from accelconv.core.curves.functions.synchronous import synchronous

__all__ = [
    "classic",
    "jump",
    "linear",
    "lookup",
    "motivity",
    "natural",
    "power",
    "synchronous",
]
