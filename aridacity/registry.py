"""Catalogue of the modules in the collection."""

from .bcrush import BitCrusher
from .clip import Clipper
from .clockdiv import ClockDivider
from .remainder import Remainder

_MODELS = {
    "ClockDiv": ClockDivider,
    "BCrush": BitCrusher,
    "Clip": Clipper,
    "Remainder": Remainder,
}


def model_names():
    """Names of the available modules, in registration order."""
    return tuple(_MODELS)


def create(name):
    """Return a new instance of the module registered as ``name``."""
    try:
        factory = _MODELS[name]
    except KeyError:
        raise KeyError(f"unknown model: {name!r}") from None
    return factory()