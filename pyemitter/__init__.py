from pyemitter.lib.emitter import (
    ALL,
    InvalidArgument,
    Registry,
    get_default_registry,
    off,
    on,
    once,
    trigger,
)
from pyemitter.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    "ALL",
    InvalidArgument.__name__,
    Registry.__name__,
    get_default_registry.__name__,
    off.__name__,
    on.__name__,
    once.__name__,
    trigger.__name__,
]
