"""HTTP routers."""

from . import blob

__all__ = ["blob"]
