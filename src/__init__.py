"""modscore: disjoint modularity of a graph partition."""

from modscore.version import __version__

__all__ = ["__version__"]
