"""hz-catalog - Hazelcast SQL catalog introspection tool."""

from hz_catalog.__about__ import __version__

__all__ = ["__version__"]
