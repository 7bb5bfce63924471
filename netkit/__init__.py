"""Network toolset API: IPv4 subnet calculator and well-known port lookup."""

__version__ = "1.0.0"
