"""Object pools, game actors, singletons, a file logger, a printer registry and a monostate clock."""

__version__ = "0.1.0"