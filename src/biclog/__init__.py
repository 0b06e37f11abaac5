"""biclog — keeps track of your bike rides."""

__version__ = "0.1.0"
