"""Building blocks for generating C++ JSON serializer code from type descriptions."""

__version__ = "0.1.0"