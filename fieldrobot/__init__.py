"""Geometry, file, logging, NTRIP and job supervision utilities for a field robot."""

__version__ = "0.1.0"