"""Compound-growth projections for SIP and lumpsum investments."""

__version__ = "0.1.0"
