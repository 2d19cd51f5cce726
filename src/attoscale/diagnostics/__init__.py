"""Diagnostics package.

- round_trip: relativistic round-trip error statistics (requires numpy; matplotlib for plots)
"""

__all__ = ["round_trip"]
