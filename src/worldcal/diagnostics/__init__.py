"""Diagnostics package.

- round_trip: always available, checks date <-> day count <-> text conversions
- year_lengths: needs numpy (pip install "worldcal[diagnostics]")
"""

__all__ = ["round_trip", "year_lengths"]
