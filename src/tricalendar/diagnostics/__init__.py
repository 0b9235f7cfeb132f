"""Diagnostics package.

- new_years_table: Bengali and Hijri New Year dates per Gregorian year (no extras)
- month_lengths: observed month-length census (requires the diagnostics extra)
"""

__all__ = ["new_years_table", "month_lengths"]
