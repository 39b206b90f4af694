"""Time range resolution.

The timerange layer converts a user-entered time specification ("today", "october 2025",
"week 32", "2025-12-01..2025-12-31", ...) into a closed `TimeRange` of local datetimes.
"""
