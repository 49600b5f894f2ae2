"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

ALL = "all"

# Status policy, not configurable.
LOW_ATTENDANCE_PCT = 75
LOW_PERFORMANCE_SCORE = 70

DEFAULT_ID_SEED = 0
CHART_SERIES_LABEL = "Average Attendance %"
