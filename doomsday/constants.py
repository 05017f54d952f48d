"""
Central constants for the doomsday weekday calculator.
All fixed calendar tables are defined here.
"""

# =============================================================================
# EPOCH
# =============================================================================
EPOCH_YEAR = 1752               # Gregorian adoption (British Empire), first supported year


# =============================================================================
# NAMES
# =============================================================================
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
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

DAYS_PER_WEEK = 7
SUNDAY_RESIDUE = 0              # Residue 0 is Sunday, 1..6 are Monday..Saturday


# =============================================================================
# MONTH ANCHORS (day of month that falls on the year's doomsday)
# =============================================================================
# Keyed by month ordinal. January and February depend on the leap rule.
LEAP_DEPENDENT_ANCHORS = {
    1: (3, 4),                  # 3 for three years, then 4 on the fourth
    2: (28, 29),                # Last day of February
}

FIXED_ANCHORS = {
    3: 0,                       # Day 0 of March, the last day of February
    4: 4,                       # 4/4
    5: 9,                       # 9 to 5 (reversed)
    6: 6,                       # 6/6
    7: 11,                      # 7-Eleven
    8: 8,                       # 8/8
    9: 5,                       # 9 to 5
    10: 10,                     # 10/10
    11: 7,                      # 7-Eleven (reversed)
    12: 12,                     # 12/12
}


# =============================================================================
# MONTH LENGTHS
# =============================================================================
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
LEAP_DAY_MONTH = 2              # February gains the leap day
