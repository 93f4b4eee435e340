"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 4000

TASK_ID_PREFIX = "T"
TASK_ID_WIDTH = 3

# Department distribution key for employees without a department.
MISSING_DEPARTMENT_KEY = "null"

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
