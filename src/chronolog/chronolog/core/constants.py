"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_EMPLOYEE_ID_LENGTH = 50
MYSQL_DUPLICATE_KEY_ERRNO = 1062
