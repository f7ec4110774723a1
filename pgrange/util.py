"""Limit constants for the built-in element domains.

Integer limits match the database's 4- and 8-byte integer columns.
"""

from datetime import timedelta

# Signed integer limits
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1
INT8_MIN = -(2**63)
INT8_MAX = 2**63 - 1

# Successor step for date ranges
ONE_DAY = timedelta(days=1)
