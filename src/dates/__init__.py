"""Date parsing and interval validation.

The dates layer turns raw request values (date strings, Unix timestamps, relative expressions) into
UTC-aware `datetime` values and validates the intervals built from them.
"""
