"""
Failure raised when a page cannot be reconstructed into a week.
"""


class UnparsableLayout(Exception):
    """No usable column survived, or a column header is not a date."""
