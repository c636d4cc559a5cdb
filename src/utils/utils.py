"""
Common utility functions used by various packages
"""


def truncating_div(numerator: int, denominator: int) -> int:
    """
    Integer division that rounds toward zero, unlike ``//`` which floors.
    -3 / 2 gives -1 here rather than -2.
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient
