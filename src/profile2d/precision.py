"""Fixed tolerances shared by the geometric algorithms.

The tolerances form a hierarchy, from the tightest to the loosest:

- PRECISION_INTERSECTION: identity of intersection points and landmarks
- PRECISION_OFFSET: offset construction
- PRECISION_POINT: generic point comparison
"""

PRECISION_INTERSECTION = 1e-9
PRECISION_OFFSET = 1e-8
PRECISION_POINT = 1e-6

# Number of decimals kept when intersection points are deduplicated
INTERSECTION_DECIMALS = 9

__all__ = [
    "INTERSECTION_DECIMALS",
    "PRECISION_INTERSECTION",
    "PRECISION_OFFSET",
    "PRECISION_POINT",
]
