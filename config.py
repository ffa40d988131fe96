"""
Configuration file for the line-intersection queries.

Holds the scalar-type settings and the reserved "unbounded" intersection
count. Modules should read values using the get_active_params() function
or import the constants directly.
"""

import numpy as np


# ---------------------------------------------------------------
# SCALAR TYPES
# ---------------------------------------------------------------

# Used when a Line is built without an explicit dtype
DEFAULT_SCALAR_TYPE = np.float64

SUPPORTED_SCALAR_TYPES = (
    np.float16,
    np.float32,
    np.float64,
    np.longdouble,
)


# ---------------------------------------------------------------
# CLASSIFICATION
# ---------------------------------------------------------------

# Tag for coincident lines. Never used in arithmetic.
UNBOUNDED_INTERSECTIONS = int(np.iinfo(np.int32).max)


# ---------------------------------------------------------------
# LOGGING
# ---------------------------------------------------------------

# Pairwise queries over more lines than this are logged at INFO
LARGE_BATCH_SIZE = 1000


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as one dictionary, so callers
    only import a single accessor.
    """
    return {
        "DEFAULT_SCALAR_TYPE": DEFAULT_SCALAR_TYPE,
        "SUPPORTED_SCALAR_TYPES": SUPPORTED_SCALAR_TYPES,
        "UNBOUNDED_INTERSECTIONS": UNBOUNDED_INTERSECTIONS,
        "LARGE_BATCH_SIZE": LARGE_BATCH_SIZE,
    }
