"""
Configuration file for the standard-form line library.

Contains both DEFAULT and PRECISE tolerance sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True when coefficients come from exact inputs and the
# tighter epsilon is wanted
PRECISE_MODE = False


# ===============================================================
# DEFAULT-MODE PARAMETERS
# ===============================================================

DEFAULT = {
    "EPSILON": 1e-9,
}


# ===============================================================
# PRECISE-MODE PARAMETERS
# ===============================================================

PRECISE = {
    "EPSILON": 1e-12,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

POINT_ON_LINE_TOLERANCE = 1e-4     # max perpendicular distance for contains_point
PARALLEL_ANGLE_THRESHOLD = 1.0     # degrees, near-parallel helper only


# ---------------------------------------------------------------
# RENDERING
# ---------------------------------------------------------------

DISPLAY_PRECISION = 2              # decimals in "ax + by = c"


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by the Line model and the geometry helpers so they only
      import one dictionary.
    """

    base = {
        "POINT_ON_LINE_TOLERANCE": POINT_ON_LINE_TOLERANCE,
        "PARALLEL_ANGLE_THRESHOLD": PARALLEL_ANGLE_THRESHOLD,
        "DISPLAY_PRECISION": DISPLAY_PRECISION,
    }

    # Merge in default or precise mode values
    if PRECISE_MODE:
        base.update(PRECISE)
    else:
        base.update(DEFAULT)

    return base
