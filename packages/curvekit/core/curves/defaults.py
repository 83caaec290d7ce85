"""Default parameters for intuitive curve construction.

Plain constants, kept separate from the models to avoid circular imports.
"""

# Fraction of the limit-to-limit span between each limit and its intercept
DEFAULT_PERCENT_INSET = 0.01

# Limits used when no vertical handles are supplied
DEFAULT_LEFT_LIMIT = 0.0
DEFAULT_RIGHT_LIMIT = 1.0
