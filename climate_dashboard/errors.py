"""
Error types raised by the prediction core.
"""


class InvalidInput(ValueError):
    """Input that the trend predictor or insight generator cannot work with."""


class DegenerateSeries(InvalidInput):
    """Series too short, or with no spread in years, to fit a line."""


class BadHorizon(InvalidInput):
    """Negative number of future points requested."""


class MissingSeries(InvalidInput):
    """Series bundle lacks a series that an insight rule reads."""
