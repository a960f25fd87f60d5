"""
Error taxonomy for the weight estimation core.

All errors are ValueErrors so callers that only care about "bad input"
can catch one type. Routers translate them to 400 responses, the CLI to
a stderr message and exit code 1.
"""


class WeightEstimationError(ValueError):
    """Base class for every error raised by the estimation pipeline."""


class InvalidMesh(WeightEstimationError):
    """Mesh arrays are malformed, a face index is out of range, or the STL is unreadable."""


class DegenerateGeometry(WeightEstimationError):
    """Bounding box is flat along an axis, or a target dimension is not positive."""


class OutOfRangeInfill(WeightEstimationError):
    """Infill percentage outside 0-100."""

    def __init__(self, infill_percentage: float):
        self.infill_percentage = infill_percentage
        super().__init__("Infill percentage must be in the range of 0-100")
