"""
Input errors for the algorithm kernels.

Raised at the kernel boundary and reported by the demo driver.
"""


class AlgorithmInputError(ValueError):
    """Base class for invalid kernel inputs."""
    pass


class InvalidCapacityError(AlgorithmInputError):
    """Raised when a knapsack capacity is negative or not an integer."""
    pass


class LengthMismatchError(AlgorithmInputError):
    """Raised when weights/values differ in length or n is out of range."""
    pass


class InvalidWeightError(AlgorithmInputError):
    """Raised when an item weight is negative."""
    pass


class InvalidValueError(AlgorithmInputError):
    """Raised when an item value is not an integer."""
    pass
