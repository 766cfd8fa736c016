"""
Exception hierarchy for ttestflow.

All exceptions inherit from TTestFlowError to allow catching any
library-specific error in one place.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - "Cannot compute" conditions are distinct exception types, never
      NaN results that look like extreme p-values
"""


class TTestFlowError(Exception):
    """Base exception for all ttestflow errors."""
    pass


class ValidationError(TTestFlowError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: unknown
    alternative, too few observations, unknown column, wrong number of
    groups.
    """
    pass


class DimensionError(ValidationError):
    """
    Array lengths are inconsistent.

    Raised when paired samples differ in length or when group labels do
    not line up with the observations they label.
    """
    pass


class NumericalError(TTestFlowError):
    """
    Numerical computation failed.

    Base class for errors arising from the data itself rather than from
    how the caller invoked the function.
    """
    pass


class DegenerateSampleError(NumericalError):
    """
    The test statistic is undefined for this sample.

    Raised when the standard error of the estimate is zero, which happens
    when every observation (or every paired difference) is identical.

    Attributes:
        n: Number of observations behind the estimate
        standard_error: The standard error that was found (0.0)
    """

    def __init__(
        self,
        message: str,
        n: int | None = None,
        standard_error: float | None = None,
    ):
        super().__init__(message)
        self.n = n
        self.standard_error = standard_error


class InapplicableTestError(TTestFlowError):
    """
    A diagnostic test is undefined for the given input.

    Distinct from both "assumption satisfied" and "assumption violated":
    the test simply has nothing to say about this sample.

    Attributes:
        test_name: Name of the diagnostic (e.g. 'Shapiro-Wilk')
        n: Sample size that was supplied
        min_n: Smallest sample size the test accepts
        max_n: Largest sample size the test accepts
    """

    def __init__(
        self,
        message: str,
        test_name: str | None = None,
        n: int | None = None,
        min_n: int | None = None,
        max_n: int | None = None,
    ):
        super().__init__(message)
        self.test_name = test_name
        self.n = n
        self.min_n = min_n
        self.max_n = max_n
