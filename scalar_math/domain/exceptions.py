class ScalarMathException(Exception):
    """
    Base exception for all scalar_math errors.
    """


class UnitMismatchError(ScalarMathException, TypeError):
    """
    Raised when radian and degree values are mixed in one operation.
    """


class ConfigurationError(ScalarMathException, ValueError):
    """
    Raised when environment settings cannot be interpreted.
    """


class PrecisionMismatchError(ScalarMathException, TypeError):
    """
    Raised when 32-bit and 64-bit floats are mixed in one operation.
    """
