# fast_delivery/domain/errors.py


class TariffError(Exception):
    """Base class for every failure raised by the pricing core."""


class RangeError(TariffError, ValueError):
    """A numeric value fell outside its defined bound."""

    def __init__(self, message: str, *, value=None, bound=None, unit: str | None = None):
        super().__init__(message)
        self.value = value
        self.bound = bound
        self.unit = unit


class ConfigError(TariffError, ValueError):
    """A configuration object violates its own invariants (e.g. min >= max)."""


class MissingInputError(TariffError, ValueError):
    """A required reference is absent."""


class DivideByZeroError(TariffError, ZeroDivisionError):
    pass


class UnknownCurrencyError(TariffError, ValueError):
    pass


def require(value, name: str):
    if value is None:
        raise MissingInputError(f"{name} must not be None")
    return value


def require_int(value, name: str) -> int:
    require(value, name)
    # bool is an int subclass but never a measurement
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value
