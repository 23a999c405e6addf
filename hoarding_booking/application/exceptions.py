class InputDataError(ValueError):
    """Raised when a booked-range record is malformed (missing or unparseable bounds)."""
    pass


class ArithmeticInputError(ValueError):
    """Raised when a pricing input cannot be read as a non-negative number."""
    pass


class BookedRangesUnavailable(RuntimeError):
    """Raised when the booking backend fails (timeouts, network errors, bad status)."""
    pass
