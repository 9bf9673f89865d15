class GregtickError(Exception):
    """Base error."""

class ValidationError(GregtickError, ValueError):
    """A civil field is outside its valid range."""

class InvalidYearError(ValidationError):
    """Year outside MIN_YEAR..MAX_YEAR."""

class InvalidMonthError(ValidationError):
    """Month outside 1..12."""

class InvalidDayError(ValidationError):
    """Day outside 1..days in that month for that year."""

class InvalidTimeOfDayError(ValidationError):
    """Hour, minute or second outside its range."""
