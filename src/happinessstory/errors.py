"""Exception hierarchy shared by the loader, derivation, and app layers."""


class HappinessStoryError(Exception):
    """Base class for errors raised by this package."""


class DataLoadError(HappinessStoryError):
    """Input dataset is missing, unparseable, or invalid. Fatal to the session."""


class InvalidFieldCoercionError(DataLoadError):
    """A numeric cell could not be converted to a number."""

    def __init__(self, column: str, row: int, value: object) -> None:
        self.column = column
        self.row = row  # 1-based data row (header excluded)
        self.value = value
        super().__init__(f"Column {column!r}, row {row}: cannot convert {value!r} to a number")


class InsufficientDataError(HappinessStoryError):
    """Too few records for an extremes computation to yield disjoint groups."""
