class ReviewError(Exception):
    """Base class for failures of the review core."""


class ReviewValidationError(ReviewError):
    """The caller supplied input the review core refuses to act on."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


class StorageError(ReviewError):
    """The review store could not complete a read or write."""
