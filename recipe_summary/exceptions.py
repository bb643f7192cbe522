class RecipeSummaryError(Exception):
    """Base class for exceptions thrown while loading or summarising recipes."""


class InputFileError(RecipeSummaryError):
    """Thrown when the input file does not exist or cannot be opened."""


class MalformedInputError(RecipeSummaryError):
    """Thrown when the delimited file reader rejects the input."""
