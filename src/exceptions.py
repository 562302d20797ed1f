"""Errors surfaced by the word picker."""


class WordPickerError(Exception):
    """Base class for failures that abort a pick request."""


class FetchError(WordPickerError):
    """The random article could not be downloaded."""


class ExtractionError(WordPickerError):
    """The downloaded document could not be parsed."""


class StorageError(WordPickerError):
    """Reading or writing used words failed."""
