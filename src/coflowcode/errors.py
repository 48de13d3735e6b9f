"""Exception types raised by the toolkit."""


class CoflowError(Exception):
    """Base class for toolkit errors."""


class ImportValidationError(CoflowError, ValueError):
    """An imported document could not be admitted."""


class MalformedJSONError(ImportValidationError):
    """The input text is not syntactically valid JSON."""


class InvalidSchemaError(ImportValidationError):
    """The input is valid JSON but does not have the expected structure."""


class PageLockedError(CoflowError):
    """Navigation past a page that requires all answers to be correct."""

    def __init__(self, page_index: int):
        self.page_index = page_index
        super().__init__(
            f"Page {page_index + 1} requires all answers to be correct before continuing"
        )


class StoreCorruptedError(CoflowError):
    """The assignment store file exists but cannot be read as assignments."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Assignment store {path} is unusable ({reason}); refusing to overwrite it")
