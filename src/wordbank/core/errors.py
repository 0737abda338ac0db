"""
Error taxonomy shared by the loader, stores and API clients.
"""


class WordBankError(Exception):
    """Base class for all wordbank errors."""


class FetchFailure(WordBankError):
    """A network or API level failure. Retry on the next user action."""


class NotFound(WordBankError):
    """A well-formed answer saying the thing does not exist."""


class IndexUnavailable(FetchFailure):
    """The chunked dataset's index could not be loaded."""
