"""Exception types raised by DesignDesk."""


class DesignDeskError(Exception):
    """Base class for all DesignDesk errors."""


class StorageError(DesignDeskError):
    """The key-value backend could not read, write or decode the document.

    There is no fallback persistence tier, so callers surface this to the user.
    """


class ImportRejected(DesignDeskError):
    """An import payload failed parsing or the document shape check."""
