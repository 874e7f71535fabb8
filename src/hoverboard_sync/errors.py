class SyncError(Exception):
    """Base class for failures that abort a sync run."""


class MissingFileError(SyncError):
    """A required local state file does not exist."""


class FetchError(SyncError):
    """The upstream feed could not be downloaded."""


class MalformedDataError(SyncError):
    """A JSON document or a field inside it could not be parsed."""


class LookupFailure(SyncError):
    """A category item, level label or speaker reference did not resolve."""
