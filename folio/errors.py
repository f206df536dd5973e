class ContentError(Exception):
    """Base class for failures reading the content store."""


class StorageError(ContentError):
    """The content root or a post file could not be read."""


class NotFoundError(ContentError):
    """No post or asset exists for the requested slug."""
