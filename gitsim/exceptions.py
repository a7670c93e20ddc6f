"""
Exceptions raised by the repository layer.

The interpreter turns every one of these into a plain message paired with
the unchanged state, so ``str(error)`` is what the user sees.
"""


class GitSimError(Exception):
    """Base exception for all simulator errors."""


class SequencingError(GitSimError):
    """Raised when a command arrives in the wrong repository lifecycle phase."""


class NotInitializedError(SequencingError):
    def __init__(self):
        super().__init__('Repository not initialized.')


class AlreadyInitializedError(SequencingError):
    def __init__(self):
        super().__init__('Already initialized.')


class ReferentialError(GitSimError):
    """Raised when a command names a file, branch or object that does not exist."""


class FileNotFoundInWorkingDir(ReferentialError):
    def __init__(self, path):
        super().__init__('File not found.')
        self.path = path


class InvalidCheckoutTarget(ReferentialError):
    def __init__(self, target):
        super().__init__('Invalid checkout target.')
        self.target = target


class InvalidCommitError(ReferentialError):
    def __init__(self, oid):
        super().__init__('Invalid commit.')
        self.oid = oid


class ObjectNotFoundError(ReferentialError):
    def __init__(self, oid, expected=None):
        kind = expected or 'object'
        super().__init__(f'Not a valid {kind}: {oid}')
        self.oid = oid
        self.expected = expected


class EmptyStateError(GitSimError):
    """Raised when a command needs state that is not there yet."""


class NothingToCommitError(EmptyStateError):
    def __init__(self):
        super().__init__('Nothing to commit.')
