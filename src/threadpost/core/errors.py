"""Exceptions raised by the post core.

Failures reported by the database driver (connectivity, bad statements) are
SQLAlchemy exceptions and are deliberately not wrapped here.
"""


class ThreadPostError(RuntimeError):
    """Base exception for errors raised by this package."""


class PreconditionError(ThreadPostError):
    """Raised when an operation is called in a state it does not accept.

    This signals a programming error in the caller, such as replacing a post
    that was never persisted or passing a filter of the wrong type to a load.
    It is never retried and never turned into a boolean result.
    """
