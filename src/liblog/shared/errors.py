from __future__ import annotations


class LibLogError(RuntimeError):
    """Base class for errors raised by the facade itself."""


class BackendBindingError(LibLogError):
    """A type, member or level required to bind an external backend is missing.

    Raised the first time the affected backend is used. It signals a
    deployment mismatch (wrong backend version, renamed API) and is never
    caught by the facade.
    """
