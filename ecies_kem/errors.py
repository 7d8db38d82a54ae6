# Copyright (c) 2026 Signer — MIT License

"""Exception hierarchy for the ECIES recipient KEM.

    EciesError
    ├── InvalidArgumentError   malformed or inconsistent caller data
    ├── UnsupportedCurveError  no strategy for the requested curve
    └── InternalError          a primitive failed on well-formed input

InvalidArgumentError also subclasses ValueError so callers that already
catch ValueError around key handling keep working.
"""


class EciesError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(EciesError, ValueError):
    pass


class UnsupportedCurveError(EciesError, NotImplementedError):
    pass


class InternalError(EciesError):
    pass
