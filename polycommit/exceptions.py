class PolyCommitError(Exception):
    """Base exception class."""


class ConfigurationError(PolyCommitError):
    """Raise for configuration errors."""


class FieldEvaluationError(PolyCommitError):
    """Base class for errors raised while evaluating over a root of unity domain."""


class UnsupportedSize(FieldEvaluationError):
    """Raised when a domain size is not supported by the roots of unity."""


class DimensionMismatch(PolyCommitError):
    """Raised when the witness, SRS and blinding polynomial lengths disagree."""


class LengthMismatch(PolyCommitError):
    """Raised when an MSM gets a different number of scalars and points."""


class DeserializationError(PolyCommitError):
    """Raised when persisted SRS bytes are truncated or malformed."""


class SRSPersistenceError(PolyCommitError, IOError):
    """Raised when the SRS file cannot be read or written."""
