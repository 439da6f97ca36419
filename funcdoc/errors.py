"""Exception types raised by the function documentation extractor."""


class FuncdocError(Exception):
    """Base class for all funcdoc errors."""


class ParseError(FuncdocError):
    """Raised when a source file cannot be read or is structurally malformed.

    Aborts the whole extraction pass; no records are produced.
    """


class SignatureError(FuncdocError, TypeError):
    """Raised when a registry value cannot be introspected as a callable."""


class RegistryError(FuncdocError):
    """Raised when a function registry reference cannot be loaded."""
