"""Error taxonomy.

Every error a request can produce is either a client-input failure
(``InputError`` and subclasses, mapped to HTTP 400) or a server-side
defect (``InstructionBuildError``, mapped to HTTP 500).
"""

from typing import Optional


class SolforgeError(Exception):
    """Base exception for all solforge errors."""
    pass


class InputError(SolforgeError):
    """Exception raised when request input fails validation.

    Attributes:
        field: Name of the offending request field, if known
        message: Human-readable description
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.message = message


class InvalidAddressError(InputError):
    """Exception raised when an address is not a 32-byte base-58 value."""

    def __init__(self, field: str, reason: str = "not a valid base-58 public key"):
        super().__init__(f"Invalid {field}: {reason}", field=field)


class InvalidSecretError(InputError):
    """Exception raised when a secret key cannot be turned into a keypair."""

    def __init__(self, reason: str, field: str = "secret"):
        super().__init__(f"Invalid secret key: {reason}", field=field)


class InvalidSignatureEncodingError(InputError):
    """Exception raised when a signature does not decode to 64 bytes."""

    def __init__(self, reason: str, field: str = "signature"):
        super().__init__(f"Invalid signature: {reason}", field=field)


class InvalidFieldError(InputError):
    """Exception raised for a malformed amount or other scalar field."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid {field}: {reason}", field=field)


class InstructionBuildError(SolforgeError):
    """Exception raised when instruction assembly fails unexpectedly.

    Input is validated before assembly, so this always indicates a bug.
    """
    pass
