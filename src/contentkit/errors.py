"""Typed errors for contentkit."""


class ContentKitError(Exception):
    """Base exception for all contentkit errors."""


class InvalidArgumentError(ContentKitError):
    """Raised when a caller supplies malformed or missing input."""

    def __init__(self, argument_name: str, reason: str) -> None:
        """Initialize with the offending argument name and a reason."""
        self.argument_name = argument_name
        self.reason = reason
        super().__init__(f"Argument '{argument_name}' is invalid: {reason}")


class InvalidArgumentValue(InvalidArgumentError):
    """Raised when one field or argument holds an invalid value."""

    def __init__(self, argument_name: str, value: object, what: str | None = None) -> None:
        """Initialize with the argument name, its value and the owning struct name."""
        self.value = value
        self.what = what
        location = f" in {what}" if what is not None else ""
        super().__init__(argument_name, f"{value!r}{location}")


class AlreadyExistsError(InvalidArgumentError):
    """Raised when a unique value is already taken."""

    def __init__(self, argument_name: str, value: object) -> None:
        """Initialize with the argument name and the conflicting value."""
        self.value = value
        super().__init__(argument_name, f"{value!r} already exists")


class NotFoundError(ContentKitError):
    """Raised when an identifier cannot be resolved."""

    def __init__(self, what: str, identifier: object) -> None:
        """Initialize with the kind of object and the missing identifier."""
        self.what = what
        self.identifier = identifier
        super().__init__(f"Could not find '{what}' with identifier {identifier!r}")


class BadStateError(ContentKitError):
    """Raised when an operation is not allowed in the current state."""

    def __init__(self, argument_name: str, reason: str) -> None:
        """Initialize with the affected argument and the reason."""
        self.argument_name = argument_name
        self.reason = reason
        super().__init__(f"Argument '{argument_name}' has a bad state: {reason}")


class HandlerError(ContentKitError):
    """Raised when a storage handler fails at the I/O layer."""
