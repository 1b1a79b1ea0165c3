"""Custom exceptions for the load_state package."""


class LoadStateError(Exception):
    """Base exception for load_state errors."""
    pass


class DecodeError(LoadStateError, ValueError):
    """Raised when a decoder cannot turn raw bytes into content.

    Subclasses ValueError so it is caught together with the faults the
    stdlib decoders raise (json.JSONDecodeError, UnicodeDecodeError).
    """

    def __init__(self, message: str = "", *, data_format: str = "") -> None:
        super().__init__(message)
        self.data_format: str = data_format
