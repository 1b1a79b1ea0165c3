"""load_state — model an asynchronously loaded value as loading, failed or ready."""

__version__ = "0.1.0"

from .decoding import DecodeConfig, decode_json, decode_yaml, json_decoder, yaml_decoder
from .errors import DecodeError, LoadStateError
from .outcome import Failure, Outcome, Success, capture
from .slot import StateSlot
from .state import Failed, Loading, LoadState, Ready, SafeState

__all__ = [
    "DecodeConfig",
    "DecodeError",
    "Failed",
    "Failure",
    "LoadState",
    "LoadStateError",
    "Loading",
    "Outcome",
    "Ready",
    "SafeState",
    "StateSlot",
    "Success",
    "capture",
    "decode_json",
    "decode_yaml",
    "json_decoder",
    "yaml_decoder",
]
