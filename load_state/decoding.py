"""Fallible bytes-to-content decoders for LoadState.receive_data()."""

import codecs
import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

import yaml

from .errors import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Payloads larger than this are rejected before parsing (5MB)
DEFAULT_MAX_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class DecodeConfig:
    """Limits and text settings shared by the decoders."""

    encoding: str = "utf-8"
    max_bytes: int = DEFAULT_MAX_BYTES

    def __post_init__(self) -> None:
        """Validate configuration."""
        errors = []

        if not self.encoding:
            errors.append("encoding must be non-empty")
        else:
            try:
                codecs.lookup(self.encoding)
            except LookupError:
                errors.append(f"encoding {self.encoding!r} is not a known codec")
        if self.max_bytes < 1:
            errors.append(f"max_bytes must be >= 1, got {self.max_bytes}")

        if errors:
            raise ValueError(f"Invalid DecodeConfig: {'; '.join(errors)}")


def _to_text(data: bytes | str, config: DecodeConfig, data_format: str) -> str:
    """Apply the size limit and decode bytes to text.

    Raises:
        DecodeError: If data is too large or not valid in the configured encoding.
    """
    if isinstance(data, str):
        size = len(data.encode(config.encoding, errors="replace"))
    else:
        size = len(data)
    if size > config.max_bytes:
        raise DecodeError(
            f"{data_format} payload is {size} bytes, limit is {config.max_bytes}",
            data_format=data_format,
        )

    if isinstance(data, str):
        return data
    try:
        return data.decode(config.encoding)
    except UnicodeDecodeError as exc:
        raise DecodeError(
            f"{data_format} payload is not valid {config.encoding}: {exc}",
            data_format=data_format,
        ) from exc


def _convert(payload: Any, content_type: Callable[..., T] | None, data_format: str) -> T:
    """Build content_type from a parsed payload.

    Dataclasses and other types fed a mapping get it as keyword arguments;
    anything else is passed positionally. Any exception content_type raises
    becomes a DecodeError.
    """
    if content_type is None:
        return payload

    try:
        if isinstance(payload, Mapping) and content_type is not dict:
            return content_type(**payload)
        return content_type(payload)
    except Exception as exc:
        name = getattr(content_type, "__name__", repr(content_type))
        raise DecodeError(
            f"Cannot build {name} from {data_format} payload: {exc}",
            data_format=data_format,
        ) from exc


def decode_json(
    data: bytes | str,
    content_type: Callable[..., T] | None = None,
    config: DecodeConfig | None = None,
) -> T:
    """Decode a JSON document, optionally into content_type.

    Args:
        data: Raw JSON bytes (or already-decoded text).
        content_type: Callable building the content from the parsed payload.
            None returns the parsed payload as-is.
        config: Size and encoding settings. Defaults to DecodeConfig().

    Returns:
        The decoded content.

    Raises:
        DecodeError: If the payload is too large, badly encoded, not valid
            JSON, nested too deeply, or does not fit content_type.
    """
    config = config or DecodeConfig()
    text = _to_text(data, config, "JSON")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("JSON decode failed at line %d col %d", exc.lineno, exc.colno)
        raise DecodeError(f"Invalid JSON: {exc}", data_format="JSON") from exc
    except RecursionError as exc:
        raise DecodeError("JSON payload is nested too deeply", data_format="JSON") from exc
    return _convert(payload, content_type, "JSON")


def decode_yaml(
    data: bytes | str,
    content_type: Callable[..., T] | None = None,
    config: DecodeConfig | None = None,
) -> T:
    """Decode a YAML document with yaml.safe_load, optionally into content_type.

    Same arguments and errors as decode_json().
    """
    config = config or DecodeConfig()
    text = _to_text(data, config, "YAML")
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        logger.debug("YAML decode failed: %s", exc)
        raise DecodeError(f"Invalid YAML: {exc}", data_format="YAML") from exc
    except RecursionError as exc:
        raise DecodeError("YAML payload is nested too deeply", data_format="YAML") from exc
    return _convert(payload, content_type, "YAML")


def json_decoder(
    content_type: Callable[..., T] | None = None,
    config: DecodeConfig | None = None,
) -> Callable[[bytes | str], T]:
    """Return a one-argument JSON decoder bound to content_type and config."""
    def decoder(data: bytes | str) -> T:
        return decode_json(data, content_type, config)
    return decoder


def yaml_decoder(
    content_type: Callable[..., T] | None = None,
    config: DecodeConfig | None = None,
) -> Callable[[bytes | str], T]:
    """Return a one-argument YAML decoder bound to content_type and config."""
    def decoder(data: bytes | str) -> T:
        return decode_yaml(data, content_type, config)
    return decoder
