"""ContextVar-based decode configuration for lazyical.

Config is read once when a Decoder is constructed, so changing it later
does not affect decoders that already exist.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from lazyical.config import DecodeConfig, decode_config_context

    with decode_config_context(DecodeConfig(strict_end_names=True)):
        decoder = Decoder(stream)
    event = decoder.next_token("VEVENT")

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class DecodeConfig:
    """Immutable decode configuration.

    Attributes:
        chunk_size: Bytes requested from the source per read
        encoding: Encoding used to turn unfolded lines into text
            (and to encode str chunks from text streams)
        errors: Codec error handler for invalid byte sequences
        strict_end_names: Reject END:<name> lines whose name differs from
            the innermost open block instead of popping it anyway

    """

    chunk_size: int = 4096
    encoding: str = "utf-8"
    errors: str = "replace"
    strict_end_names: bool = False

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            msg = f"chunk_size must be positive, got {self.chunk_size}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "DecodeConfig":
        """Create DecodeConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> DecodeConfig.from_dict({"chunk_size": 64, "color": "red"}).chunk_size
            64

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: DecodeConfig = DecodeConfig()

_decode_config: ContextVar[DecodeConfig] = ContextVar(
    "decode_config",
    default=_DEFAULT_CONFIG,
)


def get_decode_config() -> DecodeConfig:
    """Get current decode configuration (thread-local)."""
    return _decode_config.get()


def set_decode_config(config: DecodeConfig) -> None:
    """Set decode configuration for current context.

    Args:
        config: DecodeConfig instance to use for this context.

    """
    _decode_config.set(config)


def reset_decode_config() -> None:
    """Reset to the module-level default configuration."""
    _decode_config.set(_DEFAULT_CONFIG)


@contextmanager
def decode_config_context(config: DecodeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with decode_config_context(DecodeConfig(chunk_size=1)):
        ...     get_decode_config().chunk_size
        1

    """
    previous = _decode_config.get()
    _decode_config.set(config)
    try:
        yield
    finally:
        _decode_config.set(previous)


__all__ = [
    "DecodeConfig",
    "get_decode_config",
    "set_decode_config",
    "reset_decode_config",
    "decode_config_context",
]
