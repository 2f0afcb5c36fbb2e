"""ContextVar-based print configuration for javaprint.

Rendering functions are module-level and stateless; the few knobs they
have are read from a ContextVar, so each thread or task can override them
without affecting others.

Usage:
    from javaprint.config import PrintConfig, print_config_context

    with print_config_context(PrintConfig(legacy_type_argument_join=False)):
        text = pretty_print_type_with_targs(type_node)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PrintConfig:
    """Immutable print configuration.

    Attributes:
        legacy_type_argument_join: Place the type argument separator after
            every non-first argument, so ``Map<K, V>`` prints as
            ``Map<KV, >``. Existing report keys depend on this spelling;
            set to False for ``Map<K, V>``.

    """

    legacy_type_argument_join: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "PrintConfig":
        """Create PrintConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> PrintConfig.from_dict({"legacy_type_argument_join": False, "x": 1})
            PrintConfig(legacy_type_argument_join=False)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: PrintConfig = PrintConfig()

_print_config: ContextVar[PrintConfig] = ContextVar(
    "print_config",
    default=_DEFAULT_CONFIG,
)


def get_print_config() -> PrintConfig:
    """Get the print configuration active in this context."""
    return _print_config.get()


def set_print_config(config: PrintConfig) -> None:
    """Set print configuration for the current context.

    Only affects the current thread's context.

    """
    _print_config.set(config)


def reset_print_config() -> None:
    """Reset to the default configuration."""
    _print_config.set(_DEFAULT_CONFIG)


@contextmanager
def print_config_context(config: PrintConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with print_config_context(PrintConfig(legacy_type_argument_join=False)):
        ...     pretty_print_type_with_targs(map_type)
        'Map<K, V>'

    """
    previous = _print_config.get()
    _print_config.set(config)
    try:
        yield
    finally:
        _print_config.set(previous)


__all__ = [
    "PrintConfig",
    "get_print_config",
    "set_print_config",
    "reset_print_config",
    "print_config_context",
]
