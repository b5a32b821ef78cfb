from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantikit.units.registry import Registry
# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "Registry":
    # Import here to avoid import-time side-effects / circular imports.
    from quantikit.units.registry import get_default_registry  # local import
    return get_default_registry()

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. ``default_registry`` resolves to the current default
    registry, built with the built-in kinds on first use.
    """
    if name == "default_registry":
        return _get_default_registry()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["default_registry"])
