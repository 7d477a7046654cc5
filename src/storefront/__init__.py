"""Storefront session registry.

The HTTP app and the management CLI share one session per process.
"""

from storefront.session import CheckoutResult, Storefront

_current_storefront: Storefront | None = None


def get_storefront() -> Storefront:
    """Return the process-wide session, opening it on first use."""
    global _current_storefront
    if _current_storefront is None:
        _current_storefront = Storefront.open()
    return _current_storefront


def set_storefront(storefront: Storefront) -> None:
    """Override the active session (useful for tests)."""
    global _current_storefront
    _current_storefront = storefront


def reset_storefront() -> None:
    global _current_storefront
    _current_storefront = None


__all__ = ["CheckoutResult", "Storefront", "get_storefront", "reset_storefront", "set_storefront"]
