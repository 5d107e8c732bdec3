"""Open popup windows without exposing the opener (reverse tabnabbing).

The platform windowing call is supplied by the caller as a
:class:`WindowHost`, e.g. a browser bridge or a test double. The opener
always forces ``noopener,noreferrer`` ahead of any caller features and
clears the ``opener`` back-reference on the handle it gets back.

See the OWASP HTML5 Security Cheat Sheet, section "Tabnabbing".
"""

from __future__ import annotations

from typing import Any, Protocol

SAFE_WINDOW_FEATURES = 'noopener,noreferrer'


class WindowHost(Protocol):
    """Anything that can open a window and return a handle (or None)."""

    def open(self, url: str, name: str | None, features: str) -> Any | None: ...


def build_window_features(window_features: str | None = None) -> str:
    """Prefix caller-supplied features with ``noopener,noreferrer``.

    ``None`` and the empty string both yield the bare prefix.
    """
    if window_features:
        return f'{SAFE_WINDOW_FEATURES},{window_features}'
    return SAFE_WINDOW_FEATURES


def open_popup(
    host: WindowHost,
    url: str,
    name: str | None = None,
    window_features: str | None = None,
) -> Any | None:
    """Open a popup window with the given URL, name, and window features.

    Args:
        host: Platform window opener.
        url: The URL to open in the popup.
        name: The name of the popup window.
        window_features: Comma-separated ``name=value`` features such as
            ``popup``, ``width=500``, ``height=500``, ``left``, ``top``.

    Returns:
        The new window handle with ``opener`` reset to None, or None if
        the platform failed to open the window (e.g. a popup blocker).
    """
    new_window = host.open(url, name, build_window_features(window_features))
    if new_window is not None:
        new_window.opener = None
    return new_window


__all__ = ['SAFE_WINDOW_FEATURES', 'WindowHost', 'build_window_features', 'open_popup']
