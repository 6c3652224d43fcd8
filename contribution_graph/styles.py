"""
Process-wide style registry.

Renderers share one set of CSS blocks (the cell fade-in keyframes). Each block
is registered once under a stable key and is never removed.
"""

import logging
import threading

logger = logging.getLogger(__name__)

KEYFRAMES_ID = "contribution-anim"

FADE_IN_KEYFRAMES = """\
@keyframes fadeIn {
  from { opacity: 0; transform: scale(0.8); }
  to { opacity: 1; transform: scale(1); }
}"""

_styles: dict[str, str] = {}
_lock = threading.Lock()


def register_style(key: str, css: str) -> bool:
    """
    Register a CSS block under a key if it is not registered yet.

    Returns:
        True if the block was added, False if the key already existed
    """
    with _lock:
        if key in _styles:
            return False
        _styles[key] = css
    logger.debug("Registered style %s", key)
    return True


def ensure_keyframes() -> None:
    """Register the cell fade-in keyframes."""
    register_style(KEYFRAMES_ID, FADE_IN_KEYFRAMES)


def registered_styles() -> dict[str, str]:
    """Snapshot of registered styles, in registration order."""
    with _lock:
        return dict(_styles)
