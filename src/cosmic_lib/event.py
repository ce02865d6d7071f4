"""
Click and format handler dispatch.

A dispatch target is any object exposing ``click_handlers`` (field type ->
single callback) and ``format_handlers`` (format -> ordered list of
callbacks): the library ``Configuration`` or an individual link object.

Click handlers replace each other, format handlers accumulate.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional
import logging

logger = logging.getLogger(__name__)

FORMATS = ("uri", "query", "tdesc", "json", "transaction", "xdr")


@dataclass
class ClickEvent:
    """Event passed to click handlers."""

    node: Any
    value: Any = None
    cosmic_link: Any = None


@dataclass
class FormatEvent:
    """
    Event passed to format handlers.

    ``value`` is set when the format conversion resolves, ``error`` when it
    fails.
    """

    cosmic_link: Any = None
    value: Any = None
    error: Optional[BaseException] = None


# =============================================================================
# Click handlers
# =============================================================================

def set_click_handler(target, field_type: str, callback: Callable[[ClickEvent], Any]) -> None:
    """Set ``callback`` as the click handler for ``field_type`` on ``target``."""
    target.click_handlers[field_type] = callback
    logger.debug(f"Click handler set for {field_type!r}")


def clear_click_handler(target, field_type: str) -> None:
    """Remove the click handler for ``field_type`` on ``target``."""
    target.click_handlers[field_type] = None
    logger.debug(f"Click handler cleared for {field_type!r}")


def get_click_handler(target, field_type: str, conf=None) -> Optional[Callable]:
    """
    Resolve the click handler for ``field_type``.

    The handler registered on ``target`` is preferred. When ``target`` has
    none and ``conf`` is given, the configuration-wide handler is used.
    """
    handler = target.click_handlers.get(field_type)
    if handler is None and conf is not None and conf is not target:
        handler = conf.click_handlers.get(field_type)
    return handler


def call_click_handler(target, field_type: str, click_event: ClickEvent, conf=None) -> bool:
    """
    Invoke the click handler for ``field_type``.

    Returns:
        True if a handler was found and called
    """
    handler = get_click_handler(target, field_type, conf)
    if handler is None:
        return False
    handler(click_event)
    return True


# =============================================================================
# Format handlers
# =============================================================================

def add_format_handler(target, format: str, callback: Callable[[FormatEvent], Any]) -> None:
    """
    Append ``callback`` to the handlers of ``format`` on ``target``.

    When ``target`` is a link object holding a computed value (or error) for
    ``format``, ``callback`` is called right away with it.
    """
    target.format_handlers.setdefault(format, []).append(callback)
    logger.debug(f"Format handler added for {format!r}")

    get_state = getattr(target, "get_format_state", None)
    if get_state is None:
        return

    state = get_state(format)
    if state is None:
        return
    value, error = state
    callback(FormatEvent(cosmic_link=target, value=value, error=error))


def remove_format_handler(target, format: str, callback: Callable[[FormatEvent], Any]) -> None:
    """Remove ``callback`` from the handlers of ``format`` on ``target``."""
    handlers = target.format_handlers.get(format)
    if not handlers:
        return
    try:
        handlers.remove(callback)
    except ValueError:
        return
    logger.debug(f"Format handler removed for {format!r}")


def call_format_handlers(link, format: str, value: Any = None,
                         error: Optional[BaseException] = None, conf=None) -> FormatEvent:
    """
    Notify handlers that ``format`` resolved to ``value`` or failed with ``error``.

    Configuration-wide handlers run first, then the ones registered on
    ``link``, each in insertion order. A failing handler is logged and the
    remaining handlers still run.
    """
    format_event = FormatEvent(cosmic_link=link, value=value, error=error)

    handlers = []
    if conf is not None and conf is not link:
        handlers.extend(conf.format_handlers.get(format, []))
    handlers.extend(getattr(link, "format_handlers", {}).get(format, []))

    for handler in list(handlers):
        try:
            handler(format_event)
        except Exception:
            logger.exception(f"Format handler for {format!r} failed")

    return format_event


__all__ = [
    "FORMATS",
    "ClickEvent",
    "FormatEvent",
    "set_click_handler",
    "clear_click_handler",
    "get_click_handler",
    "call_click_handler",
    "add_format_handler",
    "remove_format_handler",
    "call_format_handlers",
]
