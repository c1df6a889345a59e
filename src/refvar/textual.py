"""Textual integration for refvar. Opt-in, requires textual.

widget_var() binds a Var to one attribute of a widget found by selector.
The widget is looked up on every access, so the Var survives the widget
being recomposed or replaced.

Pause state is owned by this module and keyed by id(app). A key is present
exactly while a pause(app) block is active.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any

from textual.css.query import NoMatches

from refvar.var import Var

logger = logging.getLogger("refvar.textual")

_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Suspend guarded writes while the widget tree is being replaced."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


def widget_var(app, selector: str, attribute: str, *, default: Any = None) -> Var[Any]:
    """A Var over getattr(app.query_one(selector), attribute).

    Reads return default when no widget matches. Writes are dropped while
    the app is not safe, dropped if the widget is gone, and marshaled
    through app.call_from_thread when made from another thread.
    """
    _main = threading.get_ident()

    def _read() -> Any:
        try:
            widget = app.query_one(selector)
        except NoMatches:
            logger.debug("No widget for %r, reading default", selector)
            return default
        return getattr(widget, attribute)

    def _write(value: Any) -> None:
        if not is_safe(app):
            logger.debug("App not safe, dropped write to %s.%s", selector, attribute)
            return
        if threading.get_ident() != _main:
            app.call_from_thread(_write_now, value)
        else:
            _write_now(value)

    def _write_now(value: Any) -> None:
        try:
            widget = app.query_one(selector)
        except NoMatches:
            logger.debug("No widget for %r, dropped write to %s", selector, attribute)
            return
        setattr(widget, attribute, value)

    return Var(_read, _write)
