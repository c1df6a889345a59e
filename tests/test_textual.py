"""Tests for refvar.textual: widget-bound Vars."""

import logging
import threading

import pytest
from textual.css.query import NoMatches

from refvar import textual as rtx


class _Widget:
    def __init__(self, **attrs):
        self.__dict__.update(attrs)


class _MockApp:
    """Minimal mock matching the Textual App interface rtx needs."""

    def __init__(self, widgets=None, *, is_running=True):
        self.is_running = is_running
        self.widgets = dict(widgets or {})
        self._call_from_thread_log = []

    def query_one(self, selector):
        try:
            return self.widgets[selector]
        except KeyError:
            raise NoMatches(f"No nodes match {selector!r}") from None

    def call_from_thread(self, fn, *args):
        self._call_from_thread_log.append((fn, args))
        fn(*args)


class TestWidgetVarRead:
    def test_reads_attribute(self):
        app = _MockApp({"#volume": _Widget(value=3)})
        assert rtx.widget_var(app, "#volume", "value").get() == 3

    def test_missing_widget_reads_default(self):
        app = _MockApp()
        v = rtx.widget_var(app, "#volume", "value", default=-1)
        assert v.get() == -1

    def test_follows_replaced_widget(self):
        app = _MockApp({"#label": _Widget(text="old")})
        v = rtx.widget_var(app, "#label", "text")
        app.widgets["#label"] = _Widget(text="new")
        assert v.get() == "new"

    def test_missing_attribute_propagates(self):
        app = _MockApp({"#volume": _Widget()})
        with pytest.raises(AttributeError):
            rtx.widget_var(app, "#volume", "value").get()


class TestWidgetVarWrite:
    def test_writes_when_safe(self):
        widget = _Widget(value=0)
        app = _MockApp({"#volume": widget})
        v = rtx.widget_var(app, "#volume", "value")
        v.set(7)
        assert widget.value == 7
        v.update(lambda n: n + 1)
        assert widget.value == 8

    def test_skips_when_not_running(self):
        widget = _Widget(value=0)
        app = _MockApp({"#volume": widget}, is_running=False)
        rtx.widget_var(app, "#volume", "value").set(7)
        assert widget.value == 0

    def test_skips_during_pause(self, caplog):
        widget = _Widget(value=0)
        app = _MockApp({"#volume": widget})
        v = rtx.widget_var(app, "#volume", "value")
        with caplog.at_level(logging.DEBUG, logger="refvar.textual"):
            with rtx.pause(app):
                v.set(7)
        assert widget.value == 0
        assert "dropped write" in caplog.text

    def test_missing_widget_write_is_dropped(self):
        app = _MockApp()
        rtx.widget_var(app, "#gone", "value").set(1)  # should not raise

    def test_thread_marshal(self):
        widget = _Widget(value=0)
        app = _MockApp({"#volume": widget})
        v = rtx.widget_var(app, "#volume", "value")

        t = threading.Thread(target=v.set, args=(5,))
        t.start()
        t.join()

        assert widget.value == 5
        assert len(app._call_from_thread_log) == 1

    def test_same_thread_is_direct(self):
        app = _MockApp({"#volume": _Widget(value=0)})
        rtx.widget_var(app, "#volume", "value").set(1)
        assert app._call_from_thread_log == []

    def test_imap_over_widget(self):
        widget = _Widget(value="12")
        app = _MockApp({"#input": widget})
        n = rtx.widget_var(app, "#input", "value").imap(int, str)
        n.update(lambda x: x + 1)
        assert widget.value == "13"


class TestPause:
    def test_pause_restores_on_exception(self):
        app = _MockApp()
        assert rtx.is_safe(app)

        with pytest.raises(RuntimeError):
            with rtx.pause(app):
                assert not rtx.is_safe(app)
                raise RuntimeError("oops")

        assert rtx.is_safe(app)

    def test_pause_does_not_mutate_app(self):
        app = _MockApp()
        attrs_before = set(vars(app))
        with rtx.pause(app):
            attrs_during = set(vars(app))
        assert attrs_before == attrs_during
        assert attrs_before == set(vars(app))

    def test_multiple_apps_independent(self):
        app_a = _MockApp()
        app_b = _MockApp()
        with rtx.pause(app_a):
            assert not rtx.is_safe(app_a)
            assert rtx.is_safe(app_b)
