"""Tests for countup.ui.display."""

from io import StringIO

import pytest
from rich.console import Console

from countup.errors import SinkUnavailable
from countup.planner import plan
from countup.scheduling import ManualScheduler
from countup.animator import StepwiseAnimator
from countup.ui.display import LiveSink, render_counter, render_error, render_plan_table


def _capture_console() -> Console:
    return Console(file=StringIO(), width=60, force_terminal=True)


def test_render_counter():
    t = render_counter("42", label="tokens")
    assert t.plain == "  tokens: 42"


def test_live_sink_updates_while_open():
    con = _capture_console()
    with LiveSink(console=con, label="tokens") as sink:
        sink("7")
        sink("8")
        assert sink.is_open

    assert sink.updates == 2
    assert sink.last_text == "8"
    assert "tokens" in con.file.getvalue()


def test_live_sink_closed_is_unavailable():
    sink = LiveSink(console=_capture_console())
    with pytest.raises(SinkUnavailable):
        sink("1")

    sink.open()
    sink.close()
    sink.close()
    with pytest.raises(SinkUnavailable):
        sink("1")


def test_animator_stops_when_live_sink_closes():
    con = _capture_console()
    scheduler = ManualScheduler()
    sink = LiveSink(console=con).open()
    animator = StepwiseAnimator(0, sink, scheduler)
    animator.notify_target_changed(100)

    scheduler.advance(0.017)
    sink.close()
    scheduler.run_until_idle()

    assert sink.updates == 1
    assert not animator.is_animating
    assert animator.current_value == 12


def test_render_plan_table():
    con = _capture_console()
    con.print(render_plan_table(plan(0, 10, 4)))
    output = con.file.getvalue()
    assert "0 → 10" in output
    assert "+2" in output
    assert "10" in output


def test_render_error():
    con = _capture_console()
    render_error("boom", console=con)
    output = con.file.getvalue()
    assert "err" in output
    assert "boom" in output
