import io
import re

import pytest

from arkstd import perf_trace
from arkstd.perf_trace import (
    Tracer,
    compute_indent,
    compute_indent_whitespace,
    format_duration,
)

ANSI = re.compile(r"\x1b\[[0-9;]*m")
DURATION = r"\d+(\.\d{3})?(s|ms|µs|ns)"


def plain(text):
    return ANSI.sub("", text)


@pytest.fixture
def traced():
    stream = io.StringIO()
    return Tracer(stream=stream, enabled=True), stream


@pytest.fixture
def enabled_default():
    tracer = perf_trace.default_tracer
    saved = (tracer.enabled, tracer.stream)
    tracer.enabled = True
    tracer.stream = None
    yield tracer
    tracer.enabled, tracer.stream = saved


def test_print_start_end(traced):
    tracer, stream = traced
    timer = tracer.start_timer(lambda: "Hello")
    tracer.end_timer(timer)
    lines = plain(stream.getvalue()).splitlines()
    assert lines[0] == "Start:   Hello"
    assert lines[1].startswith("End:     Hello " + "." * 60)
    assert re.fullmatch(r"End:     Hello \.+" + DURATION, lines[1])
    assert len(lines) == 2


def test_end_line_padding_width(traced):
    tracer, stream = traced
    tracer.end_timer(tracer.start_timer("Hi"), "there")
    end_line = plain(stream.getvalue()).splitlines()[1]
    body = end_line[len("End:     "):]
    message_part = re.match(r"Hi there\.*", body).group(0)
    assert len(message_part) == 75


def test_print_add(traced):
    tracer, stream = traced
    tracer.add_single_trace(lambda: "Hello")
    timer = tracer.start_timer(lambda: "Hello")
    tracer.add_single_trace(lambda: "HelloWorld")
    tracer.add_to_trace(lambda: "HelloMsg", lambda: "Hello, I\nAm\nA\nMessage")
    tracer.end_timer(timer)
    out = plain(stream.getvalue())
    expected_prefix = (
        "Trace:   Hello\n"
        "Start:   Hello\n"
        "··Trace:   HelloWorld\n"
        "··StartMsg: HelloMsg\n"
        "    \n"
        "    Hello, I\n"
        "    Am\n"
        "    A\n"
        "    Message\n"
        "\n"
        "··EndMsg: HelloMsg\n"
    )
    assert out.startswith(expected_prefix)
    assert re.fullmatch(r"End:     Hello \.+" + DURATION + r"\n", out[len(expected_prefix):])


def test_nested_timers_indent(traced):
    tracer, stream = traced
    outer = tracer.start_timer("Addition of two integers")
    inner = tracer.start_timer("Inner")
    tracer.end_timer(inner)
    tracer.end_timer(outer)
    lines = plain(stream.getvalue()).splitlines()
    assert lines[0] == "Start:   Addition of two integers"
    assert lines[1] == "··Start:   Inner"
    assert lines[2].startswith("··End:     Inner ")
    assert lines[3].startswith("End:     Addition of two integers ")


def test_disabled_prints_nothing_and_skips_callables(traced):
    _, _ = traced
    stream = io.StringIO()
    tracer = Tracer(stream=stream, enabled=False)
    calls = []

    def message():
        calls.append(1)
        return "x"

    timer = tracer.start_timer(message)
    tracer.add_single_trace(message)
    tracer.add_to_trace(message, message)
    tracer.end_timer(timer, message)
    assert stream.getvalue() == ""
    assert calls == []


def test_timed_restores_indent_on_error(traced):
    tracer, stream = traced
    with pytest.raises(KeyError):
        with tracer.timed("Work"):
            raise KeyError("boom")
    tracer.add_single_trace("after")
    lines = plain(stream.getvalue()).splitlines()
    assert lines[0] == "Start:   Work"
    assert lines[1].startswith("End:     Work ")
    assert lines[2] == "Trace:   after"


def test_timed_yields_timer(traced):
    tracer, _ = traced
    with tracer.timed("Block") as timer:
        assert timer.msg == "Block"


def test_end_without_start_does_not_go_negative(traced):
    tracer, stream = traced
    tracer.end_timer(perf_trace.TimerInfo(msg="orphan", time=0))
    tracer.add_single_trace("next")
    lines = plain(stream.getvalue()).splitlines()
    assert lines[0].startswith("End:     orphan ")
    assert lines[1] == "Trace:   next"


@pytest.mark.parametrize(
    "nanos, expected",
    [
        (0, "0ns"),
        (1, "1ns"),
        (999, "999ns"),
        (1_500, "1.500µs"),
        (2_345_678, "2.345ms"),
        (3_004_000_000, "3.004s"),
        (1_000_000_000, "1.000s"),
    ],
)
def test_format_duration(nanos, expected):
    assert format_duration(nanos) == expected


def test_format_duration_negative():
    with pytest.raises(ValueError):
        format_duration(-1)


def test_compute_indent():
    assert plain(compute_indent(3)) == "···"
    assert compute_indent(0) == ""


def test_compute_indent_whitespace():
    assert compute_indent_whitespace(4) == "    "
    assert compute_indent_whitespace(0) == ""


def test_module_functions_use_default_tracer(enabled_default, capsys):
    timer = perf_trace.start_timer("Module")
    perf_trace.add_single_trace("inside")
    perf_trace.add_to_trace("T", "line")
    perf_trace.end_timer(timer, "done")
    lines = plain(capsys.readouterr().out).splitlines()
    assert lines[0] == "Start:   Module"
    assert lines[1] == "··Trace:   inside"
    assert lines[2] == "··StartMsg: T"
    assert lines[4] == "    line"
    assert lines[-2] == "··EndMsg: T"
    assert lines[-1].startswith("End:     Module done")