"""Nested wall-clock timing traces printed to a text stream.

A :class:`Tracer` prints a ``Start:`` line when a timer starts and an
``End:`` line with the elapsed time when it ends. Nested timers are
indented. Messages may be strings or zero-argument callables. A callable
is only called when the tracer is enabled.
"""

from __future__ import annotations

import contextlib
import sys
import threading
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TextIO, Union

from termcolor import colored

PAD_CHAR = "·"
_LINE_WIDTH = 75

Message = Union[str, Callable[[], object]]


@dataclass
class TimerInfo:
    """A running timer: its message and its start time in nanoseconds."""

    msg: str
    time: int


def _resolve(msg: Message) -> str:
    return str(msg()) if callable(msg) else str(msg)


def compute_indent_whitespace(indent_amount: int) -> str:
    """Return ``indent_amount`` spaces."""
    return " " * max(0, indent_amount)


def compute_indent(indent_amount: int) -> str:
    """Return ``indent_amount`` coloured padding characters."""
    return "".join(colored(PAD_CHAR, "white") for _ in range(max(0, indent_amount)))


def format_duration(nanos: int) -> str:
    """Format a duration in nanoseconds the way timer end lines show it."""
    if nanos < 0:
        raise ValueError("duration must be non-negative")
    secs, subsec = divmod(nanos, 1_000_000_000)
    millis = subsec // 1_000_000
    micros = (subsec // 1_000) % 1_000
    rest = subsec % 1_000
    if secs:
        return f"{secs}.{millis:03}s"
    if millis:
        return f"{millis}.{micros:03}ms"
    if micros:
        return f"{micros}.{rest:03}µs"
    return f"{subsec}ns"


class Tracer:
    """Prints nested timing traces to ``stream`` (standard output if None)."""

    def __init__(self, stream: TextIO | None = None, enabled: bool = True) -> None:
        self.stream = stream
        self.enabled = enabled
        self._level = 0
        self._lock = threading.Lock()

    def _print(self, line: str) -> None:
        print(line, file=self.stream if self.stream is not None else sys.stdout)

    def _current_level(self) -> int:
        with self._lock:
            return self._level

    def start_timer(self, msg: Message) -> TimerInfo:
        """Print a start line for ``msg`` and return the running timer."""
        if not self.enabled:
            return TimerInfo(msg="", time=time.perf_counter_ns())
        text = _resolve(msg)
        start_info = colored("Start:".ljust(8), "yellow", attrs=["bold"])
        with self._lock:
            indent = compute_indent(2 * self._level)
            self._level += 1
        self._print(f"{indent}{start_info} {text}")
        return TimerInfo(msg=text, time=time.perf_counter_ns())

    def end_timer(self, timer: TimerInfo, msg: Message = "") -> None:
        """Print an end line for ``timer`` with the time elapsed since it started."""
        if not self.enabled:
            return
        elapsed = time.perf_counter_ns() - timer.time
        final_time = colored(format_duration(max(0, elapsed)), attrs=["bold"])
        end_info = colored("End:".ljust(8), "green", attrs=["bold"])
        message = f"{timer.msg} {_resolve(msg)}"
        with self._lock:
            self._level = max(0, self._level - 1)
            indent_amount = 2 * self._level
        indent = compute_indent(indent_amount)
        pad = max(0, _LINE_WIDTH - indent_amount)
        self._print(f"{indent}{end_info} {message.ljust(pad, '.')}{final_time}")

    def add_to_trace(self, title: Message, msg: Message) -> None:
        """Print a titled, indented block of text inside the current trace."""
        if not self.enabled:
            return
        title_text = _resolve(title)
        start_msg = f"{colored('StartMsg', 'yellow', attrs=['bold'])}: {title_text}"
        end_msg = f"{colored('EndMsg', 'green', attrs=['bold'])}: {title_text}"
        level = self._current_level()
        start_indent = compute_indent(2 * level)
        msg_indent = compute_indent_whitespace(2 * level + 2)
        body = "\n" + "".join(f"{msg_indent}{line}\n" for line in _resolve(msg).splitlines())
        self._print(f"{start_indent}{start_msg}")
        self._print(f"{msg_indent}{body}")
        self._print(f"{start_indent}{end_msg}")

    def add_single_trace(self, title: Message) -> None:
        """Print a single trace line at the current indentation."""
        if not self.enabled:
            return
        start_msg = f"{colored('Trace', 'blue', attrs=['bold'])}:   {_resolve(title)}"
        self._print(f"{compute_indent(2 * self._current_level())}{start_msg}")

    @contextlib.contextmanager
    def timed(self, msg: Message) -> Iterator[TimerInfo]:
        """Time the body of a ``with`` block."""
        timer = self.start_timer(msg)
        try:
            yield timer
        finally:
            self.end_timer(timer)


default_tracer = Tracer(stream=None, enabled=False)


def start_timer(msg: Message) -> TimerInfo:
    """Start a timer on the default tracer."""
    return default_tracer.start_timer(msg)


def end_timer(timer: TimerInfo, msg: Message = "") -> None:
    """End a timer on the default tracer."""
    default_tracer.end_timer(timer, msg)


def add_to_trace(title: Message, msg: Message) -> None:
    """Add a titled block to the default tracer's output."""
    default_tracer.add_to_trace(title, msg)


def add_single_trace(title: Message) -> None:
    """Add a single line to the default tracer's output."""
    default_tracer.add_single_trace(title)