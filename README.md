# arkstd

A small collection of helpers:

- `arkstd.errors`: `ErrorKind`, `IoError` and `StringError`. An `IoError`
  carries a kind and an optional payload. A string payload is wrapped in a
  `StringError`.
- `arkstd.io`: the `Read` and `Write` base classes, which provide `read_exact`
  and `write_all`. It also has `SliceReader`, `SliceWriter`, `VecWriter` and
  `Cursor`, which work over in-memory buffers.
- `arkstd.iterable`: `Iterable` is a source that can be streamed again and
  again and knows its length. The module also has `SequenceIterable` and
  `Reverse`.
- `arkstd.util`: `log2`, which gives the ceiling of the base-2 logarithm, plus
  `cfg_iter` and `cfg_chunks`.
- `arkstd.perf_trace`: nested, indented wall-clock timing traces.
- `arkstd.rand_helper`: `test_rng` and `uniform_rand`, for tests.

## Install

    pip install arkstd

## Examples

### Numbers and chunks

    from arkstd.util import log2, cfg_chunks

    log2(16)  # 4
    log2(17)  # 5
    log2(0)   # 0

    list(cfg_chunks([1, 2, 3, 4, 5], 2))  # [[1, 2], [3, 4], [5]]

`log2` raises `ValueError` for negative numbers. `cfg_chunks` raises
`ValueError` for a chunk size that is not positive.

### Reading and writing in memory

    from arkstd.io import Cursor, SliceReader, VecWriter
    from arkstd.errors import IoError, ErrorKind

    cursor = Cursor(bytearray())
    cursor.write(b"hello")
    cursor.position            # 5
    cursor.position = 0
    cursor.read_exact(5)       # b"hello"

    reader = SliceReader(b"abc")
    reader.read_exact(2)       # b"ab"
    try:
        reader.read_exact(5)
    except IoError as err:
        err.kind is ErrorKind.UNEXPECTED_EOF   # True
        str(err)                               # "failed to fill whole buffer"

    sink = VecWriter()
    sink.write_all(b"data")
    sink.data                  # bytearray(b"data")

A `Cursor` over a `bytearray` grows the array when it is written to. If the
position is past the end, the gap is filled with zeros first. A `Cursor` over a
writable `memoryview` never resizes it, and neither does a `SliceWriter`.
`SliceWriter.write_all` raises an `IoError` of kind `WRITE_ZERO` when the buffer
is full. `read_exact` and `write_all` retry a call that raised an `IoError` of
kind `INTERRUPTED`.

### Reversing a stream

    from arkstd.iterable import SequenceIterable, Reverse

    list(Reverse(SequenceIterable([1, 2, 3])).iter())  # [3, 2, 1]
    len(Reverse([1, 2, 3]))                            # 3

### Timing traces

    from arkstd.perf_trace import Tracer

    tracer = Tracer()                 # prints to standard output
    timer = tracer.start_timer("Addition of two integers")
    tracer.add_single_trace("halfway")
    c = 5 + 7
    tracer.end_timer(timer)

    with tracer.timed("Inner work"):
        pass

This prints coloured lines like these:

    Start:   Addition of two integers
    ····Trace:   halfway
    End:     Addition of two integers ........................ 1.234µs

Nested timers are indented by their depth. A message can be a string or a
callable that takes no arguments. The callable is only called when the tracer
is enabled.

There are also module-level functions: `start_timer`, `end_timer`,
`add_to_trace` and `add_single_trace`. They use `arkstd.perf_trace.default_tracer`,
which is disabled by default, so they print nothing until you set
`default_tracer.enabled = True`.

### Test randomness

    from arkstd.rand_helper import test_rng, uniform_rand

    rng = test_rng()
    value = uniform_rand(rng, 128)

`test_rng` returns a `random.Random`. It uses a fixed seed when the environment
variable `DETERMINISTIC_TEST_RNG` is `1`, and a random seed otherwise. It is
meant for tests only.

## What it does not do

`cfg_iter` and `cfg_chunks` always iterate sequentially. The `min_len` argument
of `cfg_iter` is accepted but has no effect on the result. There is no
parallel iteration.

## Running the tests

    pip install arkstd[test]
    pytest