"""In-memory byte I/O, reusable iterables, timing traces and test randomness."""

__version__ = "0.5.0"

__all__ = ["errors", "io", "iterable", "perf_trace", "rand_helper", "util"]