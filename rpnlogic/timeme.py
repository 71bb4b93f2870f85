from contextlib import contextmanager
from time import perf_counter


@contextmanager
def timeme(label: str, enabled: bool = True):
    """Context manager that prints how long the wrapped block takes."""
    start = perf_counter()
    try:
        yield
    finally:
        if enabled:
            elapsed = perf_counter() - start
            print(f"{label} took {elapsed:.3f} s")
