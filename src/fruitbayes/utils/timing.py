"""Timing helpers for CLI runs"""
import logging
import time
from contextlib import contextmanager

def _now():
    return time.perf_counter()

@contextmanager
def section_timer(name: str, logger: logging.Logger):
    """Log how long a section took"""
    t0 = _now()
    try:
        yield
    finally:
        dt = _now() - t0
        logger.info("TIMER %s took %.3f s", name, dt)
