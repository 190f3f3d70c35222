"""Indented progress logging with timing.

Important functions:
 - task: a context manager to wrap self-contained tasks
 - event: print a log message (indented based on active tasks)
 - dump_profile: write the accumulated time spent in each task

Messages are only printed when the `verbose` option is set, and they go to
stderr so they never mix with polynomials written to stdout.  Task durations
are accumulated either way.
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys

from polynomials.opts import Option

verbose = Option("verbose", bool, False, description="Log parsing and arithmetic steps to stderr")

_times = defaultdict(float)
_task_stack = []
_begin = datetime.datetime.now()

def log(string):
    if verbose.value:
        print(string, file=sys.stderr)

def _indent(depth):
    return "  " * depth

def task_begin(name, **kwargs):
    _task_stack.append((name, datetime.datetime.now()))
    if not verbose.value:
        return
    details = ""
    if kwargs:
        details = " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"
    log("{}{}{}...".format(_indent(len(_task_stack) - 1), name, details))

def task_end():
    """Pop the innermost task and return how long it ran, in seconds."""
    key = tuple(name for name, start in _task_stack)
    name, start = _task_stack.pop()
    duration = (datetime.datetime.now() - start).total_seconds()
    _times[key] += duration
    log("{}Finished {} [duration={:.3}s]".format(_indent(len(_task_stack)), name, duration))
    return duration

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(name):
    log("{}{}".format(_indent(len(_task_stack)), name))

def dump_profile(f):
    """Write accumulated task durations to the open file `f`, slowest first."""
    duration = (datetime.datetime.now() - _begin).total_seconds()
    f.write("Total duration: {:.3} seconds\n\n".format(duration))
    for k in sorted(_times.keys(), key=_times.get, reverse=True):
        f.write("{:16.3} {}\n".format(_times[k], ", ".join(k)))
