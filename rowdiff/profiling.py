
"""Tools for profiling diff performance.

The diff of two long sequences with many differences can take a while,
as the search is O((N+M)D). The timer in this module splits the time
spent between the phases of a diff.

Typical profiling usage:
Add some statements like
from rowdiff.profiling import timer
with timer.time('Key to identify this segment'):
    <code to time>

Then, launch `python -m rowdiff.profiling source.json target.json`.

The diff phases are already instrumented, so the output looks like:

    Key           Calls          Time     Time/Call
    ----------  -------  ------------  ------------
    search            1  0.412         0.412
    classify          1  0.00302       0.00302
    find_path         1  0.000871      0.000871

Here the search dominates, as expected when D is large. If classify
shows up high instead, the content predicate is the expensive part.
"""

import time
import contextlib
from tabulate import tabulate
from functools import wraps


def _sort_time(value):
    time = value[1]['time']
    return -time


class TimePaths(object):
    def __init__(self, verbose=False, enabled=True):
        self.verbose = verbose
        self.map = {}
        self.enabled = enabled

    @contextlib.contextmanager
    def time(self, key):
        if not self.enabled:
            yield
            return
        start = time.time()
        try:
            yield
        finally:
            secs = time.time() - start
            entry = self.map.setdefault(key, dict(time=0.0, calls=0))
            entry['time'] += secs
            entry['calls'] += 1
            if self.verbose:
                print('%s: %f s' % (key, secs))

    def profile(self, key=None):
        def decorator(function):
            nonlocal key
            if key is None:
                key = function.__name__ or 'unknown'
            @wraps(function)
            def inner(*args, **kwargs):
                with self.time(key):
                    return function(*args, **kwargs)
            return inner
        return decorator

    @contextlib.contextmanager
    def enable(self):
        old = self.enabled
        self.enabled = True
        try:
            yield
        finally:
            self.enabled = old

    def reset(self):
        self.map = {}

    def __str__(self):
        items = sorted(self.map.items(), key=_sort_time)
        lines = []
        for key, data in items:
            time = data['time']
            calls = data['calls']
            lines.append((key, calls, time, time / calls))
        return tabulate(lines, headers=['Key', 'Calls', 'Time', 'Time/Call'])


timer = TimePaths(enabled=False)


def profile_diff_paths(args=None):
    import rowdiff.rowdiffapp
    import rowdiff.profiling
    try:
        with rowdiff.profiling.timer.enable():
            rowdiff.rowdiffapp.main(args)
    finally:
        data = str(rowdiff.profiling.timer)
        print(data)


if __name__ == "__main__":
    profile_diff_paths()
