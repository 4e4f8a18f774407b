import time


class Clock:
    """A simple clock for keeping track of time.

    The clock starts on the first call to ``get_elapsed_time()``, and is
    never reset. The elapsed time is monotonic: it never decreases, even if
    the underlying time function does.

    Parameters
    ----------
    time_func : callable
        The function that returns the current time in seconds. Default
        ``time.perf_counter``.

    """

    def __init__(self, time_func=None):
        self._time_func = time_func or time.perf_counter
        self._start_time = None
        self._elapsed_time = 0.0

    @property
    def started(self):
        """Whether the clock has started, i.e. the elapsed time was read."""
        return self._start_time is not None

    def get_elapsed_time(self):
        """Get the number of seconds since the clock was started."""
        if self._start_time is None:
            self._start_time = self._time_func()
            return self._elapsed_time
        elapsed = self._time_func() - self._start_time
        self._elapsed_time = max(self._elapsed_time, elapsed)
        return self._elapsed_time
