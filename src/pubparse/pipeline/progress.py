"""Progress tracking for batch conversion.

Workers bump a shared ``ProgressCounter``; a ``ProgressReporter`` thread polls
it at a fixed interval and renders a tqdm bar.
"""

import threading

from tqdm import tqdm

DEFAULT_INTERVAL = 0.1


class ProgressCounter:
    """Integer counter safe to increment from many threads."""

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class ProgressReporter:
    """Background thread rendering a counter as a progress bar.

    Attributes:
        counter: Counter read on every tick
        total: Number of work items in the batch
        interval: Seconds between redraws
    """

    def __init__(
        self,
        counter: ProgressCounter,
        total: int,
        interval: float = DEFAULT_INTERVAL,
        disable: bool = False,
        desc: str = "Converting",
    ):
        self.counter = counter
        self.total = total
        self.interval = interval
        self.bar = tqdm(total=total, desc=desc, unit="file", disable=disable)
        self._stop = threading.Event()
        self._closed = False
        self._thread = threading.Thread(
            target=self._run, name="progress-reporter", daemon=True
        )

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop(completed=exc_type is None)
        return False

    def start(self) -> None:
        self._thread.start()

    def stop(self, completed: bool = True) -> None:
        """Wait for the thread to exit and render the final state.

        A completed batch is drawn at 100%; an aborted one keeps the count of
        items that actually finished.
        """
        if self._closed:
            return
        self._closed = True
        self._stop.set()
        if self._thread.is_alive():
            self._thread.join()
        self._render(self.total if completed else self.counter.value)
        self.bar.close()

    def _run(self) -> None:
        last = -1
        while not self._stop.wait(self.interval):
            current = self.counter.value
            if current != last:
                self._render(current)
                last = current

    def _render(self, current: int) -> None:
        if current > self.bar.n:
            self.bar.update(current - self.bar.n)
