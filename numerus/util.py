import sys
import time
from collections import defaultdict
from contextlib import contextmanager
from typing import ClassVar, Dict, Iterator, List, Optional, TextIO, Tuple


class PerformanceLogger:
    """Collects wall-clock timings of named phases, such as reading input and
    parsing numerals."""

    _singleton: ClassVar[Optional["PerformanceLogger"]] = None

    def __init__(self) -> None:
        self._times: Dict[str, List[float]] = defaultdict(list)

    @contextmanager
    def start(self, name: str) -> Iterator[None]:
        start_time = time.perf_counter()
        try:
            yield None
        finally:
            self._times[name].append(time.perf_counter() - start_time)

    def times(self) -> Dict[str, Tuple[int, float]]:
        """Return the number of samples and the total time of each phase."""
        return {k: (len(v), sum(v)) for k, v in self._times.items()}

    def reset(self) -> None:
        self._times.clear()

    def print(self, file: TextIO = sys.stdout) -> None:
        times = self.times()
        if not times:
            return

        title_column_width = max(len(x) for x in times.keys())
        for name, (count, total) in times.items():
            print(f"{name:{title_column_width}} {count:6d} {total:.4f}", file=file)

    @classmethod
    def singleton(cls) -> "PerformanceLogger":
        if cls._singleton is None:
            cls._singleton = cls()
        return cls._singleton
