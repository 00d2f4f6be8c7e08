"""
Progress reporting and size formatting helpers.
"""

import threading
from typing import Optional

from tqdm import tqdm

BYTE_POSTFIXES = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")

BAR_FORMAT = "[{elapsed} elapsed] [{remaining} remaining] [{percentage:.2f}%] {desc} |{bar}|"


def human_readable(size: int) -> str:
    """
    Format a byte count with binary prefixes.

    Args:
        size: Number of bytes

    Returns:
        Size with two decimals and the largest fitting unit, e.g. "1.50 KiB"
    """
    value = float(size)
    i = 0
    while value >= 1024.0 and i < len(BYTE_POSTFIXES) - 1:
        value /= 1024.0
        i += 1

    return f"{value:.2f} {BYTE_POSTFIXES[i]}"


class ChunkProgress:
    """
    Terminal progress bar counting written chunks.

    The bar is repainted by a background ticker every ``tick_interval``
    seconds, so elapsed and remaining time keep moving between slow writes.
    """

    def __init__(self, total: int, enabled: Optional[bool] = None,
                 tick_interval: float = 1.0, file=None):
        """
        Initialize the progress bar.

        Args:
            total: Number of chunks that will be written
            enabled: Show the bar. None shows it only on an interactive terminal
            tick_interval: Seconds between repaints
            file: Stream to draw on (default: stderr)
        """
        self.total = total
        self.completed = 0
        self.tick_interval = tick_interval
        self._bar = tqdm(
            total=total,
            unit='chunk',
            bar_format=BAR_FORMAT,
            colour='cyan',
            mininterval=tick_interval,
            disable=None if enabled is None else not enabled,
            file=file,
        )
        self._stop_ticking = threading.Event()
        self._ticker = None
        self._closed = False

        if not self._bar.disable:
            self._ticker = threading.Thread(target=self._tick, name='progress-ticker', daemon=True)
            self._ticker.start()

    @property
    def enabled(self) -> bool:
        return not self._bar.disable

    def _tick(self) -> None:
        while not self._stop_ticking.wait(self.tick_interval):
            self._bar.refresh()

    def advance(self, n: int = 1) -> None:
        """Mark ``n`` more chunks as written."""
        self.completed += n
        self._bar.update(n)

    def finish(self, message: str) -> None:
        """Show a final message next to the bar and close it."""
        self._bar.set_description_str(message, refresh=False)
        self.close()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._stop_ticking.set()
        if self._ticker is not None:
            self._ticker.join()
        self._bar.close()

    def __enter__(self) -> 'ChunkProgress':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
