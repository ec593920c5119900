"""
Консольный прогресс рендера анимации.

FrameProgress получает по одному вызову frame_done() на кадр (см.
render.frame.render_animation, параметр on_frame) и перерисовывает строку
состояния: номер кадра, число отрезков изолинии, скорость и ETA.
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass

logger = logging.getLogger(__name__)

BAR_LEN = 24


def format_eta(seconds: float) -> str:
    if seconds == float('inf'):
        return '--:--'
    m, s = divmod(int(seconds), 60)
    h, m = divmod(m, 60)
    if h > 0:
        return f'{h:02d}:{m:02d}:{s:02d}'
    return f'{m:02d}:{s:02d}'


class StatusLine:
    """Перерисовываемая строка состояния (или построчный вывод при redraw=False)."""

    def __init__(self, stream=None, *, redraw: bool = True) -> None:
        self.redraw = redraw
        self._stream = stream
        self._width = 0

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    def show(self, msg: str) -> None:
        if self.redraw:
            pad = max(0, self._width - len(msg))
            self.stream.write('\r' + msg + ' ' * pad)
        else:
            self.stream.write(msg + '\n')
        self.stream.flush()
        self._width = len(msg)

    def clear(self) -> None:
        if self.redraw and self._width > 0:
            self.stream.write('\r' + ' ' * self._width + '\r')
            self.stream.flush()
        self._width = 0


@dataclass
class FrameStats:
    """Накопленная статистика по отрисованным кадрам."""

    frames: int = 0
    segments: int = 0
    last_segments: int = 0
    empty_frames: int = 0

    @property
    def mean_segments(self) -> float:
        return self.segments / self.frames if self.frames else 0.0


class FrameProgress:
    """Прогресс по кадрам с числом отрезков изолинии в каждом кадре."""

    def __init__(self, total_frames: int, status: StatusLine | None = None) -> None:
        self.total = max(1, int(total_frames))
        self.stats = FrameStats()
        self._status = status or StatusLine()
        self._start = time.monotonic()

    def frame_done(self, index: int, segments: int) -> None:
        """Учесть кадр ``index``, в котором нарисовано ``segments`` отрезков."""
        stats = self.stats
        stats.frames = min(self.total, index + 1)
        stats.segments += segments
        stats.last_segments = segments
        if segments == 0:
            stats.empty_frames += 1
        self._status.show(self.render_line())

    def render_line(self) -> str:
        done = self.stats.frames
        elapsed = max(1e-6, time.monotonic() - self._start)
        fps = done / elapsed
        remaining = (self.total - done) / fps if fps > 0 else float('inf')
        filled = BAR_LEN * done // self.total
        bar = '█' * filled + '░' * (BAR_LEN - filled)
        return (
            f'Кадр {done}/{self.total} [{bar}] отрезков: {self.stats.last_segments}'
            f' | {fps:4.1f} кадр/с | ETA {format_eta(remaining)}'
        )

    def summary(self) -> str:
        stats = self.stats
        return (
            f'Отрисовано кадров: {stats.frames}, отрезков: {stats.segments} '
            f'(в среднем {stats.mean_segments:.1f} на кадр), '
            f'пустых кадров: {stats.empty_frames}'
        )

    def close(self) -> None:
        self._status.clear()
        if self.stats.empty_frames:
            logger.warning(
                'Isoline missing in %d of %d frames; check threshold and field range',
                self.stats.empty_frames,
                self.stats.frames,
            )
