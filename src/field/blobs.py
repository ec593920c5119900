"""
Поле «метаболов» и его анимация.

Каждая капля вносит вклад size / расстояние; изолиния уровня 1.0 очерчивает
слипающиеся капли. step_blobs() двигает капли и отражает их от границ.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from shared.constants import BLOB_VELOCITY_DIVISOR, ENERGY_MIN_DISTANCE

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass
class Blob:
    center: tuple[float, float]
    velocity: tuple[float, float]
    size: float

    def advance(self) -> None:
        self.center = (
            self.center[0] + self.velocity[0] / BLOB_VELOCITY_DIVISOR,
            self.center[1] + self.velocity[1] / BLOB_VELOCITY_DIVISOR,
        )


def default_blobs() -> list[Blob]:
    """Четыре капли исходной анимации."""
    return [
        Blob(center=(1.0, 1.0), velocity=(1.0, 0.7), size=math.sqrt(0.6)),
        Blob(center=(4.0, 6.0), velocity=(-2.0, 1.0), size=math.sqrt(0.3)),
        Blob(center=(6.0, 2.0), velocity=(-0.7, -0.2), size=math.sqrt(0.4)),
        Blob(center=(8.0, 4.0), velocity=(0.4, -1.4), size=math.sqrt(0.1)),
    ]


def energy(
    x: float | np.ndarray, y: float | np.ndarray, blobs: Iterable[Blob]
) -> float | np.ndarray:
    """
    Сумма вкладов size / distance всех капель в точке (x, y).

    Принимает как скаляры, так и numpy-массивы координат.
    """
    total = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
    for blob in blobs:
        cx, cy = blob.center
        dist = np.hypot(np.subtract(x, cx), np.subtract(y, cy))
        total += blob.size / np.maximum(dist, ENERGY_MIN_DISTANCE)
    if total.ndim == 0:
        return float(total)
    return total


def step_blobs(bounds: tuple[float, float], blobs: Iterable[Blob]) -> None:
    """
    Сдвинуть капли на один кадр внутри [0, width] x [0, height].

    Если капля выходит за границу, соответствующая компонента скорости
    меняет знак и делается ещё один шаг.
    """
    width, height = bounds
    for blob in blobs:
        blob.advance()

        vx, vy = blob.velocity
        cx, cy = blob.center
        extra_step = False
        if cx + blob.size > width or cx - blob.size < 0.0:
            vx = -vx
            extra_step = True
        if cy + blob.size > height or cy - blob.size < 0.0:
            vy = -vy
            extra_step = True
        blob.velocity = (vx, vy)
        if extra_step:
            blob.advance()
