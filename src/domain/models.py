from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from field.blobs import Blob, default_blobs
from shared.constants import (
    BACKGROUND_COLOR,
    CHANNEL_MAX,
    DEFAULT_FADE_STEP,
    DEFAULT_FRAME_DURATION_MS,
    DEFAULT_FRAMES,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_LOOP,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_SCALE,
    DEFAULT_THRESHOLD,
    DEFAULT_X_RANGE,
    DEFAULT_Y_RANGE,
    LINE_COLOR,
    MIN_GRID_SIZE,
    RASTER_SAFE_MARGIN_PX,
    LineStyle,
    default_line_style,
)


class BlobSettings(BaseModel):
    """Начальное состояние одной капли поля."""

    center: tuple[float, float]
    velocity: tuple[float, float] = (0.0, 0.0)
    size: float

    @field_validator('size')
    @classmethod
    def validate_size(cls, v: float | str) -> float:
        v = float(v)
        if v <= 0.0:
            msg = 'Размер капли должен быть положительным'
            raise ValueError(msg)
        return v

    def to_blob(self) -> Blob:
        return Blob(center=self.center, velocity=self.velocity, size=self.size)

    @classmethod
    def from_blob(cls, blob: Blob) -> BlobSettings:
        return cls(center=blob.center, velocity=blob.velocity, size=blob.size)


def _default_blob_settings() -> list[BlobSettings]:
    return [BlobSettings.from_blob(b) for b in default_blobs()]


class RenderSettings(BaseModel):
    """Параметры одного прогона рендера: сетка, поле, растр и анимация."""

    model_config = {
        'extra': 'ignore',  # игнорировать лишние поля из профилей
    }

    # Сетка выборки (узлы)
    grid_width: int = DEFAULT_GRID_WIDTH
    grid_height: int = DEFAULT_GRID_HEIGHT

    # Диапазоны координат поля
    x_range: tuple[float, float] = DEFAULT_X_RANGE
    y_range: tuple[float, float] = DEFAULT_Y_RANGE

    # Уровень изолинии
    threshold: float = DEFAULT_THRESHOLD

    # Пикселей на ячейку
    scale: int = DEFAULT_SCALE

    # Цвета (RGB)
    line_color: tuple[int, int, int] = LINE_COLOR
    background_color: tuple[int, int, int] = BACKGROUND_COLOR

    line_style: LineStyle = default_line_style()

    # Анимация
    frames: int = DEFAULT_FRAMES
    fade_step: int = DEFAULT_FADE_STEP
    frame_duration_ms: int = DEFAULT_FRAME_DURATION_MS
    loop: int = DEFAULT_LOOP

    # Путь к итоговому файлу
    output_path: str = DEFAULT_OUTPUT_PATH

    blobs: list[BlobSettings] = Field(default_factory=_default_blob_settings)

    @field_validator('grid_width', 'grid_height')
    @classmethod
    def validate_grid_size(cls, v: int | str) -> int:
        v = int(v)
        if v < MIN_GRID_SIZE:
            msg = f'Размер сетки должен быть не меньше {MIN_GRID_SIZE}'
            raise ValueError(msg)
        return v

    @field_validator('x_range', 'y_range')
    @classmethod
    def validate_range(cls, v: tuple[float, float]) -> tuple[float, float]:
        lo, hi = float(v[0]), float(v[1])
        if not lo < hi:
            msg = 'Диапазон должен быть непустым: min < max'
            raise ValueError(msg)
        return lo, hi

    @field_validator('line_color', 'background_color')
    @classmethod
    def validate_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        if any(not 0 <= int(c) <= CHANNEL_MAX for c in v):
            msg = f'Компоненты цвета должны быть в диапазоне [0, {CHANNEL_MAX}]'
            raise ValueError(msg)
        return int(v[0]), int(v[1]), int(v[2])

    @field_validator('scale', 'frames')
    @classmethod
    def validate_positive(cls, v: int | str) -> int:
        v = int(v)
        if v < 1:
            msg = 'Значение должно быть положительным'
            raise ValueError(msg)
        return v

    @field_validator('fade_step')
    @classmethod
    def validate_fade_step(cls, v: int | str) -> int:
        fv = int(v)
        # Допускаем диапазон 0–255
        fv = max(fv, 0)
        return min(fv, CHANNEL_MAX)

    @field_validator('frame_duration_ms', 'loop')
    @classmethod
    def validate_non_negative(cls, v: int | str) -> int:
        return max(int(v), 0)

    @model_validator(mode='after')
    def validate_image_size(self) -> RenderSettings:
        # Растру нужен хотя бы один пиксель между полями clamp_segment()
        min_side = int(2 * RASTER_SAFE_MARGIN_PX) + 1
        if min(self.image_width, self.image_height) < min_side:
            msg = (
                f'Изображение {self.image_width}x{self.image_height} слишком мало: '
                f'нужно не меньше {min_side}x{min_side} пикселей'
            )
            raise ValueError(msg)
        return self

    # Вычисляемые свойства
    @property
    def image_width(self) -> int:
        return self.grid_width * self.scale

    @property
    def image_height(self) -> int:
        return self.grid_height * self.scale

    @property
    def pixel_offset(self) -> float:
        """Сдвиг узлов сетки в пикселях: центр ячейки растра масштаба."""
        return self.scale / 2.0

    @property
    def field_bounds(self) -> tuple[float, float]:
        """Границы отражения капель (ширина и высота области поля)."""
        return self.x_range[1], self.y_range[1]

    def make_blobs(self) -> list[Blob]:
        return [b.to_blob() for b in self.blobs]
