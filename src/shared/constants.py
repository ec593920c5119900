from enum import Enum

# Имя приложения (используется для пользовательских каталогов)
APP_NAME = 'isoraster'

# Переменная окружения, переопределяющая базовый каталог пользователя
APP_HOME_ENV = 'ISORASTER_HOME'

# --- Поле и сетка выборки
# Размер сетки выборки по умолчанию (узлы по X и Y)
DEFAULT_GRID_WIDTH = 50
DEFAULT_GRID_HEIGHT = 50

# Минимальный размер сетки: хотя бы одна ячейка 2×2
MIN_GRID_SIZE = 2

# Диапазон координат поля по умолчанию (единицы поля)
DEFAULT_X_RANGE = (0.0, 10.0)
DEFAULT_Y_RANGE = (0.0, 10.0)

# Уровень изолинии по умолчанию
DEFAULT_THRESHOLD = 1.0

# Минимальное расстояние до центра капли (защита от деления на ноль)
ENERGY_MIN_DISTANCE = 1e-6

# Делитель скорости за один шаг анимации
BLOB_VELOCITY_DIVISOR = 10.0

# --- Растр
# Масштаб: пикселей на одну ячейку сетки
DEFAULT_SCALE = 10

# Цвет фона (RGB)
BACKGROUND_COLOR = (255, 255, 255)

# Цвет изолиний (RGB)
LINE_COLOR = (0, 0, 255)

# Прибавка к каждому каналу за кадр (затухание к белому)
DEFAULT_FADE_STEP = 40

# Максимальное значение канала uint8
CHANNEL_MAX = 255

# Отступ безопасной области от края буфера (пиксели).
# Сглаженная линия может задеть соседнюю строку/столбец за концом отрезка.
RASTER_SAFE_MARGIN_PX = 1.0

# --- Анимация
DEFAULT_FRAMES = 120
# Длительность кадра (мс)
DEFAULT_FRAME_DURATION_MS = 40
# 0 — бесконечный повтор
DEFAULT_LOOP = 0

# Файл результата по умолчанию
DEFAULT_OUTPUT_PATH = 'result.png'

# --- Marching Squares — битовая раскладка маски
# Порядок бит совпадает с порядком углов (tl, tr, bl, br):
# b3: TL, b2: TR, b1: BL, b0: BR
MS_BIT_TL = 8  # 0b1000
MS_BIT_TR = 4  # 0b0100
MS_BIT_BL = 2  # 0b0010
MS_BIT_BR = 1  # 0b0001

# Пустая и полная маски (все углы не выше/выше уровня)
MS_MASK_EMPTY = 0  # 0b0000
MS_MASK_FULL = 15  # 0b1111

# Седловые маски — диагональные углы по разные стороны уровня
MS_MASK_TL_BR = MS_BIT_TL | MS_BIT_BR  # 0b1001
MS_MASK_TR_BL = MS_BIT_TR | MS_BIT_BL  # 0b0110

# Общее число масок
MS_CASE_COUNT = 16


class Edge(str, Enum):
    """Сторона ячейки, которую пересекает изолиния."""

    TOP = 'top'
    RIGHT = 'right'
    BOTTOM = 'bottom'
    LEFT = 'left'


class LineStyle(str, Enum):
    """Стиль отрисовки изолиний."""

    ANTIALIASED = 'antialiased'
    SOLID = 'solid'


def default_line_style() -> LineStyle:
    return LineStyle.ANTIALIASED


# --- Диагностика памяти

# Байт на пиксель RGB-буфера
BYTES_PER_PX_RGB = 3

# Доля свободной памяти, которую допускается занять анимацией
MEMORY_SAFETY_RATIO = 0.7
