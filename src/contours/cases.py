"""
Таблица случаев marching squares.

Маска ячейки собирается из четырёх предикатов «значение > уровня» в порядке
(tl, tr, bl, br): b3 — TL, b2 — TR, b1 — BL, b0 — BR. Каждая запись таблицы —
кортеж пар рёбер; каждая пара даёт один отрезок изолинии.

Инверсия всех четырёх бит даёт ту же геометрию, кроме седловых масок.
Для седловых масок (0b1001, 0b0110) центр ячейки не проверяется: отсекаются
оба угла, лежащие не выше уровня.
"""

from __future__ import annotations

from shared.constants import (
    MS_BIT_BL,
    MS_BIT_BR,
    MS_BIT_TL,
    MS_BIT_TR,
    MS_CASE_COUNT,
    Edge,
)

EdgePair = tuple[Edge, Edge]

_T = Edge.TOP
_R = Edge.RIGHT
_B = Edge.BOTTOM
_L = Edge.LEFT

# mask -> пары рёбер, индекс кортежа совпадает с маской
CASE_TABLE: tuple[tuple[EdgePair, ...], ...] = (
    (),  # 0b0000 — нет пересечений
    ((_B, _R),),  # 0b0001 — только BR
    ((_B, _L),),  # 0b0010 — только BL
    ((_L, _R),),  # 0b0011 — нижняя половина
    ((_R, _T),),  # 0b0100 — только TR
    ((_T, _B),),  # 0b0101 — правая половина
    ((_L, _T), (_B, _R)),  # 0b0110 — седло TR+BL
    ((_T, _L),),  # 0b0111 — все кроме TL
    ((_T, _L),),  # 0b1000 — только TL
    ((_T, _R), (_L, _B)),  # 0b1001 — седло TL+BR
    ((_T, _B),),  # 0b1010 — левая половина
    ((_R, _T),),  # 0b1011 — все кроме TR
    ((_L, _R),),  # 0b1100 — верхняя половина
    ((_B, _L),),  # 0b1101 — все кроме BL
    ((_B, _R),),  # 0b1110 — все кроме BR
    (),  # 0b1111 — нет пересечений
)


def cell_mask(tl: float, tr: float, bl: float, br: float, threshold: float) -> int:
    """Build the 4-bit corner mask using the strict ``value > threshold`` test."""
    mask = 0
    if tl > threshold:
        mask |= MS_BIT_TL
    if tr > threshold:
        mask |= MS_BIT_TR
    if bl > threshold:
        mask |= MS_BIT_BL
    if br > threshold:
        mask |= MS_BIT_BR
    return mask


def edges_for_mask(mask: int) -> tuple[EdgePair, ...]:
    if not 0 <= mask < MS_CASE_COUNT:
        msg = f'Mask out of range: {mask}'
        raise ValueError(msg)
    return CASE_TABLE[mask]
