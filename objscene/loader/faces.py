# objscene/loader/faces.py
"""
Грамматика углов грани (`p`, `p/t`, `p/t/n`, `p//n`) и fan‑триангуляция.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from objscene.errors import DegenerateFace, MalformedFaceGrammar
from objscene.loader.attributes import AttributeStores
from objscene.loader.tokenizer import Line

# (position, texcoord, normal) в нотации файла; 0 – «не указан»
RawCorner = Tuple[int, int, int]
# (position, texcoord | None, normal | None), 0‑based
CornerKey = Tuple[int, Optional[int], Optional[int]]

# только ASCII‑цифры: без `_`, без цифр других алфавитов
_INDEX_RE = re.compile(r"[+-]?[0-9]+")


def _parse_index(token: str, what: str, line: Line) -> int:
    if not _INDEX_RE.fullmatch(token):
        raise MalformedFaceGrammar(
            f"expected {what} index, got {token!r}",
            lineno=line.lineno, line=line.text,
        )
    return int(token)


def parse_corner(token: str, line: Line) -> RawCorner:
    """Один угол грани → (p, t, n); отсутствующие t/n равны 0."""
    parts = token.split("/")
    if len(parts) > 3:
        raise MalformedFaceGrammar(
            f"unexpected '/' in corner {token!r}",
            lineno=line.lineno, line=line.text,
        )

    position = _parse_index(parts[0], "position", line)
    texcoord = normal = 0
    if len(parts) == 2:
        # p/t – texcoord обязателен
        texcoord = _parse_index(parts[1], "texcoord", line)
    elif len(parts) == 3:
        # p/t/n или p//n
        if parts[1]:
            texcoord = _parse_index(parts[1], "texcoord", line)
        normal = _parse_index(parts[2], "normal", line)
    return position, texcoord, normal


def parse_corners(line: Line) -> List[RawCorner]:
    """Все углы строки `f`; разбор идёт до конца строки."""
    return [parse_corner(tok, line) for tok in line.rest.split()]


def resolve_corner(stores: AttributeStores, corner: RawCorner, line: Line) -> CornerKey:
    """
    Перевести индексы угла в 0‑based и проверить границы.
    Нулевые texcoord/normal не проверяются – это «fallback», а не индекс 0.
    """
    p, t, n = corner
    return (
        stores.resolve("position", p, line),
        stores.resolve("texcoord", t, line) if t != 0 else None,
        stores.resolve("normal", n, line) if n != 0 else None,
    )


def triangulate(slots: Sequence[int], line: Optional[Line] = None) -> List[int]:
    """
    Fan‑триангуляция: (c0, ci, ci+1) для i = 1 … len-2.
    Порядок обхода сохраняется; вырожденные треугольники не ищем.
    """
    if len(slots) < 3:
        raise DegenerateFace(
            f"not enough indices: face has {len(slots)} corner(s)",
            lineno=line.lineno if line else None,
            line=line.text if line else None,
        )
    out: List[int] = []
    first = slots[0]
    for i in range(1, len(slots) - 1):
        out.extend((first, slots[i], slots[i + 1]))
    return out
