# objscene/loader/attributes.py
"""
Хранилища атрибутов вершин (`v`, `vn`, `vt`) и перевод индексов
из OBJ‑нотации (с 1, отрицательные – с конца) в обычные 0‑based.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from objscene.errors import IndexOutOfRange, MalformedAttribute
from objscene.loader.tokenizer import Line

# tag -> (имя хранилища, арность)
ATTRIBUTE_TAGS = {
    "v": ("position", 3),
    "vn": ("normal", 3),
    "vt": ("texcoord", 2),
}

# десятичная запись с необязательной экспонентой; nan/inf и `_` не допускаются
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_floats(line: Line, count: int) -> Tuple[float, ...]:
    """
    Первые `count` чисел из остатка строки.
    Лишние токены (например, `w` у `v`) игнорируются.
    """
    tokens = line.rest.split()
    if len(tokens) < count:
        raise MalformedAttribute(
            f"'{line.tag}' expects {count} numbers, got {len(tokens)}",
            lineno=line.lineno, line=line.text,
        )
    values = tokens[:count]
    if not all(_FLOAT_RE.fullmatch(tok) for tok in values):
        raise MalformedAttribute(
            f"'{line.tag}' expects {count} numbers",
            lineno=line.lineno, line=line.text,
        )
    return tuple(float(tok) for tok in values)


class AttributeStores:
    """Три независимо растущих списка: позиции, нормали, texcoords."""

    def __init__(self) -> None:
        self.positions: list[Tuple[float, float, float]] = []
        self.normals: list[Tuple[float, float, float]] = []
        self.texcoords: list[Tuple[float, float]] = []
        self._by_name = {
            "position": self.positions,
            "normal": self.normals,
            "texcoord": self.texcoords,
        }

    def push(self, line: Line) -> None:
        """Добавить одну запись из строки `v`/`vn`/`vt`."""
        attribute, arity = ATTRIBUTE_TAGS[line.tag]
        self._by_name[attribute].append(parse_floats(line, arity))

    # -----------------------------------------------------------------
    def resolve(self, attribute: str, index: int, line: Optional[Line] = None) -> int:
        """
        OBJ‑индекс → 0‑based индекс в хранилище `attribute`.

        * положительный индекс считается с 1;
        * отрицательный – с конца (-1 – последний добавленный элемент);
        * 0 и всё, что выходит за размер, – `IndexOutOfRange`.

        «Отсутствующий» texcoord/normal (0 в грамматике) сюда не передаётся –
        его отсекает вызывающий код.
        """
        size = len(self._by_name[attribute])
        resolved = size + index if index < 0 else index - 1
        if index == 0 or not 0 <= resolved < size:
            raise IndexOutOfRange(
                attribute, index, size,
                lineno=line.lineno if line else None,
                line=line.text if line else None,
            )
        return resolved
