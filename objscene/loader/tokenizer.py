# objscene/loader/tokenizer.py
"""
Разбиение текста OBJ/MTL на логические строки.

Каждая непустая строка, не начинающаяся с `#`, превращается в
`Line(tag, rest, lineno)`: первый токен, остаток строки (без крайних
пробелов) и номер строки в файле (с 1).
"""

from typing import Iterator, NamedTuple


class Line(NamedTuple):
    tag: str
    rest: str
    lineno: int

    @property
    def text(self) -> str:
        """Строка целиком (для сообщений об ошибках)."""
        return f"{self.tag} {self.rest}" if self.rest else self.tag


def iter_lines(text: str) -> Iterator[Line]:
    """Ленивая последовательность строк; повторный вызов начинает заново."""
    # только `\n` (и `\r\n`) – другие разделители Unicode строку не рвут
    for lineno, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split(None, 1)
        rest = parts[1].strip() if len(parts) > 1 else ""
        yield Line(parts[0], rest, lineno)
