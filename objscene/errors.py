# objscene/errors.py
"""
Исключения загрузчика.

Любая ошибка фатальна для всей загрузки: парсер не пропускает строки
и не возвращает частично собранную сцену.
"""

from __future__ import annotations

from pathlib import Path


class ObjLoadError(Exception):
    """Корень иерархии – «этот ассет загрузить нельзя»."""


class IoError(ObjLoadError):
    """Не удалось открыть/прочитать файл меша или библиотеки материалов."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        msg = f"cannot read '{self.path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class ObjParseError(ObjLoadError):
    """Синтаксическая ошибка в конкретной строке файла."""

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        line: str | None = None,
        path: str | Path | None = None,
    ) -> None:
        self.message = message
        self.lineno = lineno
        self.line = line
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        where = str(self.path) if self.path is not None else "<string>"
        if self.lineno is not None:
            where += f":{self.lineno}"
        text = f"{where}: {self.message}"
        if self.line is not None:
            text += f" (line: {self.line!r})"
        return text


class MalformedAttribute(ObjParseError):
    """Неверная арность/тип чисел в `v`, `vn`, `vt` (и `Ks`, `Ns` в MTL)."""


class MalformedFaceGrammar(ObjParseError):
    """Неожиданный символ там, где ждали `/` или целое число."""


class IndexOutOfRange(ObjParseError):
    """Индекс атрибута выходит за текущий размер хранилища."""

    def __init__(self, attribute: str, index: int, size: int, **kwargs) -> None:
        self.attribute = attribute
        self.index = index
        self.size = size
        super().__init__(
            f"bad {attribute} index {index} ({size} defined)", **kwargs
        )


class DegenerateFace(ObjParseError):
    """Грань с числом углов меньше трёх."""
