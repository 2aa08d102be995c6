# -*- coding: utf-8 -*-
"""
Парсер MTL‑библиотеки: `newmtl`, `Ks`, `Ns`, `map_Ka`, `map_d`.
Остальные теги молча пропускаются.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from objscene.assets.material import Material
from objscene.errors import IoError, MalformedAttribute, ObjParseError
from objscene.loader.attributes import parse_floats
from objscene.loader.tokenizer import Line, iter_lines
from objscene.utils.logger import logger


def _texture_path(line: Line, base_dir: Path) -> Path:
    # имя файла – последний токен, опции вроде `-s 1 1 1` пропускаем
    tokens = line.rest.split()
    if not tokens:
        raise MalformedAttribute(
            f"'{line.tag}' expects a file name",
            lineno=line.lineno, line=line.text,
        )
    return base_dir / tokens[-1]


def parse_mtl(text: str, base_dir: str | Path = ".") -> Dict[str, Material]:
    """
    Разобрать текст MTL; пути текстур разрешаются относительно `base_dir`.

    Материал «открыт» с самого начала: в конце файла текущий аккумулятор
    записывается даже если `newmtl` не встретился ни разу (под именем "").
    """
    base_dir = Path(base_dir)
    materials: Dict[str, Material] = {}

    name: Optional[str] = None
    current: dict = {}

    for line in iter_lines(text):
        if line.tag == "newmtl":
            if name:
                materials[name] = Material(**current)
            name = line.rest.split()[0] if line.rest else ""
            current = {}
        elif line.tag == "Ks":
            current["glossiness"] = parse_floats(line, 3)
        elif line.tag == "Ns":
            current["roughness"] = parse_floats(line, 1)[0]
        elif line.tag == "map_Ka":
            current["albedo_map"] = _texture_path(line, base_dir)
        elif line.tag == "map_d":
            current["transparency_map"] = _texture_path(line, base_dir)

    materials[name or ""] = Material(**current)
    return materials


def load_mtl(path: str | Path, encoding: str = "utf-8") -> Dict[str, Material]:
    """Прочитать MTL‑файл целиком и разобрать его."""
    path = Path(path)
    try:
        with open(path, "r", encoding=encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise IoError(path, str(exc)) from exc

    try:
        materials = parse_mtl(text, path.parent)
    except ObjParseError as exc:
        if exc.path is None:
            exc.path = path
        raise

    logger.debug(f"[MTL] {path}: {len(materials)} material(s)")
    return materials
