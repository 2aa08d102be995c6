# -*- coding: utf-8 -*-
"""
Загрузчик Wavefront OBJ (+ MTL).

Один синхронный проход по строкам файла:

1️⃣  `v` / `vn` / `vt` – пополняем хранилища атрибутов;
2️⃣  `f` – разбираем углы, переводим индексы в 0‑based, дедуплицируем
    вершины и триангулируем грань веером;
3️⃣  `g` / `usemtl` – переключаем текущую группу и материал;
4️⃣  `mtllib` – тут же (блокирующе) читаем библиотеку материалов.

Неизвестные теги пропускаются.  Любая ошибка прерывает разбор целиком.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from objscene.assets.material import Material
from objscene.assets.mtl_loader import load_mtl
from objscene.errors import IoError, ObjParseError
from objscene.loader.attributes import ATTRIBUTE_TAGS, AttributeStores
from objscene.loader.dedup import VertexDeduplicator
from objscene.loader.faces import parse_corners, resolve_corner, triangulate
from objscene.loader.groups import GroupAccumulator
from objscene.loader.tokenizer import Line, iter_lines
from objscene.scene.scene import Scene
from objscene.utils.config import Config
from objscene.utils.logger import logger
from objscene.utils.profiler import Profiler


class ParserState:
    """Всё изменяемое состояние одного прохода; живёт только внутри разбора."""

    def __init__(
        self,
        base_dir: Path,
        encoding: str = "utf-8",
        load_materials: bool = True,
        warn_missing_materials: bool = True,
    ) -> None:
        self.base_dir = base_dir
        self.encoding = encoding
        self.load_materials = load_materials
        self.warn_missing_materials = warn_missing_materials

        self.scene = Scene()
        self.stores = AttributeStores()
        self.dedup = VertexDeduplicator(self.stores, self.scene.vertices)
        self.groups = GroupAccumulator(self.scene.groups)

    # -----------------------------------------------------------------
    def feed(self, line: Line) -> None:
        tag = line.tag
        if tag in ATTRIBUTE_TAGS:
            self.stores.push(line)
        elif tag == "f":
            self._face(line)
        elif tag == "g":
            self.groups.open(line.rest.split()[0] if line.rest else "")
        elif tag == "usemtl":
            self._use_material(line.rest.split()[0] if line.rest else "")
        elif tag == "mtllib":
            self._material_library(line)

    def finish(self) -> Scene:
        self.groups.finish()
        return self.scene

    # -----------------------------------------------------------------
    def _face(self, line: Line) -> None:
        slots = [
            self.dedup.slot(resolve_corner(self.stores, corner, line))
            for corner in parse_corners(line)
        ]
        self.groups.add_triangles(triangulate(slots, line))

    def _use_material(self, name: str) -> None:
        material = self.scene.materials.get(name)
        if material is None:
            # необъявленный материал – молча подставляем «нулевой»
            # при load_materials=False таблица пуста намеренно
            if self.warn_missing_materials and self.load_materials:
                logger.warning(
                    f"[Loader] usemtl '{name}': material not declared, using defaults"
                )
            material = Material()
        self.groups.use_material(name, material)

    def _material_library(self, line: Line) -> None:
        if not self.load_materials:
            return
        for name in line.rest.split():
            self.scene.materials.update(
                load_mtl(self.base_dir / name, encoding=self.encoding)
            )


def parse_obj(
    text: str,
    base_dir: str | Path = ".",
    *,
    encoding: Optional[str] = None,
    load_materials: Optional[bool] = None,
) -> Scene:
    """
    Разобрать текст OBJ.  `mtllib` ищется относительно `base_dir`.
    Неуказанные параметры берутся из `Config`.
    """
    cfg = Config()
    state = ParserState(
        Path(base_dir),
        encoding=encoding or cfg["encoding"],
        load_materials=cfg["load_materials"] if load_materials is None else load_materials,
        warn_missing_materials=bool(cfg["warn_missing_materials"]),
    )
    for line in iter_lines(text):
        state.feed(line)
    return state.finish()


def load_obj(
    path: str | Path,
    *,
    encoding: Optional[str] = None,
    load_materials: Optional[bool] = None,
) -> Scene:
    """Прочитать OBJ‑файл и вернуть полностью собранную `Scene`."""
    path = Path(path)
    encoding = encoding or Config()["encoding"]

    with Profiler(f"load_obj {path.name}"):
        try:
            with open(path, "r", encoding=encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise IoError(path, str(exc)) from exc

        try:
            scene = parse_obj(
                text, path.parent, encoding=encoding, load_materials=load_materials
            )
        except ObjParseError as exc:
            if exc.path is None:
                exc.path = path
            raise

    logger.info(
        f"[Loader] Loaded {path}: {len(scene.vertices)} vertices, "
        f"{scene.triangle_count} triangles, {len(scene.groups)} group(s), "
        f"{len(scene.materials)} material(s)"
    )
    return scene
