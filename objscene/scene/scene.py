# -*- coding: utf-8 -*-
"""
Результат загрузки: вершины, группы и таблица материалов.

Вершинный буфер общий для всех групп; группы хранят только индексы
треугольников.  После `load_obj` сцена считается неизменяемой и целиком
принадлежит вызывающему коду (рендеру).
"""

from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

import numpy as np

from objscene.assets.material import Material
from objscene.scene.mesh import Mesh

# Раскладка вершины в GPU‑буфере: position @0, normal @12, texcoord @24
VERTEX_DTYPE = np.dtype([
    ("position", np.float32, (3,)),
    ("normal", np.float32, (3,)),
    ("texcoord", np.float32, (2,)),
])


class Vertex(NamedTuple):
    position: Tuple[float, float, float]
    normal: Tuple[float, float, float]
    texcoord: Tuple[float, float]


class Group:
    """Именованный набор треугольников с одним снимком материала."""

    def __init__(
        self,
        name: str,
        material: Optional[Material] = None,
        material_name: str = "",
    ) -> None:
        self.name = name
        self.material = material if material is not None else Material()
        self.material_name = material_name
        self.indices: List[int] = []
        # (имя материала, индексы) – участки между переключениями usemtl
        self.shapes: List[Tuple[str, List[int]]] = []

    def set_material(self, name: str, material: Material) -> None:
        self.material = material
        self.material_name = name
        if self.shapes and not self.shapes[-1][1]:
            self.shapes[-1] = (name, self.shapes[-1][1])
        else:
            self.shapes.append((name, []))

    def extend(self, indices: Iterable[int]) -> None:
        indices = list(indices)
        if not self.shapes:
            self.shapes.append((self.material_name, []))
        self.shapes[-1][1].extend(indices)
        self.indices.extend(indices)

    def merge(self, other: "Group") -> None:
        """Дописать `other` (та же группа, открытая повторно) в конец."""
        self.indices.extend(other.indices)
        self.shapes.extend(s for s in other.shapes if s[1])
        self.material = other.material
        self.material_name = other.material_name

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def index_array(self) -> np.ndarray:
        return np.asarray(self.indices, dtype=np.uint32)

    def __repr__(self) -> str:
        return (
            f"Group({self.name!r}, material={self.material_name!r}, "
            f"triangles={self.triangle_count})"
        )


class Scene:
    """Вершины + группы + материалы одного OBJ‑файла."""

    def __init__(self) -> None:
        self.vertices: List[Vertex] = []
        self.groups: Dict[str, Group] = {}
        self.materials: Dict[str, Material] = {}

    # -----------------------------------------------------------------
    @property
    def triangle_count(self) -> int:
        return sum(g.triangle_count for g in self.groups.values())

    def vertex_buffer(self) -> np.ndarray:
        """Структурированный массив `VERTEX_DTYPE` в порядке слотов."""
        buf = np.zeros(len(self.vertices), dtype=VERTEX_DTYPE)
        if self.vertices:
            buf["position"] = [v.position for v in self.vertices]
            buf["normal"] = [v.normal for v in self.vertices]
            buf["texcoord"] = [v.texcoord for v in self.vertices]
        return buf

    def meshes(self) -> List[Mesh]:
        """По одному `Mesh` на группу; атрибутные массивы общие."""
        buf = self.vertex_buffer()
        positions = buf["position"]
        normals = buf["normal"]
        texcoords = buf["texcoord"]
        return [
            Mesh(positions, normals, texcoords, group.index_array(),
                 material=group.material, name=group.name)
            for group in self.groups.values()
        ]

    def __repr__(self) -> str:
        return (
            f"Scene(vertices={len(self.vertices)}, groups={len(self.groups)}, "
            f"materials={len(self.materials)})"
        )
