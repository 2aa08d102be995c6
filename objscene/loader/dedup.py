# objscene/loader/dedup.py
"""
Дедупликация вершин: один слот выходного буфера на каждую уникальную
тройку (position, texcoord, normal) за всё время разбора файла.
"""

from __future__ import annotations

from typing import Dict, List

from objscene.loader.attributes import AttributeStores
from objscene.loader.faces import CornerKey
from objscene.scene.scene import Vertex

DEFAULT_TEXCOORD = (0.0, 0.0)
DEFAULT_NORMAL = (0.0, 0.0, 0.0)


class VertexDeduplicator:
    """Карта `CornerKey -> слот` + выходной список вершин."""

    def __init__(self, stores: AttributeStores, vertices: List[Vertex]) -> None:
        self.stores = stores
        self.vertices = vertices
        self._slots: Dict[CornerKey, int] = {}

    def slot(self, key: CornerKey) -> int:
        """Номер слота для тройки; вершина создаётся при первой встрече."""
        slot = self._slots.get(key)
        if slot is not None:
            return slot

        p, t, n = key
        self.vertices.append(Vertex(
            position=self.stores.positions[p],
            normal=self.stores.normals[n] if n is not None else DEFAULT_NORMAL,
            texcoord=self.stores.texcoords[t] if t is not None else DEFAULT_TEXCOORD,
        ))
        slot = len(self.vertices) - 1
        self._slots[key] = slot
        return slot
