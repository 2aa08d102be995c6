"""
Меш одной группы – готовые к загрузке в GPU массивы.
Сам рендер (VAO/буферы) живёт снаружи и только читает эти поля.
"""

import numpy as np

from objscene.assets.material import Material


class Mesh:
    """Позиции/нормали/texcoords (float32) + индексы (uint32) + материал."""
    def __init__(self,
                 vertices: np.ndarray,
                 normals: np.ndarray = None,
                 texcoords: np.ndarray = None,
                 indices: np.ndarray = None,
                 material: Material = None,
                 name="Mesh"):
        self.name = name
        self.material = material if material is not None else Material()

        self.vertices = np.asarray(vertices, dtype=np.float32).reshape((-1, 3))
        self.normals = np.asarray(normals, dtype=np.float32) if normals is not None else None
        self.texcoords = np.asarray(texcoords, dtype=np.float32) if texcoords is not None else None
        self.indices = np.asarray(indices, dtype=np.uint32) if indices is not None else None

        # количество индексов/вершин
        self.index_count = len(self.indices) if self.indices is not None else len(self.vertices)

        # bounding sphere по вершинам, на которые ссылаются индексы
        verts = self.vertices
        if self.indices is not None:
            verts = verts[np.unique(self.indices)]
        if len(verts):
            self._bounding_center = verts.mean(axis=0).astype(np.float32)
            self._bounding_radius = float(
                np.linalg.norm(verts - self._bounding_center, axis=1).max()
            )
        else:
            self._bounding_center = np.zeros(3, dtype=np.float32)
            self._bounding_radius = 0.0

    @property
    def bounding_sphere(self) -> tuple[np.ndarray, float]:
        """(центр, радиус) в локальных координатах."""
        return self._bounding_center, self._bounding_radius

    def interleaved(self) -> np.ndarray:
        """Плоский float32‑массив position|normal|texcoord на вершину."""
        components = [self.vertices]
        if self.normals is not None:
            components.append(self.normals)
        if self.texcoords is not None:
            components.append(self.texcoords)
        return np.column_stack(components).astype(np.float32).ravel()

    def __repr__(self) -> str:
        return f"Mesh({self.name!r}, indices={self.index_count})"
