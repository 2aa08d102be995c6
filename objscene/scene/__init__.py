"""
Пакет scene – результат загрузки: вершины, группы, меши.
"""

from objscene.scene.mesh import Mesh
from objscene.scene.scene import Scene, Group, Vertex, VERTEX_DTYPE

__all__ = ["Mesh", "Scene", "Group", "Vertex", "VERTEX_DTYPE"]
