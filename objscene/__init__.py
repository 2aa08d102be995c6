"""
objscene – загрузчик Wavefront OBJ/MTL.

Читает меш и библиотеку материалов и отдаёт дедуплицированный
индексированный вершинный буфер, индексы по группам и таблицу материалов.
"""

from objscene.utils import logger, Config
from objscene.errors import (
    ObjLoadError,
    IoError,
    ObjParseError,
    MalformedAttribute,
    MalformedFaceGrammar,
    IndexOutOfRange,
    DegenerateFace,
)
from objscene.assets import Material, load_mtl, parse_mtl
from objscene.scene import Scene, Group, Vertex, Mesh, VERTEX_DTYPE
from objscene.loader.obj_loader import load_obj, parse_obj

__version__ = "1.0.0"

__all__ = [
    "load_obj",
    "parse_obj",
    "load_mtl",
    "parse_mtl",
    "Scene",
    "Group",
    "Vertex",
    "Mesh",
    "Material",
    "VERTEX_DTYPE",
    "ObjLoadError",
    "IoError",
    "ObjParseError",
    "MalformedAttribute",
    "MalformedFaceGrammar",
    "IndexOutOfRange",
    "DegenerateFace",
    "Config",
    "logger",
]
