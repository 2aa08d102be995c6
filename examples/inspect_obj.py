"""
Загружает OBJ и печатает сводку: группы, материалы, размеры буферов.

    python examples/inspect_obj.py examples/assets/cube.obj
"""

import sys
from pathlib import Path

import objscene
from objscene.utils import logger


def describe(path):
    scene = objscene.load_obj(path)
    buf = scene.vertex_buffer()
    print(f"{path}: {len(scene.vertices)} vertices "
          f"({buf.nbytes} bytes, stride {buf.dtype.itemsize}), "
          f"{scene.triangle_count} triangles")

    for mesh in scene.meshes():
        centre, radius = mesh.bounding_sphere
        print(f"  group {mesh.name!r}: {mesh.index_count // 3} triangles, "
              f"bounds centre={centre.round(3).tolist()} radius={radius:.3f}")

    for name, mtl in scene.materials.items():
        maps = ", ".join(f"{k}={v}" for k, v in mtl.texture_paths.items()) or "no maps"
        print(f"  material {name!r}: Ks={mtl.glossiness} Ns={mtl.roughness} ({maps})")


if __name__ == "__main__":
    default = Path(__file__).parent / "assets" / "cube.obj"
    target = sys.argv[1] if len(sys.argv) > 1 else default
    try:
        describe(target)
    except objscene.ObjLoadError as exc:
        logger.error(f"Cannot load {target}: {exc}")
        sys.exit(1)
