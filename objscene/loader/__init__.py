"""
Пакет loader – проход по OBJ‑файлу: токенизация, атрибуты, грани,
дедупликация вершин и группы.  Точка входа – `objscene.loader.obj_loader`.
"""

from objscene.loader.tokenizer import Line, iter_lines

__all__ = ["Line", "iter_lines"]
