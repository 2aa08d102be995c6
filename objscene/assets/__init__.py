"""Пакет с материалами и парсером MTL‑библиотек."""
from objscene.assets.material import Material
from objscene.assets.mtl_loader import load_mtl, parse_mtl

__all__ = ["Material", "load_mtl", "parse_mtl"]
