# -*- coding: utf-8 -*-
"""
Материал из MTL‑библиотеки.

Хранит только то, что нужно рендеру: блики (`Ks`), шероховатость (`Ns`)
и пути к двум картам – albedo (`map_Ka`) и прозрачности (`map_d`).
Сами текстуры здесь не декодируются; пути уже разрешены относительно
каталога файла, в котором они объявлены.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple


class Material:
    """
    Неизменяемая (по соглашению) запись материала.
    `Material()` без аргументов – «нулевой» материал, который подставляется
    для `usemtl` с необъявленным именем.
    """

    __slots__ = ("glossiness", "roughness", "albedo_map", "transparency_map")

    def __init__(
        self,
        glossiness: Tuple[float, float, float] = (0.0, 0.0, 0.0),
        roughness: float = 0.0,
        albedo_map: Optional[Path] = None,
        transparency_map: Optional[Path] = None,
    ) -> None:
        self.glossiness = tuple(float(c) for c in glossiness)
        self.roughness = float(roughness)
        self.albedo_map = Path(albedo_map) if albedo_map is not None else None
        self.transparency_map = (
            Path(transparency_map) if transparency_map is not None else None
        )

    @property
    def texture_paths(self) -> dict[str, Path]:
        """Объявленные карты по ролям ("albedo", "transparency")."""
        paths: dict[str, Path] = {}
        if self.albedo_map is not None:
            paths["albedo"] = self.albedo_map
        if self.transparency_map is not None:
            paths["transparency"] = self.transparency_map
        return paths

    def _key(self):
        return (self.glossiness, self.roughness, self.albedo_map, self.transparency_map)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Material(glossiness={self.glossiness}, roughness={self.roughness}, "
            f"albedo_map={self.albedo_map}, transparency_map={self.transparency_map})"
        )
