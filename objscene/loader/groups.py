# objscene/loader/groups.py
"""
Аккумулятор групп: текущая группа (`g`) и текущий материал (`usemtl`).

Материал снимается в группу в момент `usemtl` и применяется ко *всем*
её индексам – последний `usemtl` внутри группы побеждает.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from objscene.assets.material import Material
from objscene.scene.scene import Group
from objscene.utils.logger import logger


class GroupAccumulator:
    """
    Состояния: «группа не открыта» (только неявная группа "" без граней)
    и «группа открыта».  Переходы: `open` (g), `use_material` (usemtl),
    `add_triangles` (f), `finish` (EOF).

    Повторно открытое имя (`g A … g B … g A`) дописывается к уже
    закоммиченной группе A, а не затирает её, как простое присваивание
    в словарь: треугольники первого участка не теряются.
    """

    def __init__(self, groups: Dict[str, Group]) -> None:
        self.groups = groups
        self.material = Material()
        self.material_name = ""
        self.current = Group("")
        self._named = False   # был ли хоть один `g`

    # -----------------------------------------------------------------
    def open(self, name: str) -> None:
        """`g <name>`: закоммитить открытую группу и начать новую."""
        if self._named or self.current.indices:
            self._commit()
        self.current = Group(name, self.material, self.material_name)
        self._named = True

    def use_material(self, name: str, material: Material) -> None:
        """`usemtl <name>`: заменить материал текущей группы."""
        self.material = material
        self.material_name = name
        self.current.set_material(name, material)

    def add_triangles(self, indices: Iterable[int]) -> None:
        self.current.extend(indices)

    def finish(self) -> Dict[str, Group]:
        """EOF: закоммитить то, что открыто (в т.ч. неявную группу "")."""
        self._commit()
        return self.groups

    # -----------------------------------------------------------------
    def _commit(self) -> None:
        # то же имя уже есть – склеиваем (merge), а не перезаписываем
        group = self.current
        existing: Optional[Group] = self.groups.get(group.name)
        if existing is not None and existing is not group:
            existing.merge(group)
        else:
            self.groups[group.name] = group
        logger.debug(
            f"[Loader] Group '{group.name}': {len(group.indices) // 3} triangle(s)"
        )
