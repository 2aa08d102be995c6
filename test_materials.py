# -*- coding: utf-8 -*-
from pathlib import Path

import pytest

from objscene.assets import Material, load_mtl, parse_mtl
from objscene.errors import IoError, MalformedAttribute

MTL = """\
# two materials
newmtl brick
Ks 0.1 0.2 0.3
Ns 10
map_Ka textures/brick.png
illum 2

newmtl leaves
Ns 4.5
map_Ka leaves.png
map_d -s 1 1 1 leaves_mask.png
"""


def test_parse_materials():
    mats = parse_mtl(MTL, "assets")
    assert list(mats) == ["brick", "leaves"]

    brick = mats["brick"]
    assert brick.glossiness == (0.1, 0.2, 0.3)
    assert brick.roughness == 10.0
    assert brick.albedo_map == Path("assets") / "textures" / "brick.png"
    assert brick.transparency_map is None

    leaves = mats["leaves"]
    assert leaves.glossiness == (0.0, 0.0, 0.0)
    assert leaves.roughness == 4.5
    assert leaves.transparency_map == Path("assets") / "leaves_mask.png"
    assert set(leaves.texture_paths) == {"albedo", "transparency"}


def test_accumulator_reset_between_materials():
    mats = parse_mtl("newmtl a\nKs 1 1 1\nnewmtl b\n")
    assert mats["a"].glossiness == (1.0, 1.0, 1.0)
    assert mats["b"] == Material()


def test_open_material_without_newmtl():
    assert parse_mtl("") == {"": Material()}
    assert parse_mtl("Ns 3\n") == {"": Material(roughness=3.0)}


@pytest.mark.parametrize("text", ["newmtl a\nKs 1 1\n", "newmtl a\nNs shiny\n"])
def test_malformed_numeric_directive(text):
    with pytest.raises(MalformedAttribute) as info:
        parse_mtl(text)
    assert info.value.lineno == 2


def test_load_mtl_resolves_against_file_directory(write_asset, tmp_path):
    path = write_asset("lib/scene.mtl", "newmtl m\nmap_Ka albedo.png\n")
    mats = load_mtl(path)
    assert mats["m"].albedo_map == tmp_path / "lib" / "albedo.png"


def test_load_mtl_missing_file(tmp_path):
    with pytest.raises(IoError) as info:
        load_mtl(tmp_path / "nope.mtl")
    assert info.value.path == tmp_path / "nope.mtl"


def test_parse_error_carries_path(write_asset):
    path = write_asset("bad.mtl", "newmtl m\nKs 1\n")
    with pytest.raises(MalformedAttribute) as info:
        load_mtl(path)
    assert info.value.path == path
    assert str(path) in str(info.value)
