# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: запись ассетов во временный каталог
и чистый `Config` для каждого теста.
"""

import textwrap

import pytest

from objscene.utils.config import Config


@pytest.fixture(autouse=True)
def clean_config(tmp_path, monkeypatch):
    """Каждый тест – в своём каталоге и без закэшированного Config."""
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def write_asset(tmp_path):
    """write_asset("a.obj", text) -> путь; отступы в `text` срезаются."""
    def _write(name, text):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path
    return _write
