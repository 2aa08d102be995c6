"""
Настройки загрузчика в формате JSON.
Если файл не найден – используются значения по‑умолчанию (файл не создаётся,
для записи есть явный `save()`).
"""

import copy
import json
from pathlib import Path

from objscene.utils.logger import logger, set_level

DEFAULT_CONFIG = {
    "encoding": "utf-8",
    "log_level": "INFO",
    "warn_missing_materials": True,
    "load_materials": True,
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "objscene.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть текущий экземпляр (следующий `Config()` перечитает файл)."""
        cls._instance = None

    def _load(self):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data.update(json.load(f))
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.debug(f"[Config] No config file at {self.path} – using defaults.")
        set_level(str(self["log_level"]))

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        if key == "log_level":
            set_level(str(value))

    def get(self, key, default=None):
        return self.data.get(key, default)
