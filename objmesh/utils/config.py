"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.

    {
        "models": {"dome": "models/dome.obj"},
        "output_corner_vertices": false,
        "log_level": "INFO",
        "max_workers": null
    }
"""

import copy
import json
from pathlib import Path
from objmesh.utils.logger import logger

DEFAULT_CONFIG = {
    "models": {},
    "output_corner_vertices": False,
    "log_level": "INFO",
    "max_workers": None,
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "objmesh.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

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
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    # -----------------------------------------------------------------
    @property
    def models(self) -> dict:
        """имя модели → путь к .obj (относительные пути – от файла конфига)."""
        base = self.path.parent
        return {name: str(base / p) for name, p in (self["models"] or {}).items()}

    @property
    def output_corner_vertices(self) -> bool:
        return bool(self["output_corner_vertices"])
