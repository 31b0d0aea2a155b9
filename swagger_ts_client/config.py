"""
Конфигурация для генерации TypeScript клиента
"""

import os
from typing import Optional
import toml
from dataclasses import dataclass

CONFIG_FILE_NAME = "swagger.toml"


@dataclass
class GeneratorConfig:
    """Конфигурация генератора клиента"""

    url: Optional[str] = None
    dirname: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE_NAME, search_dir: Optional[str] = None
    ) -> Optional["GeneratorConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE_NAME)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError):
            return None

        return cls(
            url=config_data.get("url"),
            dirname=config_data.get("dirname", "api_client"),
            name=config_data.get("name", "api"),
        )

    def save_to_file(self, config_path: str = CONFIG_FILE_NAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            key: value
            for key, value in {
                "url": self.url,
                "dirname": self.dirname,
                "name": self.name,
            }.items()
            if value is not None
        }

        with open(config_path, "w") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "GeneratorConfig":
        """Объединение с аргументами командной строки"""
        return GeneratorConfig(
            url=args.url or self.url,
            dirname=args.dirname or self.dirname,
            name=getattr(args, "name", None) or self.name,
        )
