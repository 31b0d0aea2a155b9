"""
Тесты для системы конфигурации
"""

import os
import tempfile
from swagger_ts_client.config import GeneratorConfig


class TestGeneratorConfig:
    """Тесты конфигурации генератора"""

    def test_config_creation(self):
        """Тест создания конфигурации"""
        config = GeneratorConfig(url="http://localhost:8000/swagger.json", dirname="ts_client")

        assert config.url == "http://localhost:8000/swagger.json"
        assert config.dirname == "ts_client"
        assert config.name is None

    def test_config_save_and_load(self):
        """Тест сохранения и загрузки конфигурации"""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = os.path.join(temp_dir, "test_swagger.toml")

            original_config = GeneratorConfig(
                url="http://api.example.com/swagger.json",
                dirname="example_client",
                name="example",
            )
            original_config.save_to_file(config_path)

            loaded_config = GeneratorConfig.from_file(config_path)

            assert loaded_config is not None
            assert loaded_config.url == "http://api.example.com/swagger.json"
            assert loaded_config.dirname == "example_client"
            assert loaded_config.name == "example"

    def test_config_search_dir(self):
        """Тест поиска swagger.toml в указанной директории"""
        with tempfile.TemporaryDirectory() as temp_dir:
            GeneratorConfig(url="spec.json").save_to_file(
                os.path.join(temp_dir, "swagger.toml")
            )

            loaded_config = GeneratorConfig.from_file(search_dir=temp_dir)

            assert loaded_config is not None
            assert loaded_config.url == "spec.json"
            assert loaded_config.dirname == "api_client"
            assert loaded_config.name == "api"

    def test_config_file_not_exists(self):
        """Тест загрузки несуществующего конфига"""
        config = GeneratorConfig.from_file("nonexistent.toml")
        assert config is None

    def test_broken_config_file(self):
        """Тест загрузки поврежденного конфига"""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = os.path.join(temp_dir, "swagger.toml")
            with open(config_path, "w") as f:
                f.write("url = ")

            assert GeneratorConfig.from_file(config_path) is None

    def test_config_merge_with_args(self):
        """Тест объединения конфига с аргументами"""
        config = GeneratorConfig(url="http://localhost:8000", dirname="original_client")

        class MockArgs:
            def __init__(self):
                self.url = "http://api.new.com"
                self.dirname = None
                self.name = "new"

        merged = config.merge_with_args(MockArgs())

        assert merged.url == "http://api.new.com"
        assert merged.dirname == "original_client"
        assert merged.name == "new"

    def test_default_values(self):
        """Тест значений по умолчанию"""
        config = GeneratorConfig()

        assert config.url is None
        assert config.dirname is None
        assert config.name is None
