"""
Тесты командной строки
"""

import json

import pytest

from swagger_ts_client import generate_client
from swagger_ts_client.cli import generate, load_spec, save_project_files


SPEC = {
    "swagger": "2.0",
    "info": {"title": "Pets", "version": "1.0.0"},
    "definitions": {
        "Pet": {
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "required": ["name"],
        }
    },
    "paths": {
        "/pets": {
            "get": {
                "tags": ["pets"],
                "operationId": "listPets",
                "responses": {
                    "200": {
                        "description": "OK",
                        "schema": {"type": "array", "items": {"$ref": "#/definitions/Pet"}},
                    }
                },
            }
        }
    },
}


class TestCli:
    """Тесты загрузки спецификации и сохранения файлов"""

    def test_load_spec_from_file(self, tmp_path):
        spec_path = tmp_path / "swagger.json"
        spec_path.write_text(json.dumps(SPEC), encoding="utf-8")

        assert load_spec(str(spec_path)) == SPEC

    def test_load_spec_missing_file(self, tmp_path):
        with pytest.raises(ValueError):
            load_spec(str(tmp_path / "missing.json"))

    def test_load_spec_broken_file(self, tmp_path):
        spec_path = tmp_path / "swagger.json"
        spec_path.write_text("{", encoding="utf-8")

        with pytest.raises(ValueError):
            load_spec(str(spec_path))

    def test_save_project_files(self, tmp_path):
        project = generate_client(SPEC)

        save_project_files(project, str(tmp_path / "client"))

        assert (tmp_path / "client" / "client" / "client.ts").exists()
        assert (tmp_path / "client" / "definitions" / "Pet.ts").read_text(
            encoding="utf-8"
        ) == str(project.get_file("definitions/Pet.ts"))
        assert (tmp_path / "client" / "controllers" / "PetsController.ts").exists()

    def test_generate_command(self, tmp_path, monkeypatch):
        """Тест полного запуска команды"""
        spec_path = tmp_path / "swagger.json"
        spec_path.write_text(json.dumps(SPEC), encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        generate(["--url", str(spec_path), "--dirname", "out"])

        controller = tmp_path / "out" / "controllers" / "PetsController.ts"
        assert "readonly listPets: () => LiveData<Error, Array<Pet>>;" in controller.read_text(
            encoding="utf-8"
        )

    def test_generate_without_url(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(SystemExit) as exc_info:
            generate([])

        assert exc_info.value.code == 1

    def test_init_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        generate(["--url", "swagger.json", "--init-config"])

        assert 'url = "swagger.json"' in (tmp_path / "swagger.toml").read_text()
