import argparse
import json
import logging
import os
import sys
from typing import Any, Dict

from swagger_ts_client.internal.types.models import Project
from swagger_ts_client.generator import ApiClientGenerator
from swagger_ts_client.config import GeneratorConfig

import httpx


def load_spec(url: str) -> Dict[str, Any]:
    """Загрузка Swagger спецификации по URL или из локального файла"""
    if url.startswith(("http://", "https://")):
        try:
            response = httpx.get(url, follow_redirects=True)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise ValueError(f"Не удалось загрузить спецификацию из {url}: {e}") from e

    if os.path.exists(url):
        try:
            with open(url, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise ValueError(f"Не удалось прочитать спецификацию {url}: {e}") from e

    raise ValueError(
        f"Не удалось загрузить спецификацию из {url}. Проверьте URL или путь к файлу."
    )


def _generate_client_core(config: GeneratorConfig) -> Project:
    """Ядро генерации клиента - только генерация без сохранения"""
    if not config.url:
        raise ValueError("URL не указан в конфигурации")

    print(f"🚀 Генерация клиента из {config.url}")

    print("📥 Загрузка Swagger спецификации...")
    swagger_spec = load_spec(config.url)

    print("⚙️ Генерация кода...")
    generator = ApiClientGenerator(swagger_spec, name=config.name or "api")
    return generator.generate()


def save_project_files(project: Project, target_path: str):
    """Сохранение файлов проекта"""
    print(f"💾 Сохранение {len(project.files)} файлов...")

    for code_file in project.files:
        path = os.path.join(target_path, code_file.file_name)
        os.makedirs(os.path.dirname(path), exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(str(code_file))

    print("✅ Генерация завершена успешно!")
    print(f"📦 Клиент создан в: {os.path.abspath(target_path)}")


def _generate_client(config: GeneratorConfig, work_dir: str):
    """Генерация клиента в директорию из конфигурации"""
    if not config.dirname:
        raise ValueError("Директория не указана в конфигурации")

    project = _generate_client_core(config)
    save_project_files(project, os.path.join(work_dir, config.dirname))


def resolve_config(args) -> GeneratorConfig:
    """Итоговая конфигурация: аргументы командной строки поверх swagger.toml"""
    file_config = GeneratorConfig.from_file(search_dir=args.dirname)

    if file_config:
        print("📋 Используется конфиг swagger.toml")
        return file_config.merge_with_args(args)

    return GeneratorConfig(
        url=args.url,
        dirname=args.dirname or "api_client",
        name=args.name or "api",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Генерация TypeScript клиента из Swagger"
    )
    parser.add_argument("--url", type=str, help="URL или путь к Swagger спецификации")
    parser.add_argument("--dirname", type=str, help="Директория для генерации клиента")
    parser.add_argument("--name", type=str, help="Имя генерируемого проекта")
    parser.add_argument(
        "--init-config", action="store_true", help="Создать конфиг файл swagger.toml"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Подробный вывод генератора"
    )
    return parser


def generate(argv=None):
    """Универсальная команда генерации TypeScript клиента"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Инициализация конфига
    if args.init_config:
        config = GeneratorConfig(
            url=args.url,
            dirname=args.dirname or "api_client",
            name=args.name or "api",
        )
        config.save_to_file()
        print("✅ Создан конфиг файл swagger.toml")
        return

    final_config = resolve_config(args)

    if not final_config.url:
        print("❌ Ошибка: URL не указан ни в конфиге, ни в аргументах")
        sys.exit(1)

    print(f"📁 Генерация в папку: {final_config.dirname}")

    try:
        _generate_client(final_config, ".")
    except Exception as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)


if __name__ == "__main__":
    generate()
