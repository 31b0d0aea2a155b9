"""
Главный модуль генератора - чистый интерфейс
"""

from typing import Dict, Any

from .internal.parser.swagger import SwaggerParser
from .internal.types.models import Project


class ApiClientGenerator:
    """Чистый интерфейс для генерации TypeScript клиентов"""

    def __init__(self, swagger_spec: Dict[str, Any], name: str = "api"):
        self.parser = SwaggerParser(swagger_spec, name)

    def generate(self) -> Project:
        """Генерация проекта клиента"""
        return self.parser.parse()


def generate_client(swagger_spec: Dict[str, Any], name: str = "api") -> Project:
    """Создание TypeScript клиента из Swagger спецификации"""
    generator = ApiClientGenerator(swagger_spec, name)
    return generator.generate()
