from typing import Dict, Any

from ..types.models import Project
from ..types.swagger import SwaggerObject
from ..generator.client_generator import ClientGenerator


class SwaggerParser:
    """Парсер Swagger спецификации"""

    def __init__(self, swagger_dict: Dict[str, Any], name: str = "api"):
        self.swagger_dict = swagger_dict
        self.name = name

    def load(self) -> SwaggerObject:
        """Разбор словаря в модели (ValidationError для некорректной схемы)"""
        return SwaggerObject.model_validate(self.swagger_dict)

    def parse(self) -> Project:
        """Парсинг Swagger в Project структуру"""
        generator = ClientGenerator(self.load(), self.name)
        return generator.generate()
