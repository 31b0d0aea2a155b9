import logging
import re
from collections import Counter
from typing import Dict

from ..types.models import CodeBlock, Project
from ..types.serialized import Dependency, fold_serialized, serialize_dependencies
from ..types.swagger import PathItemObject, SchemaObject, SwaggerObject
from ..utils.naming import decapitalize, get_io_name
from ..utils.paths import group_paths_by_tag
from .operations import serialize_path
from .schema import serialize_schema_object
from .templates import templates

logger = logging.getLogger(__name__)

CONTROLLER_DEPENDENCIES = (
    Dependency("asks", "fp-ts/lib/Reader"),
    Dependency("TAPIClient", "../client/client"),
)

_METHOD_NAME = re.compile(r"^\s*readonly (\S+):", re.MULTILINE)


class ClientGenerator:
    """Генератор TypeScript клиента из Swagger"""

    def __init__(self, swagger_object: SwaggerObject, name: str = "api"):
        self.swagger_object = swagger_object
        self.project = Project(name=name)

    def generate(self) -> Project:
        """Основная генерация"""
        self._create_base_files()
        self._generate_definitions()
        self._generate_controllers()
        return self.project

    def _create_base_files(self):
        """Создание фиксированного клиента"""
        self.project.add_file("client/client.ts").add_code_block(
            CodeBlock(code=templates.client)
        )

    def _generate_definitions(self):
        """Файл на каждое определение из definitions"""
        definitions = self.swagger_object.definitions
        if definitions is None:
            return

        for name, definition in definitions.items():
            self._generate_definition(name, definition)

    def _generate_definition(self, name: str, definition: SchemaObject):
        serialized = serialize_schema_object(definition, "./", name)
        logger.debug(
            "Definition %s: %d dependencies", name, len(serialized.dependencies)
        )

        definition_file = self.project.add_file(f"definitions/{name}.ts")
        definition_file.add_import(templates.io_ts_import)
        definition_file.add_import(serialize_dependencies(serialized.dependencies))
        definition_file.add_code_block(
            templates.definition.format(
                name=name,
                io_name=get_io_name(name),
                type=serialized.type,
                io=serialized.io,
            )
        )

    def _generate_controllers(self):
        """Файл контроллера на каждую группу путей по тегу"""
        for tag, group in group_paths_by_tag(self.swagger_object.paths).items():
            self._generate_controller(tag, group)

    def _generate_controller(self, tag: str, group: Dict[str, PathItemObject]):
        group_name = f"{tag}Controller"

        serialized = fold_serialized(
            serialize_path(url, item, group_name) for url, item in group.items()
        )
        types = serialized.type
        ios = serialized.io
        dependencies = serialized.dependencies + CONTROLLER_DEPENDENCIES

        self._warn_duplicated_methods(group_name, types)
        logger.debug("Controller %s: %d paths", group_name, len(group))

        controller_file = self.project.add_file(f"controllers/{group_name}.ts")
        controller_file.add_import(templates.io_ts_import)
        controller_file.add_import(serialize_dependencies(dependencies))
        controller_file.add_code_block(
            templates.controller.format(
                name=group_name,
                factory_name=decapitalize(group_name),
                type=self._indent(types),
                io=self._indent(ios),
            )
        )

    @staticmethod
    def _warn_duplicated_methods(group_name: str, types: str):
        # Имена методов не переименовываются: совпадения только логируются
        counts = Counter(_METHOD_NAME.findall(types))
        for method_name, count in counts.items():
            if count > 1:
                logger.warning(
                    "Controller %s declares method '%s' %d times",
                    group_name,
                    method_name,
                    count,
                )

    @staticmethod
    def _indent(code: str) -> str:
        return "".join(
            ("\t" + line if line.strip() else line) + "\n"
            for line in code.splitlines()
        )
