"""Группировка путей по тегам и разбор параметров операций"""

from collections import OrderedDict
from typing import Dict, List

from ..types.swagger import OperationObject, ParameterObject, PathItemObject
from .naming import pascal_case

DEFAULT_TAG = "Unknown"


def get_path_tag(path_item: PathItemObject) -> str:
    """Первый тег первой операции пути с тегами в PascalCase"""
    for _, operation in path_item.operations():
        if operation.tags and pascal_case(operation.tags[0]):
            return pascal_case(operation.tags[0])
    return DEFAULT_TAG


def group_paths_by_tag(
    paths: Dict[str, PathItemObject]
) -> Dict[str, Dict[str, PathItemObject]]:
    grouped: "OrderedDict[str, Dict[str, PathItemObject]]" = OrderedDict()
    for url, path_item in paths.items():
        grouped.setdefault(get_path_tag(path_item), OrderedDict())[url] = path_item
    return grouped


def _parameters_in(operation: OperationObject, location: str) -> List[ParameterObject]:
    return [p for p in operation.parameters if p.location == location]


def get_operation_parameters_in_path(operation: OperationObject) -> List[ParameterObject]:
    return _parameters_in(operation, "path")


def get_operation_parameters_in_query(operation: OperationObject) -> List[ParameterObject]:
    return _parameters_in(operation, "query")


def get_operation_parameters_in_body(operation: OperationObject) -> List[ParameterObject]:
    return _parameters_in(operation, "body")
