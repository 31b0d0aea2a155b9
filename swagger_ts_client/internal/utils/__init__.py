"""Утилиты для генератора"""

from .naming import (
    decapitalize,
    pascal_case,
    get_io_name,
    get_ref_name,
    serialize_jsdoc,
    serialize_literal,
    serialize_property_name,
)
from .paths import (
    group_paths_by_tag,
    get_operation_parameters_in_path,
    get_operation_parameters_in_query,
    get_operation_parameters_in_body,
)

__all__ = [
    "decapitalize",
    "pascal_case",
    "get_io_name",
    "get_ref_name",
    "serialize_jsdoc",
    "serialize_literal",
    "serialize_property_name",
    "group_paths_by_tag",
    "get_operation_parameters_in_path",
    "get_operation_parameters_in_query",
    "get_operation_parameters_in_body",
]
