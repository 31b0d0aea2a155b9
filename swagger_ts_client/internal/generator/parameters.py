"""
Компиляция параметров операций: path, query и body
"""

from typing import List

from ..types.serialized import (
    SerializedType,
    SerializedParameter,
    SerializedPathParameter,
    EMPTY_REFS,
    OPTION_DEPENDENCIES,
    intercalate_serialized,
)
from ..types.swagger import ItemsObject, ParameterObject
from ..utils.naming import serialize_property_name
from .schema import BOOLEAN, NUMBER, STRING, serialize_schema_object, to_object_type

PARAMETER_SEPARATOR = SerializedParameter("; ", ", ")

_PRIMITIVES = {
    "string": STRING,
    "boolean": BOOLEAN,
    "integer": NUMBER,
    "number": NUMBER,
}


def serialize_non_array_items(items: ItemsObject) -> SerializedType:
    return _PRIMITIVES[items.type]


def serialize_parameter(parameter: ParameterObject) -> SerializedParameter:
    """Тип и кодек path/query параметра (без обертки Option)"""
    is_required = parameter.location == "path" or parameter.required

    if parameter.type == "array":
        items = serialize_non_array_items(parameter.items)
        return SerializedParameter(
            f"Array<{items.type}>",
            f"t.array({items.io})",
            items.dependencies,
            items.refs,
            is_required,
        )

    if parameter.type not in _PRIMITIVES:
        raise ValueError(
            f"Unsupported type {parameter.type!r} for parameter '{parameter.name}'"
        )

    primitive = _PRIMITIVES[parameter.type]
    return SerializedParameter(
        primitive.type,
        primitive.io,
        primitive.dependencies,
        primitive.refs,
        is_required,
    )


def serialize_path_parameter(parameter: ParameterObject) -> SerializedPathParameter:
    serialized = serialize_parameter(parameter)
    return SerializedPathParameter(
        f"{parameter.name}: {serialized.type}",
        f"{serialized.io}.encode({parameter.name})",
        serialized.dependencies,
        serialized.refs,
        True,
        parameter.name,
    )


def serialize_path_parameter_description(parameter: ParameterObject) -> str:
    line = f"@param {{ {serialize_parameter(parameter).type} }} {parameter.name}"
    if parameter.description:
        line += f" - {parameter.description}"
    return line


def serialize_parameters_description(
    query: List[ParameterObject], body: List[ParameterObject]
) -> str:
    """Строка JSDoc про объект parameters ('' если query/body параметров нет)"""
    parameters = query + body
    if not parameters:
        return ""
    if has_required_parameters(parameters):
        return "@param { object } parameters"
    return "@param { object } [parameters]"


def has_required_parameters(parameters: List[ParameterObject]) -> bool:
    return any(p.required for p in parameters)


def serialize_required(
    name: str, type: str, io: str, is_required: bool
) -> SerializedType:
    key = serialize_property_name(name)
    if is_required:
        return SerializedType(f"{key}: {type}", f"{key}: {io}")
    return SerializedType(
        f"{key}: Option<{type}>",
        f"{key}: createOptionFromNullable({io})",
        OPTION_DEPENDENCIES,
        EMPTY_REFS,
    )


def serialize_query_parameter(parameter: ParameterObject) -> SerializedParameter:
    serialized = serialize_parameter(parameter)
    required = serialize_required(
        parameter.name, serialized.type, serialized.io, parameter.required
    )
    return SerializedParameter(
        required.type,
        required.io,
        serialized.dependencies + required.dependencies,
        required.refs,
        serialized.is_required or parameter.required,
    )


def serialize_body_parameter(
    parameter: ParameterObject, relative: str, root_name: str
) -> SerializedParameter:
    serialized = serialize_schema_object(parameter.body_schema, relative, root_name)
    required = serialize_required(
        parameter.name, serialized.type, serialized.io, parameter.required
    )
    return SerializedParameter(
        required.type,
        required.io,
        serialized.dependencies + required.dependencies,
        required.refs,
        parameter.required,
    )


def _to_parameters_object(
    parameters: List[SerializedParameter],
) -> SerializedParameter:
    # Наборы параметров операции никогда не рекурсивны
    intercalated = intercalate_serialized(PARAMETER_SEPARATOR, parameters)
    serialized = to_object_type(intercalated, None)
    return SerializedParameter(
        serialized.type,
        serialized.io,
        serialized.dependencies,
        serialized.refs,
        intercalated.is_required,
    )


def serialize_query_parameters(
    parameters: List[ParameterObject],
) -> SerializedParameter:
    return _to_parameters_object([serialize_query_parameter(p) for p in parameters])


def serialize_body_parameters(
    parameters: List[ParameterObject], relative: str, root_name: str
) -> SerializedParameter:
    return _to_parameters_object(
        [serialize_body_parameter(p, relative, root_name) for p in parameters]
    )


def serialize_url(url: str, path_parameters: List[SerializedPathParameter]) -> str:
    """Шаблонная строка URL с подстановкой закодированных path параметров"""
    result = url
    for parameter in path_parameters:
        result = result.replace(
            f"{{{parameter.name}}}",
            f"${{encodeURIComponent({parameter.io}.toString())}}",
        )
    return f"`{result}`"
