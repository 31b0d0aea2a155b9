"""
Компиляция узлов схемы в пары (TypeScript тип, io-ts кодек)

Каждая функция возвращает SerializedType, в котором `type` и `io`
описывают одну и ту же форму. Рекурсия определяется только по имени
корневого определения, сами ссылки никогда не раскрываются.
"""

from typing import List, Optional, Union

from ..types.serialized import (
    Dependency,
    SerializedType,
    EMPTY_DEPENDENCIES,
    EMPTY_REFS,
    OPTION_DEPENDENCIES,
    intercalate_serialized,
)
from ..types.swagger import SchemaObject
from ..utils.naming import (
    get_io_name,
    get_ref_name,
    serialize_literal,
    serialize_property_name,
)

PROPERTY_SEPARATOR = SerializedType(" ", " ")

STRING = SerializedType("string", "t.string")
BOOLEAN = SerializedType("boolean", "t.boolean")
NUMBER = SerializedType("number", "t.number")
DATE_TIME = SerializedType(
    "Date",
    "DateFromISOString",
    (Dependency("DateFromISOString", "io-ts-types"),),
)

STRING_FORMATS = {
    "date-time": DATE_TIME,
}


def serialize_schema_object(
    schema: SchemaObject, relative: str, root_name: str
) -> SerializedType:
    if schema.ref is not None:
        return serialize_ref(schema.ref, relative, root_name)

    if schema.type == "string":
        return serialize_string(schema)
    if schema.type == "boolean":
        return BOOLEAN
    if schema.type in ("integer", "number"):
        return NUMBER
    if schema.type == "array":
        result = serialize_schema_object(schema.items, relative, root_name)
        return SerializedType(
            f"Array<{result.type}>",
            f"t.array({result.io})",
            result.dependencies,
            result.refs,
        )
    if schema.type == "object":
        return serialize_object(schema, relative, root_name)

    raise ValueError(f"Unsupported schema type: {schema.type!r}")


def serialize_string(schema: SchemaObject) -> SerializedType:
    # enum важнее format
    if schema.enum:
        return serialize_enum(schema.enum)
    if schema.format is not None and schema.format in STRING_FORMATS:
        return STRING_FORMATS[schema.format]
    return STRING


def serialize_enum(values: List[Union[str, int, float, bool]]) -> SerializedType:
    literals = [serialize_literal(value) for value in values]
    return SerializedType(
        " | ".join(literals),
        f"t.union([{', '.join(f't.literal({literal})' for literal in literals)}])",
    )


def serialize_ref(ref: str, relative: str, root_name: str) -> SerializedType:
    name = get_ref_name(ref)
    io = get_io_name(name)
    is_recursive = root_name in (name, io)
    dependencies = (
        EMPTY_DEPENDENCIES
        if is_recursive
        else (
            Dependency(name, f"{relative}{name}"),
            Dependency(io, f"{relative}{name}"),
        )
    )
    return SerializedType(name, io, dependencies, (name,))


def serialize_additional_properties(
    schema: SchemaObject, relative: str, root_name: str
) -> SerializedType:
    additional = serialize_schema_object(schema, relative, root_name)
    return SerializedType(
        f"{{ [key: string]: {additional.type} }}",
        f"t.dictionary(t.string, {additional.io})",
        additional.dependencies,
        additional.refs,
    )


def serialize_object(
    schema: SchemaObject, relative: str, root_name: str
) -> SerializedType:
    if schema.additional_properties is not None:
        return serialize_additional_properties(
            schema.additional_properties, relative, root_name
        )

    if schema.properties is None:
        return to_object_type(SerializedType.empty(), None)

    required = schema.required or []
    fields = [
        serialize_property(
            name, value, name in required, relative, root_name
        )
        for name, value in schema.properties.items()
    ]
    serialized = intercalate_serialized(PROPERTY_SEPARATOR, fields)
    return to_object_type(
        serialized, root_name if root_name in serialized.refs else None
    )


def serialize_property(
    name: str,
    schema: SchemaObject,
    is_required: bool,
    relative: str,
    root_name: str,
) -> SerializedType:
    field = serialize_schema_object(schema, relative, root_name)
    key = serialize_property_name(name)
    if is_required:
        return SerializedType(
            f"{key}: {field.type};",
            f"{key}: {field.io},",
            field.dependencies,
            field.refs,
        )
    return SerializedType(
        f"{key}: Option<{field.type}>;",
        f"{key}: createOptionFromNullable({field.io}),",
        field.dependencies + OPTION_DEPENDENCIES,
        field.refs,
    )


def to_object_type(
    serialized: SerializedType, recursion: Optional[str]
) -> SerializedType:
    """
    Оборачивает поля в объектный тип и t.type кодек.

    Если задан `recursion`, кодек строится через t.recursion с именем
    кодека корневого определения, чтобы не раскрывать ссылку бесконечно.
    """
    io = f"t.type({{ {serialized.io} }})"
    if recursion is not None:
        recursion_io = get_io_name(recursion)
        io = f"t.recursion<{recursion}>('{recursion_io}', {recursion_io} => {io})"

    return SerializedType(
        f"{{ {serialized.type} }}",
        io,
        serialized.dependencies,
        EMPTY_REFS,
    )
