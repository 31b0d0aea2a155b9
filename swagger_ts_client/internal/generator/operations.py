"""
Компиляция операций API в методы контроллера
"""

from typing import Dict, List, Optional

from ..types.serialized import (
    Dependency,
    SerializedType,
    EMPTY_REFS,
    fold_serialized,
    intercalate_serialized,
    uniq_serialized,
)
from ..types.swagger import HttpMethod, OperationObject, PathItemObject, ResponseObject
from ..utils.naming import serialize_jsdoc
from ..utils.paths import (
    get_operation_parameters_in_body,
    get_operation_parameters_in_path,
    get_operation_parameters_in_query,
)
from .parameters import (
    serialize_body_parameters,
    serialize_parameters_description,
    serialize_path_parameter,
    serialize_path_parameter_description,
    serialize_query_parameters,
    serialize_url,
)
from .schema import serialize_schema_object

DEFINITIONS_RELATIVE = "../definitions/"
SUCCESSFUL_CODES = ("200", "default")

VOID = SerializedType("void", "t.void")
UNION_SEPARATOR = SerializedType(" | ", ", ")

OPERATION_DEPENDENCIES = (
    Dependency("map", "rxjs/operators"),
    Dependency("fromEither", "@devexperts/remote-data-ts"),
    Dependency("ResponseValidationError", "../client/client"),
    Dependency("LiveData", "@devexperts/rx-utils/dist/rd/live-data.utils"),
)


def get_operation_name(operation: OperationObject, http_method: str) -> str:
    """
    Имя метода: operationId или имя HTTP метода.

    Совпадения имен внутри одного контроллера не разрешаются.
    """
    return operation.operation_id or http_method


def serialize_operation_response(
    response: ResponseObject, relative: str, root_name: str
) -> Optional[SerializedType]:
    if response.response_schema is None:
        return None
    return serialize_schema_object(response.response_schema, relative, root_name)


def serialize_operation_responses(
    responses: Dict[str, ResponseObject], relative: str, root_name: str
) -> SerializedType:
    """Объединение успешных ответов (200 и default) без структурных дублей"""
    serialized = []
    for code in SUCCESSFUL_CODES:
        if code not in responses:
            continue
        result = serialize_operation_response(responses[code], relative, root_name)
        if result is not None:
            serialized.append(result)

    serialized = uniq_serialized(serialized)
    if not serialized:
        return VOID

    combined = intercalate_serialized(UNION_SEPARATOR, serialized)
    return SerializedType(
        combined.type,
        f"t.union([{combined.io}])" if len(serialized) > 1 else combined.io,
        combined.dependencies,
        EMPTY_REFS,
    )


def serialize_operation_object(
    url: str, method: HttpMethod, operation: OperationObject, root_name: str
) -> SerializedType:
    relative = DEFINITIONS_RELATIVE

    path_parameters = get_operation_parameters_in_path(operation)
    query_parameters = get_operation_parameters_in_query(operation)
    body_parameters = get_operation_parameters_in_body(operation)

    jsdoc_lines: List[str] = []
    if operation.deprecated:
        jsdoc_lines.append("@deprecated")
    if operation.summary:
        jsdoc_lines.append(operation.summary)
    jsdoc_lines.extend(serialize_path_parameter_description(p) for p in path_parameters)
    params_summary = serialize_parameters_description(query_parameters, body_parameters)
    if params_summary:
        jsdoc_lines.append(params_summary)
    jsdoc = serialize_jsdoc(jsdoc_lines)

    serialized_path_parameters = [serialize_path_parameter(p) for p in path_parameters]

    has_query_parameters = len(query_parameters) > 0
    has_body_parameters = len(body_parameters) > 0
    has_parameters = has_query_parameters or has_body_parameters

    serialized_responses = serialize_operation_responses(
        operation.responses, relative, root_name
    )
    operation_name = get_operation_name(operation, method)
    serialized_url = serialize_url(url, serialized_path_parameters)

    serialized_query_parameters = serialize_query_parameters(query_parameters)
    serialized_body_parameters = serialize_body_parameters(
        body_parameters, relative, root_name
    )

    args_names = [p.name for p in path_parameters]
    args_types = [p.type for p in serialized_path_parameters]
    if has_parameters:
        fields = []
        if has_query_parameters:
            fields.append(f"query: {serialized_query_parameters.type};")
        if has_body_parameters:
            fields.append(f"body: {serialized_body_parameters.type};")
        args_names.append("parameters")
        args_types.append(f"parameters: {{ {' '.join(fields)} }}")

    type_lines = [jsdoc] if jsdoc else []
    type_lines.append(
        f"readonly {operation_name}: ({', '.join(args_types)}) => "
        f"LiveData<Error, {serialized_responses.type}>;"
    )

    body_lines = []
    if has_query_parameters:
        body_lines.append(
            f"\tconst query = {serialized_query_parameters.io}.encode(parameters.query);"
        )
    if has_body_parameters:
        body_lines.append(
            f"\tconst body = {serialized_body_parameters.io}.encode(parameters.body);"
        )
    if body_lines:
        body_lines.append("")

    request_lines = [f"\t\t\turl: {serialized_url},", f"\t\t\tmethod: '{method}',"]
    if has_query_parameters:
        request_lines.append("\t\t\tquery,")
    if has_body_parameters:
        request_lines.append("\t\t\tbody,")

    io_lines = [
        f"{operation_name}: ({', '.join(args_names)}) => {{",
        *body_lines,
        "\treturn e.apiClient",
        "\t\t.request({",
        *request_lines,
        "\t\t})",
        "\t\t.pipe(",
        "\t\t\tmap(data =>",
        "\t\t\t\tdata.chain(value =>",
        f"\t\t\t\t\tfromEither({serialized_responses.io}.decode(value).mapLeft(ResponseValidationError.create)),",
        "\t\t\t\t),",
        "\t\t\t),",
        "\t\t);",
        "},",
    ]

    dependencies = (
        OPERATION_DEPENDENCIES
        + serialized_responses.dependencies
        + serialized_query_parameters.dependencies
        + serialized_body_parameters.dependencies
        + sum((p.dependencies for p in serialized_path_parameters), ())
    )

    return SerializedType(
        "\n".join(type_lines) + "\n",
        "\n".join(io_lines) + "\n",
        dependencies,
        EMPTY_REFS,
    )


def serialize_path(url: str, item: PathItemObject, root_name: str) -> SerializedType:
    """Все операции одного пути; путь без операций дает пустой результат"""
    return fold_serialized(
        serialize_operation_object(url, method, operation, root_name)
        for method, operation in item.operations()
    )
