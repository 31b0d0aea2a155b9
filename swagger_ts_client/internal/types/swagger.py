"""
Модели подмножества Swagger 2.0, с которым работает генератор
"""

from typing import Optional, Union, Literal, Dict, List, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


PrimitiveKind = Literal["string", "boolean", "integer", "number"]
SchemaKind = Literal["string", "boolean", "integer", "number", "array", "object"]
ParameterLocation = Literal["path", "query", "body", "header", "formData"]
HttpMethod = Literal["GET", "PUT", "POST", "DELETE", "OPTIONS", "HEAD", "PATCH"]


class SwaggerModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SchemaObject(SwaggerModel):
    """Узел схемы: примитив, enum, массив, объект или локальная ссылка"""

    type: Optional[SchemaKind] = None
    ref: Optional[str] = Field(default=None, alias="$ref")
    format: Optional[str] = None
    enum: Optional[List[Union[bool, int, float, str]]] = None
    description: Optional[str] = None

    items: Optional["SchemaObject"] = None
    properties: Optional[Dict[str, "SchemaObject"]] = None
    required: Optional[List[str]] = None
    additional_properties: Optional["SchemaObject"] = Field(
        default=None, alias="additionalProperties"
    )

    @model_validator(mode="before")
    @classmethod
    def infer_object_type(cls, data: Any) -> Any:
        # Объект без явного type, но со свойствами
        if (
            isinstance(data, dict)
            and "type" not in data
            and "$ref" not in data
            and ("properties" in data or "additionalProperties" in data)
        ):
            data = {**data, "type": "object"}
        return data

    @field_validator("additional_properties", mode="before")
    @classmethod
    def drop_boolean_additional_properties(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return None
        return value

    @model_validator(mode="after")
    def check_shape(self) -> "SchemaObject":
        if self.type is None and self.ref is None:
            raise ValueError("schema must declare either 'type' or '$ref'")
        if self.type == "array" and self.items is None:
            raise ValueError("array schema must declare 'items'")
        return self


SchemaObject.model_rebuild()


class ItemsObject(SwaggerModel):
    """Элементы массива в path/query параметрах (без вложенных массивов)"""

    type: PrimitiveKind
    format: Optional[str] = None


class ParameterObject(SwaggerModel):
    name: str
    location: ParameterLocation = Field(alias="in")
    description: Optional[str] = None
    required: bool = False

    type: Optional[Literal["string", "boolean", "integer", "number", "array", "file"]] = None
    items: Optional[ItemsObject] = None
    body_schema: Optional[SchemaObject] = Field(default=None, alias="schema")

    @model_validator(mode="after")
    def check_shape(self) -> "ParameterObject":
        if self.location == "body":
            if self.body_schema is None:
                raise ValueError(f"body parameter '{self.name}' must declare 'schema'")
        elif self.type is None:
            raise ValueError(f"parameter '{self.name}' must declare 'type'")
        elif self.type == "array" and self.items is None:
            raise ValueError(f"array parameter '{self.name}' must declare 'items'")
        return self


class ResponseObject(SwaggerModel):
    description: str = ""
    response_schema: Optional[SchemaObject] = Field(default=None, alias="schema")


class OperationObject(SwaggerModel):
    tags: List[str] = []
    summary: Optional[str] = None
    description: Optional[str] = None
    operation_id: Optional[str] = Field(default=None, alias="operationId")
    parameters: List[ParameterObject] = []
    responses: Dict[str, ResponseObject] = {}
    deprecated: bool = False

    @field_validator("responses", mode="before")
    @classmethod
    def stringify_status_codes(cls, value: Any) -> Any:
        # Коды ответов могут прийти как int
        if isinstance(value, dict):
            return {str(code): response for code, response in value.items()}
        return value


class PathItemObject(SwaggerModel):
    get: Optional[OperationObject] = None
    put: Optional[OperationObject] = None
    post: Optional[OperationObject] = None
    delete: Optional[OperationObject] = None
    options: Optional[OperationObject] = None
    head: Optional[OperationObject] = None
    patch: Optional[OperationObject] = None

    def operations(self) -> List[tuple]:
        """Операции пути в фиксированном порядке методов: (METHOD, operation)"""
        pairs = [
            ("GET", self.get),
            ("PUT", self.put),
            ("POST", self.post),
            ("DELETE", self.delete),
            ("OPTIONS", self.options),
            ("HEAD", self.head),
            ("PATCH", self.patch),
        ]
        return [(method, operation) for method, operation in pairs if operation is not None]


class InfoObject(SwaggerModel):
    title: str = ""
    version: str = ""
    description: Optional[str] = None


class SwaggerObject(SwaggerModel):
    swagger: str = "2.0"
    info: InfoObject = InfoObject()
    base_path: Optional[str] = Field(default=None, alias="basePath")
    paths: Dict[str, PathItemObject] = {}
    definitions: Optional[Dict[str, SchemaObject]] = None
