"""Утилиты для работы с именами в генерируемом TypeScript коде"""

import re
from typing import List, Union

IO_SUFFIX = "IO"
DEFINITIONS_REF_PREFIX = re.compile(r"^#/definitions/")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def get_io_name(name: str) -> str:
    """
    Имя io-ts кодека для типа.

    Examples:
        >>> get_io_name("User")
        'UserIO'
    """
    return f"{name}{IO_SUFFIX}"


def get_ref_name(ref: str) -> str:
    """
    Имя определения из локальной ссылки.

    Examples:
        >>> get_ref_name("#/definitions/User")
        'User'
    """
    return DEFINITIONS_REF_PREFIX.sub("", ref)


def decapitalize(name: str) -> str:
    return name[:1].lower() + name[1:]


def serialize_property_name(name: str) -> str:
    """Ключ свойства объекта: невалидные идентификаторы берутся в кавычки"""
    if _IDENTIFIER.match(name):
        return name
    escaped = name.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def serialize_literal(value: Union[str, int, float, bool]) -> str:
    """Строковый литерал для значения enum"""
    if isinstance(value, bool):
        value = "true" if value else "false"
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def serialize_jsdoc(lines: List[str]) -> str:
    """
    JSDoc блок; "*/" внутри строк экранируется, чтобы не закрыть комментарий.

    Examples:
        >>> print(serialize_jsdoc(["a/*/b */ c"]))
        /**
         * a/*\\/b *\\/ c
         */
    """
    if not lines:
        return ""
    escaped = [line.replace("*/", "*\\/") for line in lines]
    return "\n".join(["/**", *[f" * {line}" for line in escaped], " */"])


def pascal_case(name: str) -> str:
    """
    Буквы любого алфавита сохраняются, разделители удаляются.

    Examples:
        >>> pascal_case("user accounts")
        'UserAccounts'
        >>> pascal_case("petStore")
        'PetStore'
        >>> pascal_case("группы пользователей")
        'ГруппыПользователей'
    """
    parts = re.split(r"[\W_]+", name)
    return "".join(part[:1].upper() + part[1:] for part in parts if part)
