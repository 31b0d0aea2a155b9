"""
Результаты компиляции схем: пара (тип, кодек) вместе с зависимостями
"""

from collections import OrderedDict
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class Dependency:
    """Идентификатор `name`, импортируемый из модуля `path`"""

    name: str
    path: str


@dataclass(frozen=True)
class SerializedType:
    """
    Результат компиляции узла схемы.

    `type` - текст TypeScript типа, `io` - текст io-ts кодека той же формы,
    `dependencies` - импорты, нужные обоим текстам, `refs` - имена локальных
    определений, на которые ссылается узел (только для поиска рекурсии).
    """

    type: str
    io: str
    dependencies: Tuple[Dependency, ...] = ()
    refs: Tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "SerializedType":
        return cls("", "")

    def __add__(self, other: "SerializedType") -> "SerializedType":
        return SerializedType(
            self.type + other.type,
            self.io + other.io,
            self.dependencies + other.dependencies,
            self.refs + other.refs,
        )


@dataclass(frozen=True)
class SerializedParameter(SerializedType):
    is_required: bool = False

    @classmethod
    def empty(cls) -> "SerializedParameter":
        return cls("", "")

    def __add__(self, other: "SerializedType") -> "SerializedParameter":
        return SerializedParameter(
            self.type + other.type,
            self.io + other.io,
            self.dependencies + other.dependencies,
            self.refs + other.refs,
            self.is_required or getattr(other, "is_required", False),
        )


@dataclass(frozen=True)
class SerializedPathParameter(SerializedParameter):
    name: str = ""


EMPTY_DEPENDENCIES: Tuple[Dependency, ...] = ()
EMPTY_REFS: Tuple[str, ...] = ()

OPTION_DEPENDENCIES: Tuple[Dependency, ...] = (
    Dependency("Option", "fp-ts/lib/Option"),
    Dependency("createOptionFromNullable", "io-ts-types"),
)


def fold_serialized(items: Iterable[SerializedType]) -> SerializedType:
    """Свертка списка результатов в один (пустой список дает пустой результат)"""
    return reduce(lambda acc, item: acc + item, items, SerializedType.empty())


def fold_serialized_parameters(
    items: Iterable[SerializedParameter],
) -> SerializedParameter:
    return reduce(lambda acc, item: acc + item, items, SerializedParameter.empty())


def intercalate_serialized(
    separator: SerializedType, items: Iterable[SerializedType]
) -> SerializedType:
    """Свертка с разделителем между соседними элементами"""
    items = list(items)
    if not items:
        return separator.empty()

    result = items[0]
    for item in items[1:]:
        result = result + separator + item
    return result


def same_shape(a: SerializedType, b: SerializedType) -> bool:
    """Структурное равенство без учета зависимостей"""
    return a.type == b.type and a.io == b.io


def uniq_serialized(items: Iterable[SerializedType]) -> List[SerializedType]:
    result: List[SerializedType] = []
    for item in items:
        if not any(same_shape(item, existing) for existing in result):
            result.append(item)
    return result


def serialize_dependencies(dependencies: Iterable[Dependency]) -> str:
    """
    Группировка зависимостей в import-выражения.

    Одна строка на модуль, идентификаторы внутри модуля без повторов,
    порядок - по первому появлению.
    """
    grouped: "OrderedDict[str, List[str]]" = OrderedDict()
    for dependency in dependencies:
        names = grouped.setdefault(dependency.path, [])
        if dependency.name not in names:
            names.append(dependency.name)

    return "\n".join(
        f"import {{ {', '.join(names)} }} from '{path}';"
        for path, names in grouped.items()
    )
