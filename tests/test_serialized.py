"""
Тесты для результатов компиляции и группировки импортов
"""

from swagger_ts_client.internal.types.serialized import (
    Dependency,
    SerializedType,
    SerializedParameter,
    OPTION_DEPENDENCIES,
    fold_serialized,
    fold_serialized_parameters,
    intercalate_serialized,
    same_shape,
    serialize_dependencies,
    uniq_serialized,
)


class TestSerializedType:
    """Тесты моноида SerializedType"""

    def test_concat_preserves_order(self):
        """Тест конкатенации всех четырех полей по порядку"""
        a = SerializedType("a", "A", (Dependency("a", "x"),), ("A",))
        b = SerializedType("b", "B", (Dependency("b", "y"),), ("B",))

        result = a + b

        assert result.type == "ab"
        assert result.io == "AB"
        assert result.dependencies == (Dependency("a", "x"), Dependency("b", "y"))
        assert result.refs == ("A", "B")

    def test_fold_empty_is_identity(self):
        """Тест свертки пустого списка"""
        assert fold_serialized([]) == SerializedType.empty()

    def test_fold_is_associative(self):
        """Тест ассоциативности свертки"""
        a = SerializedType("a", "1")
        b = SerializedType("b", "2")
        c = SerializedType("c", "3")

        assert (a + b) + c == a + (b + c) == fold_serialized([a, b, c])

    def test_parameter_required_is_or(self):
        """Тест OR для признака обязательности"""
        optional = SerializedParameter("a", "A", is_required=False)
        required = SerializedParameter("b", "B", is_required=True)

        assert (optional + required).is_required is True
        assert (optional + optional).is_required is False
        assert fold_serialized_parameters([optional, required]).is_required is True
        assert fold_serialized_parameters([]).is_required is False

    def test_intercalate(self):
        """Тест свертки с разделителем"""
        separator = SerializedType(" | ", ", ")
        items = [SerializedType("A", "AIO"), SerializedType("B", "BIO")]

        result = intercalate_serialized(separator, items)

        assert result.type == "A | B"
        assert result.io == "AIO, BIO"
        assert intercalate_serialized(separator, []) == SerializedType.empty()
        assert intercalate_serialized(separator, items[:1]) == items[0]

    def test_uniq_ignores_dependencies(self):
        """Тест дедупликации без учета зависимостей"""
        a = SerializedType("User", "UserIO", (Dependency("User", "./User"),))
        b = SerializedType("User", "UserIO")
        c = SerializedType("Pet", "PetIO")

        assert same_shape(a, b)
        assert uniq_serialized([a, b, c]) == [a, c]


class TestSerializeDependencies:
    """Тесты группировки импортов"""

    def test_identical_dependencies_collapse(self):
        """Тест схлопывания одинаковых зависимостей"""
        dependencies = [Dependency("User", "./User"), Dependency("User", "./User")]

        assert serialize_dependencies(dependencies) == "import { User } from './User';"

    def test_same_path_grouped(self):
        """Тест группировки идентификаторов одного модуля"""
        dependencies = [
            Dependency("User", "./User"),
            Dependency("Option", "fp-ts/lib/Option"),
            Dependency("UserIO", "./User"),
        ]

        assert serialize_dependencies(dependencies) == (
            "import { User, UserIO } from './User';\n"
            "import { Option } from 'fp-ts/lib/Option';"
        )

    def test_option_dependencies(self):
        """Тест фиксированного набора зависимостей Option"""
        assert serialize_dependencies(OPTION_DEPENDENCIES + OPTION_DEPENDENCIES) == (
            "import { Option } from 'fp-ts/lib/Option';\n"
            "import { createOptionFromNullable } from 'io-ts-types';"
        )

    def test_empty(self):
        """Тест пустого списка зависимостей"""
        assert serialize_dependencies([]) == ""
