"""
Tests for field declaration rendering

Covers scalar, enum and relation fields, the suffix ordering and the
default value literal rules.
"""

import math
from unittest import TestCase

from dmmf_samples import STATUS_ENUM, make_document, make_entity, make_field
from ent_auto_generator.codegen.base import go_literal, go_string_literal, quoted_list
from ent_auto_generator.codegen.fields import (
    SKIP,
    SUFFIX_BUILDERS,
    build_suffixes,
    default_suffix,
    optional_suffix,
    render_field,
)
from ent_auto_generator.domain.classification import classify_fields
from ent_auto_generator.domain.field_mapping import TypeMapper
from ent_auto_generator.domain.model_index import build_model_index
from ent_auto_generator.domain.models import FieldKind
from ent_auto_generator.exceptions import MissingEnumDefinitionError


def _render(field, *others, enums=(STATUS_ENUM,), type_mapper=None):
    entity = make_entity("Post", field, *others)
    index = build_model_index(make_document(entity, enums=enums))
    classified = classify_fields(entity)
    if type_mapper is None:
        return render_field(field, classified, index)
    return render_field(field, classified, index, type_mapper)


class TestGoLiteral(TestCase):
    """Test cases for default value literals"""

    def test_booleans_render_lowercase(self):
        assert go_literal(True) == "true"
        assert go_literal(False) == "false"

    def test_numbers_render_bare(self):
        assert go_literal(0) == "0"
        assert go_literal(42) == "42"
        assert go_literal(-3) == "-3"
        assert go_literal(1.5) == "1.5"

    def test_strings_double_quoted(self):
        assert go_literal("USER") == '"USER"'

    def test_strings_escaped(self):
        assert go_literal('say "hi"') == '"say \\"hi\\""'
        assert go_literal("a\\b") == '"a\\\\b"'

    def test_unsupported_shapes(self):
        assert go_literal({"name": "now", "args": []}) is None
        assert go_literal(["a", "b"]) is None
        assert go_literal(None) is None
        assert go_literal(math.inf) is None

    def test_quoted_list_preserves_order(self):
        assert quoted_list(["B", "A", "C"]) == '"B","A","C"'
        assert quoted_list([]) == ""

    def test_go_string_literal_keeps_unicode(self):
        assert go_string_literal("café") == '"café"'


class TestSuffixes(TestCase):
    """Test cases for modifier suffix composition"""

    def test_builder_order_is_optional_then_default(self):
        assert SUFFIX_BUILDERS == (optional_suffix, default_suffix)

    def test_required_without_default(self):
        assert build_suffixes(make_field("name")) == []

    def test_optional_and_default(self):
        f = make_field("active", type_="Boolean", is_required=False, default=True)
        assert build_suffixes(f) == [".Optional()", ".Default(true)"]

    def test_function_default_omitted(self):
        f = make_field("createdAt", type_="DateTime", default={"name": "now", "args": []})
        assert default_suffix(f) == []
        assert build_suffixes(f) == []

    def test_zero_default_is_kept(self):
        f = make_field("views", type_="Int", default=0)
        assert build_suffixes(f) == [".Default(0)"]

    def test_false_default_is_kept(self):
        f = make_field("admin", type_="Boolean", default=False)
        assert build_suffixes(f) == [".Default(false)"]


class TestRenderScalarField(TestCase):
    """Test cases for scalar field rendering"""

    def test_required_string_has_no_modifiers(self):
        assert _render(make_field("name")) == 'field.String("name")'

    def test_optional_boolean_with_default(self):
        f = make_field("active", type_="Boolean", is_required=False, default=True)
        assert _render(f) == 'field.Bool("active").Optional().Default(true)'

    def test_string_default(self):
        f = make_field("locale", default="en")
        assert _render(f) == 'field.String("locale").Default("en")'

    def test_float_default(self):
        f = make_field("score", type_="Float", default=1.5)
        assert _render(f) == 'field.Float("score").Default(1.5)'

    def test_mapped_types(self):
        cases = {
            "Int": 'field.Int("x")',
            "BigInt": 'field.Int64("x")',
            "Decimal": 'field.Float("x")',
            "DateTime": 'field.Time("x")',
            "Bytes": 'field.Bytes("x")',
        }
        for source, expected in cases.items():
            assert _render(make_field("x", type_=source)) == expected, source

    def test_json_gets_zero_value_argument(self):
        f = make_field("metadata", type_="Json", is_required=False)
        assert _render(f) == 'field.JSON("metadata", map[string]interface{}{}).Optional()'

    def test_unmapped_type_skipped(self):
        f = make_field("location", type_='Unsupported("point")')
        assert _render(f) is SKIP

    def test_relation_key_skipped(self):
        key = make_field("authorId")
        rel = make_field("author", FieldKind.RELATION, "User", relation_from_fields=("authorId",))
        assert _render(key, rel) is SKIP

    def test_extra_type_mapping(self):
        f = make_field("ip", type_="Inet")
        assert _render(f) is SKIP
        assert _render(f, type_mapper=TypeMapper({"Inet": "String"})) == 'field.String("ip")'


class TestRenderEnumField(TestCase):
    """Test cases for enum field rendering"""

    def test_values_in_definition_order(self):
        f = make_field("status", FieldKind.ENUM, "Status")
        assert _render(f) == 'field.Enum("status").Values("DRAFT","PUBLISHED")'

    def test_enum_with_suffixes(self):
        f = make_field("status", FieldKind.ENUM, "Status", is_required=False, default="DRAFT")
        assert _render(f) == 'field.Enum("status").Values("DRAFT","PUBLISHED").Optional().Default("DRAFT")'

    def test_missing_enum_raises(self):
        f = make_field("status", FieldKind.ENUM, "Status")
        with self.assertRaises(MissingEnumDefinitionError) as cm:
            _render(f, enums=())

        error = cm.exception
        assert error.context["enum"] == "Status"
        assert error.context["entity"] == "Post"
        assert error.context["field"] == "status"
        assert error.error_code == "MISSING_ENUM_ERROR"


class TestRenderRelationField(TestCase):

    def test_relation_always_skipped(self):
        rel = make_field("author", FieldKind.RELATION, "User", is_required=False)
        assert _render(rel) is SKIP
