"""Unit tests for the JSON Schema to pydantic compiler."""

import pytest
from pydantic import BaseModel, ValidationError

from langchain_mcp_tools.schema import compile_input_schema


class TestObjectModels:
    """Tests for top-level object schemas."""

    def test_required_and_optional(self):
        """Test required fields must be present and optional ones default."""
        model = compile_input_schema(
            {
                "type": "object",
                "properties": {
                    "path": {"type": "string"},
                    "limit": {"type": "integer", "default": 10},
                },
                "required": ["path"],
            }
        )

        assert model(path="/tmp").limit == 10
        with pytest.raises(ValidationError):
            model()

    def test_optional_without_default(self):
        """Test optional fields default to None."""
        model = compile_input_schema({"type": "object", "properties": {"q": {"type": "string"}}})

        assert model().q is None

    def test_types_validated(self):
        """Test primitive types are enforced."""
        model = compile_input_schema(
            {
                "type": "object",
                "properties": {"count": {"type": "integer"}},
                "required": ["count"],
            }
        )

        with pytest.raises(ValidationError):
            model(count="many")

    def test_model_name(self):
        """Test the generated class name."""
        model = compile_input_schema({"type": "object"}, "read_file Input")

        assert model.__name__ == "ReadFileInput"
        assert issubclass(model, BaseModel)

    def test_description_becomes_doc(self):
        """Test the schema description is the model docstring."""
        model = compile_input_schema({"type": "object", "description": "Read a file"})

        assert model.__doc__ == "Read a file"

    def test_field_description(self):
        """Test property descriptions reach the JSON schema."""
        model = compile_input_schema(
            {"type": "object", "properties": {"path": {"type": "string", "description": "File"}}}
        )

        assert model.model_json_schema()["properties"]["path"]["description"] == "File"

    def test_additional_properties_forbidden(self):
        """Test additionalProperties false rejects unknown keys."""
        model = compile_input_schema(
            {
                "type": "object",
                "properties": {"a": {"type": "string"}},
                "additionalProperties": False,
            }
        )

        with pytest.raises(ValidationError):
            model(a="x", b="y")

    def test_additional_properties_allowed(self):
        """Test unknown keys are kept by default."""
        model = compile_input_schema({"type": "object", "properties": {"a": {"type": "string"}}})

        assert model(a="x", b="y").model_dump() == {"a": "x", "b": "y"}

    @pytest.mark.parametrize("schema", [None, {}, {"type": "string"}, "not-a-schema"])
    def test_degenerate_schemas(self, schema):
        """Test missing or non-object schemas accept any arguments."""
        model = compile_input_schema(schema)

        assert model(anything=1).model_dump() == {"anything": 1}

    def test_aliased_property_names(self):
        """Test properties that are not identifiers keep their wire name."""
        model = compile_input_schema(
            {
                "type": "object",
                "properties": {"file-path": {"type": "string"}, "class": {"type": "string"}},
                "required": ["file-path"],
            }
        )

        instance = model.model_validate({"file-path": "/tmp", "class": "x"})

        assert instance.model_dump(by_alias=True) == {"file-path": "/tmp", "class": "x"}


class TestAnnotations:
    """Tests for property-level schema translation."""

    def compile_prop(self, prop):
        return compile_input_schema(
            {"type": "object", "properties": {"value": prop}, "required": ["value"]}
        )

    def test_array_of_strings(self):
        """Test arrays validate their items."""
        model = self.compile_prop({"type": "array", "items": {"type": "string"}})

        assert model(value=["a", "b"]).value == ["a", "b"]
        with pytest.raises(ValidationError):
            model(value=[{"x": 1}])

    def test_enum(self):
        """Test enum restricts values."""
        model = self.compile_prop({"type": "string", "enum": ["asc", "desc"]})

        assert model(value="asc").value == "asc"
        with pytest.raises(ValidationError):
            model(value="sideways")

    def test_const(self):
        """Test const allows exactly one value."""
        model = self.compile_prop({"const": "fixed"})

        with pytest.raises(ValidationError):
            model(value="other")

    def test_type_list(self):
        """Test a list of types becomes a union."""
        model = self.compile_prop({"type": ["string", "null"]})

        assert model(value=None).value is None
        assert model(value="x").value == "x"

    def test_any_of(self):
        """Test anyOf becomes a union."""
        model = self.compile_prop({"anyOf": [{"type": "integer"}, {"type": "boolean"}]})

        assert model(value=True).value is True
        with pytest.raises(ValidationError):
            model(value={"a": 1})

    def test_nested_object(self):
        """Test nested objects become nested models."""
        model = self.compile_prop(
            {
                "type": "object",
                "properties": {"line": {"type": "integer"}},
                "required": ["line"],
            }
        )

        assert model(value={"line": 3}).value.line == 3
        with pytest.raises(ValidationError):
            model(value={})

    def test_free_form_object(self):
        """Test objects without properties become dicts."""
        model = self.compile_prop({"type": "object"})

        assert model(value={"k": [1]}).value == {"k": [1]}

    def test_all_of_merges(self):
        """Test allOf parts are merged into one object."""
        model = self.compile_prop(
            {
                "allOf": [
                    {"type": "object", "properties": {"a": {"type": "string"}}, "required": ["a"]},
                    {"properties": {"b": {"type": "integer"}}},
                ]
            }
        )

        value = model(value={"a": "x", "b": 2}).value
        assert (value.a, value.b) == ("x", 2)

    def test_ref(self):
        """Test local references are resolved."""
        model = compile_input_schema(
            {
                "type": "object",
                "properties": {"item": {"$ref": "#/$defs/Item"}},
                "required": ["item"],
                "$defs": {
                    "Item": {
                        "type": "object",
                        "properties": {"id": {"type": "integer"}},
                        "required": ["id"],
                    }
                },
            }
        )

        assert model(item={"id": 1}).item.id == 1

    def test_recursive_ref(self):
        """Test self-referencing schemas compile."""
        model = compile_input_schema(
            {
                "type": "object",
                "properties": {"root": {"$ref": "#/$defs/Node"}},
                "$defs": {
                    "Node": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "children": {"type": "array", "items": {"$ref": "#/$defs/Node"}},
                        },
                    }
                },
            }
        )

        instance = model(root={"name": "a", "children": [{"name": "b"}]})

        assert instance.root.name == "a"

    def test_unresolvable_ref(self):
        """Test unknown references accept anything."""
        model = self.compile_prop({"$ref": "#/$defs/Missing"})

        assert model(value=object).value is object

    def test_unknown_keywords(self):
        """Test unsupported schemas accept anything."""
        model = self.compile_prop({"not": {"type": "string"}})

        assert model(value=5).value == 5
