"""Compile MCP tool input schemas (JSON Schema) into pydantic models.

The compiled model is the argument validator handed to LangChain as a
tool's ``args_schema``. Only the JSON Schema subset that MCP servers use
in practice is translated; anything else degrades to ``Any``.
"""

import keyword
import re
from collections.abc import Mapping
from typing import Any, Literal, Optional, Union  # noqa: UP035

from pydantic import BaseModel, ConfigDict, Field, create_model

# Opaque JSON Schema document as received from the server
JsonSchema = Mapping[str, Any]

_PRIMITIVES: dict[str, Any] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "null": type(None),
}

_IDENTIFIER = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


def compile_input_schema(
    schema: JsonSchema | None, model_name: str = "ToolInput"
) -> type[BaseModel]:
    """Translate a tool's JSON Schema into a pydantic model.

    Args:
        schema: The tool's ``inputSchema``; None or non-object schemas
                produce a model that accepts any keyword arguments
        model_name: Name for the generated model class

    Returns:
        A BaseModel subclass validating the tool arguments
    """
    schema = schema if isinstance(schema, Mapping) else {}
    compiler = _SchemaCompiler(schema)
    return compiler.object_model(schema, _model_name(model_name))


def _model_name(name: str) -> str:
    parts = re.split(r"[^A-Za-z0-9]+", name)
    camel = "".join(p[:1].upper() + p[1:] for p in parts if p)
    if not camel or not camel[0].isalpha():
        camel = f"Model{camel}"
    return camel


def _field_name(name: str) -> str | None:
    """Python attribute name for a property, or None if it must be aliased."""
    if (
        _IDENTIFIER.match(name)
        and not keyword.iskeyword(name)
        and not name.startswith("model_")
        and not hasattr(BaseModel, name)
    ):
        return name
    return None


def _is_literal_value(value: Any) -> bool:
    return value is None or isinstance(value, str | int | float | bool)


class _SchemaCompiler:
    def __init__(self, root: JsonSchema):
        self._root = root
        self._resolving: set[str] = set()

    def object_model(self, schema: JsonSchema, name: str) -> type[BaseModel]:
        properties = schema.get("properties")
        if not isinstance(properties, Mapping):
            properties = {}
        required = {r for r in schema.get("required") or [] if isinstance(r, str)}
        extra = "forbid" if schema.get("additionalProperties") is False else "allow"

        fields: dict[str, Any] = {}
        for index, (prop_name, prop_schema) in enumerate(properties.items()):
            prop_schema = prop_schema if isinstance(prop_schema, Mapping) else {}
            annotation = self.annotation(prop_schema, f"{name}{_model_name(prop_name)}")

            field_kwargs: dict[str, Any] = {}
            if "description" in prop_schema:
                field_kwargs["description"] = prop_schema["description"]

            attr = _field_name(prop_name)
            if attr is None:
                attr = f"field_{index}"
                field_kwargs["alias"] = prop_name

            if prop_name in required:
                fields[attr] = (annotation, Field(..., **field_kwargs))
            else:
                default = prop_schema.get("default")
                fields[attr] = (Optional[annotation], Field(default, **field_kwargs))

        model_config = ConfigDict(extra=extra, populate_by_name=True)
        model = create_model(name, __config__=model_config, **fields)
        if isinstance(schema.get("description"), str):
            model.__doc__ = schema["description"]
        return model

    def annotation(self, schema: JsonSchema, name: str) -> Any:
        if "$ref" in schema:
            return self._ref(schema["$ref"], name)

        if "const" in schema and _is_literal_value(schema["const"]):
            return Literal[schema["const"]]

        enum = schema.get("enum")
        if isinstance(enum, list) and enum and all(_is_literal_value(v) for v in enum):
            return Literal[tuple(enum)]

        for combinator in ("anyOf", "oneOf"):
            options = schema.get(combinator)
            if isinstance(options, list) and options:
                return self._union(
                    [self.annotation(o, f"{name}Option{i}") for i, o in enumerate(options)]
                )

        all_of = schema.get("allOf")
        if isinstance(all_of, list) and all_of:
            return self.annotation(self._merge_all_of(all_of), name)

        schema_type = schema.get("type")
        if isinstance(schema_type, list):
            return self._union(
                [self.annotation({**schema, "type": t}, name) for t in schema_type]
            )

        if schema_type in _PRIMITIVES:
            return _PRIMITIVES[schema_type]

        if schema_type == "array":
            items = schema.get("items")
            if isinstance(items, Mapping):
                return list[self.annotation(items, f"{name}Item")]
            return list[Any]

        if schema_type == "object" or "properties" in schema:
            if isinstance(schema.get("properties"), Mapping) and schema["properties"]:
                return self.object_model(schema, name)
            return dict[str, Any]

        return Any

    def _ref(self, ref: Any, name: str) -> Any:
        if not isinstance(ref, str) or ref in self._resolving:
            return Any
        target = self._lookup(ref)
        if target is None:
            return Any

        # Recursive references stop at the first repeat
        self._resolving.add(ref)
        try:
            return self.annotation(target, _model_name(ref.rsplit("/", 1)[-1]) or name)
        finally:
            self._resolving.discard(ref)

    def _merge_all_of(self, parts: list[Any]) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        properties: dict[str, Any] = {}
        required: list[str] = []
        for part in parts:
            if not isinstance(part, Mapping):
                continue
            if "$ref" in part and isinstance(part["$ref"], str):
                part = self._lookup(part["$ref"]) or {}
            merged.update(
                {k: v for k, v in part.items() if k not in ("properties", "required", "allOf")}
            )
            properties.update(part.get("properties") or {})
            required.extend(part.get("required") or [])
        if properties:
            merged["type"] = "object"
            merged["properties"] = properties
            merged["required"] = required
        return merged

    def _lookup(self, ref: str) -> Mapping[str, Any] | None:
        """Resolve a local JSON pointer such as ``#/$defs/Item``."""
        if not ref.startswith("#/"):
            return None
        target: Any = self._root
        for part in ref[2:].split("/"):
            part = part.replace("~1", "/").replace("~0", "~")
            if not isinstance(target, Mapping) or part not in target:
                return None
            target = target[part]
        return target if isinstance(target, Mapping) else None

    @staticmethod
    def _union(annotations: list[Any]) -> Any:
        unique: list[Any] = []
        for annotation in annotations:
            if annotation not in unique:
                unique.append(annotation)
        if len(unique) == 1:
            return unique[0]
        return Union[tuple(unique)]  # noqa: UP007
