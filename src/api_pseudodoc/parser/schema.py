"""Schema node variants and their construction from raw Swagger mappings.

Each raw JSON-Schema-like mapping is classified exactly once, when it is
built, into one of four node kinds: object, array, primitive or reference.
The renderer dispatches on the kind and never re-inspects raw keys.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

ANY_TYPE = "any"
REF_PREFIX = "#/definitions/"


class _Node(BaseModel):
    description: str | None = None
    reference_name: str | None = None  # set on any node that came from a $ref/originalRef


class ObjectNode(_Node):
    kind: Literal["object"] = "object"
    properties: dict[str, "SchemaNode"] | None = None


class ArrayNode(_Node):
    kind: Literal["array"] = "array"
    items: "SchemaNode"


class PrimitiveNode(_Node):
    kind: Literal["primitive"] = "primitive"
    type: str = ANY_TYPE
    format: str | None = None


class ReferenceNode(_Node):
    kind: Literal["reference"] = "reference"
    reference_name: str


SchemaNode = Annotated[
    Union[ObjectNode, ArrayNode, PrimitiveNode, ReferenceNode],
    Field(discriminator="kind"),
]

ObjectNode.model_rebuild()
ArrayNode.model_rebuild()


def reference_name_of(raw: dict) -> str | None:
    """Return the definition name a raw schema points at, if any.

    springfox emits ``originalRef: User`` next to ``$ref``; plain Swagger
    only has ``$ref: '#/definitions/User'``.
    """
    if raw.get("originalRef"):
        return raw["originalRef"]
    ref = raw.get("$ref")
    if not ref:
        return None
    if ref.startswith(REF_PREFIX):
        return ref[len(REF_PREFIX):]
    return ref.rsplit("/", 1)[-1]


def build_schema(raw: dict | None) -> SchemaNode:
    """Classify a raw schema mapping into a node variant, recursively."""
    if not raw:
        return PrimitiveNode()

    schema_type = raw.get("type")
    common = {
        "description": raw.get("description"),
        "reference_name": reference_name_of(raw),
    }

    if schema_type == "object":
        properties = raw.get("properties")
        if properties is not None:
            properties = {key: build_schema(prop) for key, prop in properties.items()}
        return ObjectNode(properties=properties, **common)

    if schema_type == "array":
        return ArrayNode(items=build_schema(raw.get("items")), **common)

    if schema_type:
        return PrimitiveNode(type=schema_type, format=raw.get("format"), **common)

    if common["reference_name"]:
        return ReferenceNode(**common)

    # Neither type nor reference: an unconstrained value.
    return PrimitiveNode(format=raw.get("format"), **common)


def build_definitions(raw: dict | None) -> dict[str, SchemaNode]:
    """Build the read-only definition table for one document."""
    return {name: build_schema(schema) for name, schema in (raw or {}).items()}


def type_name(node: SchemaNode) -> str:
    """Short single-token name for a node, used for flat parameter arrays."""
    if isinstance(node, PrimitiveNode):
        return node.type
    if isinstance(node, ReferenceNode):
        return node.reference_name
    return node.kind
