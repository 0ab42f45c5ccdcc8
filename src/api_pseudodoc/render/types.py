"""Recursive schema-to-pseudocode renderer.

Renders one schema node into indented text::

    {
        id: integer
        // Owner of the pet
        // @((User))
        owner: {
            name: string
        }
        tags: [string]
    }

References are expanded in place at the same depth. Each expansion
appends the reference name to ``ancestors``; meeting a name that is
already on the chain emits the cycle marker instead of recursing, so
rendering terminates on self-referential and mutually recursive
definitions. The chain is a tuple and is only ever extended by
concatenation, so sibling branches never see each other's ancestors.

Every call returns exactly the text it produced. Callers trim the
trailing whitespace of child renderings before joining them; there is no
second formatting pass.
"""

import logging

from api_pseudodoc.parser.schema import (
    ArrayNode,
    ObjectNode,
    PrimitiveNode,
    ReferenceNode,
    SchemaNode,
)

logger = logging.getLogger(__name__)

INDENT = " " * 4
EMPTY_OBJECT = "{}"
REFERENCE_ANNOTATION = "@(({name}))"
CYCLE_MARKER = "@@{name}))"
UNRESOLVED_MARKER = "!!{name}))"


def indent(depth: int) -> str:
    return INDENT * depth


def render_type(
    node: SchemaNode,
    definitions: dict[str, SchemaNode],
    depth: int = 0,
    field_key: str | None = None,
    ancestors: tuple[str, ...] = (),
) -> str:
    """Render ``node`` as pseudocode.

    Args:
        node: Schema node to render.
        definitions: Definition table used to resolve references.
        depth: Nesting level; indentation is four spaces per level.
        field_key: Property name to render as ``key: <value>``, or
            ``None`` to render a bare value (array items, top level).
        ancestors: Reference names being expanded on the current path.
    """
    text = ""

    if node.description and depth:
        text += _comment(node.description, depth, field_key)
    if node.reference_name and depth:
        text += _comment(REFERENCE_ANNOTATION.format(name=node.reference_name), depth, field_key)

    if field_key is not None:
        text += f"{indent(depth)}{field_key}: "

    if isinstance(node, ObjectNode):
        text += _render_object(node, definitions, depth, ancestors)
    elif isinstance(node, ArrayNode):
        text += _render_array(node, definitions, depth, ancestors)
    elif isinstance(node, PrimitiveNode):
        text += node.format or node.type
    elif isinstance(node, ReferenceNode):
        text += _render_reference(node, definitions, depth, ancestors)
    return text


def _comment(content: str, depth: int, field_key: str | None) -> str:
    # Fields get the comment on its own indented line; bare values are
    # already positioned by the caller, so re-indent after the break.
    lines = content.splitlines() or [""]
    if field_key is not None:
        return "".join(f"{indent(depth)}// {line}\n" for line in lines)
    return "".join(f"// {line}\n{indent(depth)}" for line in lines)


def _render_object(node: ObjectNode, definitions, depth, ancestors) -> str:
    if not node.properties:
        return EMPTY_OBJECT

    inners = [
        render_type(prop, definitions, depth + 1, key, ancestors).rstrip()
        for key, prop in node.properties.items()
    ]
    return "{\n" + "\n".join(inners) + f"\n{indent(depth)}}}\n"


def _render_array(node: ArrayNode, definitions, depth, ancestors) -> str:
    inner = render_type(node.items, definitions, depth + 1, None, ancestors).rstrip()
    if "\n" in inner:
        return f"[\n{indent(depth + 1)}{inner}\n{indent(depth)}]\n"
    return f"[{inner.strip()}]\n"


def _render_reference(node: ReferenceNode, definitions, depth, ancestors) -> str:
    name = node.reference_name
    if name in ancestors:
        logger.debug("Cyclic reference to %s via %s", name, " -> ".join(ancestors))
        return CYCLE_MARKER.format(name=name)

    definition = definitions.get(name)
    if definition is None:
        logger.warning("Unresolved reference %r", name)
        return UNRESOLVED_MARKER.format(name=name)

    # The field label was already written by the caller.
    return render_type(definition, definitions, depth, None, ancestors + (name,))
