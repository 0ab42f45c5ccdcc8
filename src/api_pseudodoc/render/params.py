"""Flat parameter-list renderer for header, query and path parameters."""

from api_pseudodoc.parser.base import Parameter
from api_pseudodoc.parser.schema import ANY_TYPE, type_name
from api_pseudodoc.render.types import indent


def render_params(parameters: list[Parameter]) -> str | None:
    """Render parameters as a single record block.

    Returns None for an empty list so callers can omit the section.
    Parameters are never nested and definitions are not consulted.
    """
    lines = []
    for param in parameters:
        if param.description:
            lines.extend(f"{indent(1)}// {line}" for line in param.description.splitlines())
        optional = "" if param.required else "?"
        lines.append(f"{indent(1)}{param.name}{optional}: {_param_type(param)}")

    if not lines:
        return None
    return "{\n" + "\n".join(lines) + "\n}"


def _param_type(param: Parameter) -> str:
    if param.type == "array" and param.items is not None:
        return f"[{type_name(param.items)}]"
    return param.format or param.type or ANY_TYPE
