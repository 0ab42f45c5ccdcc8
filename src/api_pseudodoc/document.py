"""Markdown document assembly.

Groups operations by tag and renders one block per operation::

    ## /pets/{petId} Find pet by ID

    getPetById Find pet by ID

    **PathParams:**
    ```
    {
        petId: int64
    }
    ```

    **Request->Response:**
    ```
    GET "/v1/pets/{petId}" -> {
        id: int64
    }
    ```
"""

from api_pseudodoc.config import DEFAULT_TAG, RenderSettings
from api_pseudodoc.parser.base import Operation
from api_pseudodoc.walker import walk


def group_by_tag(operations: list[Operation], default_tag: str = DEFAULT_TAG) -> dict[str, list[Operation]]:
    """Group operations by tag, in first-seen tag order.

    An operation with several tags is listed under each of them; one
    without tags goes under ``default_tag``.
    """
    categories: dict[str, list[Operation]] = {}
    for op in operations:
        for tag in dict.fromkeys(op.tags or [default_tag]):
            categories.setdefault(tag, []).append(op)
    return categories


def render_operation(op: Operation) -> str:
    """Render the Markdown block for a single operation."""
    request = op.request
    text = f"## {op.uri} {op.summary or ''}\n"

    if op.summary:
        text += f"\n{op.name or ''} {op.summary}\n"

    for label, block in (
        ("Headers", request.headers),
        ("SearchQueryParams", request.search_query),
        ("PathParams", request.path_params),
    ):
        if block is not None:
            text += f"\n**{label}:**\n```\n{block}\n```\n"

    text += "\n**Request->Response:**\n```\n"
    text += f'{op.method.upper()} "{op.url}"'
    if request.data:
        text += f" + {request.data.strip()}"
    text += f" -> {op.response.strip()}"
    text += "\n```\n"
    return text


def assemble(operations: list[Operation], settings: RenderSettings | None = None) -> str:
    """Assemble the full document: TOC marker, then one section per tag."""
    settings = settings or RenderSettings()
    parts = [settings.toc_marker]
    for tag, tagged in group_by_tag(operations, settings.default_tag).items():
        parts.append(f"# {tag}")
        parts.extend(render_operation(op) for op in tagged)
    return "\n\n".join(parts)


def render_document(document: dict, settings: RenderSettings | None = None) -> str:
    """Walk a Swagger document and assemble its Markdown in one call."""
    return assemble(walk(document), settings)
