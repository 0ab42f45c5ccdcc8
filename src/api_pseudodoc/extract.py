"""Per-operation request/response extraction."""

import logging

from api_pseudodoc.errors import MissingSuccessResponse
from api_pseudodoc.parser.base import Parameter, Request
from api_pseudodoc.parser.schema import SchemaNode, build_schema
from api_pseudodoc.render.params import render_params
from api_pseudodoc.render.types import render_type

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "200"
LOCATIONS = ("query", "body", "header", "path")


def extract_request(parameters: list[dict], definitions: dict[str, SchemaNode]) -> Request:
    """Partition raw parameters by location and render each section.

    At most one body parameter is expected; if there are several, the last
    one wins. Parameters with an unknown location are dropped.
    """
    headers: list[Parameter] = []
    search_query: list[Parameter] = []
    path_params: list[Parameter] = []
    data = None

    for raw in parameters:
        location = raw.get("in") if isinstance(raw, dict) else None
        if location not in LOCATIONS:
            # Includes $ref parameters, which carry no "in".
            logger.warning("Dropping parameter %r with unsupported location %r", _label(raw), location)
            continue

        param = Parameter.model_validate(raw)
        if param.location == "query":
            search_query.append(param)
        elif param.location == "body":
            if data is not None:
                logger.warning("Multiple body parameters; %r replaces the previous one", param.name)
            data = render_type(param.body_schema or build_schema(None), definitions)
        elif param.location == "header":
            headers.append(param)
        else:
            path_params.append(param)

    return Request(
        headers=render_params(headers),
        data=data,
        search_query=render_params(search_query),
        path_params=render_params(path_params),
    )


def extract_response(responses: dict, definitions: dict[str, SchemaNode]) -> str:
    """Render the schema of the "200" response.

    Raises:
        MissingSuccessResponse: No "200" entry. Other statuses are never
            used as a fallback.
    """
    # YAML reads an unquoted 200 key as an int.
    success = responses.get(SUCCESS_STATUS, responses.get(int(SUCCESS_STATUS)))
    if success is None:
        raise MissingSuccessResponse()
    return render_type(build_schema(success.get("schema")), definitions)


def extract_operation(
    parameters: list[dict],
    responses: dict,
    definitions: dict[str, SchemaNode],
) -> tuple[Request, str]:
    """Build the request sections and response text for one operation."""
    return extract_request(parameters, definitions), extract_response(responses, definitions)


def _label(raw) -> str:
    if isinstance(raw, dict):
        return raw.get("name") or raw.get("$ref") or "?"
    return repr(raw)
