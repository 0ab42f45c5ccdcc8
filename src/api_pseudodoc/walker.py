"""Swagger 2.0 document walker.

Produces one Operation per (uri, method) pair, in document order.
"""

import logging

from pydantic import ValidationError

from api_pseudodoc.errors import MissingSuccessResponse, SchemaStructureError
from api_pseudodoc.extract import extract_operation
from api_pseudodoc.parser.base import Operation
from api_pseudodoc.parser.schema import build_definitions

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def walk(document: dict) -> list[Operation]:
    """Walk every operation in ``document``.

    Raises:
        SchemaStructureError: ``paths`` is missing or an operation is
            malformed.
        MissingSuccessResponse: An operation has no "200" response.
    """
    paths = document.get("paths")
    if not isinstance(paths, dict):
        raise SchemaStructureError('document has no "paths" mapping')

    base_path = document.get("basePath") or ""
    try:
        definitions = build_definitions(document.get("definitions"))
    except ValidationError as e:
        raise SchemaStructureError(f"malformed definitions: {e}") from e

    operations = []
    for uri, path_item in paths.items():
        if not isinstance(path_item, dict):
            raise SchemaStructureError(f'path "{uri}" is not a mapping')
        for method, item in path_item.items():
            # Path items may also carry "parameters", "$ref" or extensions.
            if method.lower() not in HTTP_METHODS:
                logger.debug("Skipping %r under %s", method, uri)
                continue

            if not isinstance(item, dict):
                raise SchemaStructureError(f'{method.upper()} "{uri}" is not a mapping')

            try:
                request, response = extract_operation(
                    item.get("parameters") or [],
                    item.get("responses") or {},
                    definitions,
                )
            except MissingSuccessResponse as e:
                raise MissingSuccessResponse(method, uri) from e
            except ValidationError as e:
                raise SchemaStructureError(f'{method.upper()} "{uri}" is malformed: {e}') from e

            operations.append(
                Operation(
                    method=method,
                    url=f"{base_path}{uri}",
                    uri=uri,
                    summary=item.get("summary"),
                    name=item.get("operationId"),
                    tags=item.get("tags") or [],
                    request=request,
                    response=response,
                )
            )

    logger.debug("Walked %d operations", len(operations))
    return operations
