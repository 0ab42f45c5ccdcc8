"""Data models for parsed Swagger operations.

The walker builds these from the raw document; the document assembler
and the ``operations`` CLI command consume them.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .schema import SchemaNode, build_schema


class Parameter(BaseModel):
    """A single Swagger 2.0 operation parameter."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(default="", alias="in")  # query / body / header / path
    required: bool = False
    description: str | None = None
    type: str | None = None
    format: str | None = None
    items: SchemaNode | None = None
    body_schema: SchemaNode | None = Field(default=None, alias="schema")  # body only

    @field_validator("items", "body_schema", mode="before")
    @classmethod
    def _build_node(cls, value):
        # Parameters are only built from raw Swagger mappings; node
        # instances pass through unchanged.
        if isinstance(value, dict):
            return build_schema(value)
        return value


class Request(BaseModel):
    """Rendered request sections. ``None`` means the section is omitted."""

    model_config = ConfigDict(populate_by_name=True)

    headers: str | None = None
    data: str | None = None
    search_query: str | None = Field(default=None, alias="searchQuery")
    path_params: str | None = Field(default=None, alias="pathParams")


class Operation(BaseModel):
    """The request/response model for one (uri, method) pair."""

    method: str  # as written in the document, e.g. "get"
    url: str  # basePath + uri
    uri: str
    summary: str | None = None
    name: str | None = None  # operationId
    tags: list[str] = []
    request: Request
    response: str
