"""Exceptions raised while turning a Swagger document into pseudocode docs.

Per-node anomalies (unresolved or cyclic references, unknown parameter
locations) never raise; they degrade to marker text or a logged warning.
Only problems with the overall document shape end up here.
"""


class PseudoDocError(Exception):
    """Base class for all api-pseudodoc errors."""


class DocumentLoadError(PseudoDocError):
    """The input file could not be read as a YAML/JSON mapping."""


class SchemaStructureError(PseudoDocError):
    """The document is missing a structural element (e.g. ``paths``)."""


class MissingSuccessResponse(SchemaStructureError):
    """An operation documents no ``200`` response."""

    def __init__(self, method: str | None = None, uri: str | None = None):
        self.method = method
        self.uri = uri
        if method and uri:
            message = f'{method.upper()} "{uri}" has no "200" response'
        else:
            message = 'responses have no "200" entry'
        super().__init__(message)
