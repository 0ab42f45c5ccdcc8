"""Load a Swagger document from disk (YAML or JSON)."""

import logging
from pathlib import Path

import yaml

from api_pseudodoc.errors import DocumentLoadError

logger = logging.getLogger(__name__)


def load_document(file_path: Path) -> dict:
    """Read a Swagger file into a mapping.

    YAML is a superset of JSON, so one loader handles both.
    """
    text = file_path.read_text(encoding="utf-8")
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentLoadError(f"{file_path} is not valid YAML/JSON: {e}") from e

    if not isinstance(doc, dict):
        raise DocumentLoadError(f"{file_path} does not contain a mapping at the top level")

    if "swagger" not in doc and "openapi" in doc:
        logger.warning("%s is OpenAPI %s; only Swagger 2.0 definitions are resolved", file_path, doc["openapi"])
    return doc
