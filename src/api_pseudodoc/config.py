"""Document rendering settings."""

import os

from pydantic import BaseModel

DEFAULT_TAG = "Default"
TOC_MARKER = "[TOC]"


class RenderSettings(BaseModel):
    """Knobs for the assembled Markdown document."""

    default_tag: str = DEFAULT_TAG  # section for operations without tags
    toc_marker: str = TOC_MARKER

    @classmethod
    def from_env(cls, **overrides) -> "RenderSettings":
        """Read PSEUDODOC_* environment variables; non-None overrides win."""
        values = {
            "default_tag": os.getenv("PSEUDODOC_DEFAULT_TAG", DEFAULT_TAG),
            "toc_marker": os.getenv("PSEUDODOC_TOC_MARKER", TOC_MARKER),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
