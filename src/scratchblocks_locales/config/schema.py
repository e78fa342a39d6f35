"""Configuration schema for scratchblocks-locales using Pydantic."""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "http://translate.scratch.mit.edu/download"


class LocalesConfig(BaseModel):
    """Runtime settings for fetching catalogs and writing locale files."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Download root; catalogs live under <base_url>/<lang>/",
        pattern=r"^https?://.*",
    )
    locales_dir: Path = Field(
        default=Path("locales"),
        description="Directory the <lang>.json files are written to",
    )
    timeout: Annotated[float, Field(gt=0, le=600)] = Field(
        default=30.0,
        description="HTTP timeout in seconds for a single catalog request",
    )
    max_attempts: Annotated[int, Field(ge=1, le=5)] = Field(
        default=2,
        description=(
            "How many times the editor/blocks download pair is tried; "
            "the default of 2 is a single retry, other values change that policy"
        ),
    )
    user_agent: str = Field(
        default="scratchblocks-locales/1.0",
        min_length=1,
        description="User-Agent header sent with every request",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Normalize the download root."""
        return v.rstrip("/")
