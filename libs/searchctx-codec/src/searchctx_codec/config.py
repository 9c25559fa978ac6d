"""Codec settings via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings

from searchctx_core.models.values import Version


class CodecSettings(BaseSettings):
    """Search context id codec settings, loaded from SEARCHCTX_* env vars."""

    model_config = {"env_prefix": "SEARCHCTX_"}

    protocol_version: str = "2.11.0"
    max_identifier_length: int = Field(default=1_048_576, gt=0)

    @property
    def version(self) -> Version:
        """Default wire version used when ``encode`` is not given one."""
        return Version.from_string(self.protocol_version)
