"""Persisted operator settings."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Settings(BaseModel):
    """Values remembered between runs. The mod name is never stored."""

    model_config = ConfigDict(extra='ignore')

    template_root: Optional[str] = Field(None, description="Template (ModTemplate) directory")
    dest_base: Optional[str] = Field(None, description="Directory new mods are created in")
    pkg_prefix: Optional[str] = Field("jellypowered", description="Package id prefix (author/org)")
    include_git: bool = False
    open_when_done: bool = True

    @field_validator('template_root', 'dest_base', 'pkg_prefix', mode='before')
    @classmethod
    def strip_text(cls, v):
        """Treat blank strings as unset and trim whitespace."""
        if v is None:
            return v
        v = str(v).strip()
        return v or None

    @field_validator('pkg_prefix', mode='after')
    @classmethod
    def default_prefix(cls, v):
        return v if v else "jellypowered"
