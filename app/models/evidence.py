# app/models/evidence.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class _EvidenceModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class TextEvidence(_EvidenceModel):
    """Free-text justification for a response."""
    description: Optional[str] = None


class LinkEvidence(_EvidenceModel):
    """External link backing a response. The URL is checked, not fetched."""
    url: Optional[str] = None
    description: Optional[str] = None


class FileEvidence(_EvidenceModel):
    """Metadata for an uploaded file; storage is handled elsewhere."""
    file_name: Optional[str] = None
    file_size: Optional[int] = Field(default=None, ge=0)
    file_type: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None


class EvidenceBundle(_EvidenceModel):
    """Up to one evidence item of each kind attached to an indicator response."""
    text: Optional[TextEvidence] = None
    link: Optional[LinkEvidence] = None
    file: Optional[FileEvidence] = None
