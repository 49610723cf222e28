"""
Company content provider: the strings base replies are templated from.
Every field is optional; responses.py falls back to fixed sentences.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class Company(BaseModel):
    name: str | None = None
    tagline: str | None = None


class ServiceItem(BaseModel):
    name: str
    duration: str | None = None


class PortfolioItem(BaseModel):
    title: str
    description: str = ""


class TeamMember(BaseModel):
    name: str
    role: str = ""


class ContactInfo(BaseModel):
    phone: str | None = None
    email: str | None = None
    whatsapp: str | None = None
    office_hours: str | None = None


class CompanyContent(BaseModel):
    company: Company = Field(default_factory=Company)
    about_story: str | None = None
    services: list[ServiceItem] = Field(default_factory=list)
    portfolio: list[PortfolioItem] = Field(default_factory=list)
    team_members: list[TeamMember] = Field(default_factory=list)
    contact: ContactInfo = Field(default_factory=ContactInfo)


def load_content(path: str | Path | None) -> CompanyContent:
    """Read content JSON. No path gives empty content (all defaults)."""
    if path is None:
        return CompanyContent()
    p = Path(path)
    with p.open(encoding="utf-8") as f:
        raw = json.load(f)
    content = CompanyContent.model_validate(raw)
    logger.info(
        "loaded company content from %s (%d services, %d projects)",
        p,
        len(content.services),
        len(content.portfolio),
    )
    return content
