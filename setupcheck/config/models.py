"""
Pydantic models for configuration validation.

These models define the schema for the optional configuration file that
tunes what a run checks for.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..preflight.models import CheckSeverity
from .defaults import (
    DEFAULT_EXTENSIONS,
    DEFAULT_GUIDE_URL,
    DEFAULT_HOSTING_DOMAIN,
    DEFAULT_INSTITUTIONAL_DOMAINS,
    MANUAL_CHECKLIST,
)


class ExtensionRequirement(BaseModel):
    """A VS Code extension the setup expects to be installed."""

    id: str = Field(..., description="Marketplace identifier, e.g. publisher.name")
    name: str = Field(..., description="Display name")
    severity: CheckSeverity = Field(default=CheckSeverity.IMPORTANT, description="Severity when missing")
    reason: str = Field(default="", description="Why the extension is needed")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        v = v.strip()
        if "." not in v:
            raise ValueError(f"Extension id must look like 'publisher.name': {v}")
        return v


def _default_extensions() -> List[ExtensionRequirement]:
    return [ExtensionRequirement(**entry) for entry in DEFAULT_EXTENSIONS]


class SetupConfig(BaseModel):
    """Settings for a verification run."""

    extensions: List[ExtensionRequirement] = Field(
        default_factory=_default_extensions,
        description="Extensions to look for, in report order",
    )
    institutional_domains: List[str] = Field(
        default_factory=lambda: list(DEFAULT_INSTITUTIONAL_DOMAINS),
        description="Email fragments that count as an institutional address",
    )
    hosting_domain: str = Field(default=DEFAULT_HOSTING_DOMAIN, description="Expected remote host")
    guide_url: str = Field(default=DEFAULT_GUIDE_URL, description="Setup guide link shown in fixes")
    command_timeout: Optional[float] = Field(
        default=None,
        description="Seconds to wait for each external command; unbounded when unset",
    )
    manual_checklist: List[str] = Field(
        default_factory=lambda: list(MANUAL_CHECKLIST),
        description="Items the user has to verify by hand",
    )

    @field_validator("command_timeout")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("command_timeout must be positive")
        return v

    @field_validator("institutional_domains")
    @classmethod
    def validate_domains(cls, v: List[str]) -> List[str]:
        domains = []
        for domain in v:
            domain = domain.strip().lower()
            if not domain:
                continue
            domains.append(domain if domain.startswith("@") else f"@{domain}")
        if not domains:
            raise ValueError("At least one institutional domain is required")
        return domains
