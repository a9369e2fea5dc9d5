"""Data models for the NuGet registry engine.

The pydantic models cover the subset of the NuGet V3 service index and
registration (package metadata) resources that status resolution reads.
Unknown fields are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class PackageStatus:
    """Registry verdict for one package version.

    The default value means "clean or unknown".
    """

    deprecated: bool = False
    vulnerable: bool = False

    @property
    def flagged(self) -> bool:
        return self.deprecated or self.vulnerable


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ServiceResource(_WireModel):
    id: str = Field(alias="@id")
    type: str = Field(alias="@type")


class ServiceIndex(_WireModel):
    version: str | None = None
    resources: list[ServiceResource] = []


class Deprecation(_WireModel):
    reasons: list[str] = []
    message: str | None = None


class Vulnerability(_WireModel):
    advisory_url: str | None = Field(default=None, alias="advisoryUrl")
    severity: str | None = None


class CatalogEntry(_WireModel):
    package_id: str = Field(alias="id")
    version: str
    listed: bool = True
    deprecation: Deprecation | None = None
    vulnerabilities: list[Vulnerability] | None = None


class RegistrationLeaf(_WireModel):
    catalog_entry: CatalogEntry = Field(alias="catalogEntry")


class RegistrationPage(_WireModel):
    id: str = Field(alias="@id")
    lower: str | None = None
    upper: str | None = None
    items: list[RegistrationLeaf] | None = None


class RegistrationIndex(_WireModel):
    items: list[RegistrationPage] = []
