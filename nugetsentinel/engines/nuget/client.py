"""Async NuGet V3 registry client — package metadata and status resolution."""

from __future__ import annotations

from typing import Any, Protocol
from urllib.parse import quote

import httpx
import structlog
from pydantic import ValidationError

from nugetsentinel import __version__
from nugetsentinel.core.config import DEFAULT_HTTP_TIMEOUT, DEFAULT_NUGET_SOURCE
from nugetsentinel.engines.dependency_scanner.models import PackageRef
from nugetsentinel.engines.nuget.models import (
    CatalogEntry,
    PackageStatus,
    RegistrationIndex,
    RegistrationPage,
    ServiceIndex,
)
from nugetsentinel.engines.nuget.versioning import NuGetVersion
from nugetsentinel.exceptions import RegistryError

log = structlog.get_logger("nugetsentinel.engine.nuget")

# Preferred first; 3.6.0 is the SemVer 2.0.0 aware hive.
REGISTRATION_RESOURCE_TYPES = (
    "RegistrationsBaseUrl/3.6.0",
    "RegistrationsBaseUrl/3.4.0",
    "RegistrationsBaseUrl/Versioned",
    "RegistrationsBaseUrl",
)


class StatusResolver(Protocol):
    """Anything that can turn a package reference into a registry verdict."""

    async def resolve_status(self, ref: PackageRef) -> PackageStatus: ...


class NuGetClient:
    """Thin async wrapper around the NuGet V3 service index and registration API."""

    def __init__(
        self,
        source: str = DEFAULT_NUGET_SOURCE,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.source = source
        self._client = httpx.AsyncClient(
            headers={
                "Accept": "application/json",
                "User-Agent": f"nugetsentinel/{__version__}",
            },
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )
        self._registration_base: str | None = None

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> NuGetClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    async def get_registration_base(self) -> str:
        """Discover the registration base URL from the service index.

        The result is memoised for the lifetime of the client.
        """
        if self._registration_base is not None:
            return self._registration_base

        data = await self._get_json(self.source)
        try:
            index = ServiceIndex.model_validate(data)
        except ValidationError as exc:
            raise RegistryError(f"invalid service index at {self.source}: {exc}") from exc

        by_type = {res.type: res.id for res in index.resources}
        for resource_type in REGISTRATION_RESOURCE_TYPES:
            if resource_type in by_type:
                self._registration_base = by_type[resource_type].rstrip("/") + "/"
                log.debug(
                    "nuget.registration_base",
                    source=self.source,
                    resource_type=resource_type,
                    url=self._registration_base,
                )
                return self._registration_base

        raise RegistryError(f"service index at {self.source} has no RegistrationsBaseUrl resource")

    async def get_metadata(
        self,
        package_id: str,
        *,
        include_prerelease: bool = True,
        include_unlisted: bool = True,
    ) -> list[CatalogEntry]:
        """Return every published catalog entry for *package_id*.

        An unknown package yields an empty list.
        """
        base = await self.get_registration_base()
        url = f"{base}{quote(package_id.lower(), safe='')}/index.json"
        data = await self._get_json(url, allow_missing=True)
        if data is None:
            log.debug("nuget.package_not_found", package_id=package_id)
            return []

        index = self._validate(RegistrationIndex, data, url)
        entries: list[CatalogEntry] = []
        for page in index.items:
            if page.items is None:
                page = self._validate(RegistrationPage, await self._get_json(page.id), page.id)
            entries.extend(leaf.catalog_entry for leaf in page.items or [])

        if not include_unlisted:
            entries = [e for e in entries if e.listed]
        if not include_prerelease:
            entries = [e for e in entries if not _is_prerelease(e.version)]
        return entries

    async def resolve_status(self, ref: PackageRef) -> PackageStatus:
        """Resolve the deprecation/vulnerability verdict for one package version.

        Unknown packages, unknown versions and versions that are not valid
        NuGet versions resolve to the default (clean) status.
        """
        target = NuGetVersion.try_parse(ref.version)
        if target is None:
            log.debug("nuget.unparsable_version", package_id=ref.id, version=ref.version)
            return PackageStatus()

        entries = await self.get_metadata(ref.id, include_prerelease=True, include_unlisted=True)
        match = next(
            (e for e in entries if NuGetVersion.try_parse(e.version) == target),
            None,
        )
        if match is None:
            log.debug("nuget.version_not_found", package_id=ref.id, version=ref.version)
            return PackageStatus()

        return PackageStatus(
            deprecated=match.deprecation is not None,
            vulnerable=bool(match.vulnerabilities),
        )

    # ── internal ───────────────────────────────────────────────────────────

    async def _get_json(self, url: str, *, allow_missing: bool = False) -> Any:
        """GET *url* and return decoded JSON; ``None`` on 404 when *allow_missing*."""
        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as exc:
            log.warning("nuget.request_failed", url=url, error=str(exc))
            raise RegistryError(f"request to {url} failed: {exc}") from exc

        if resp.status_code == 404 and allow_missing:
            return None
        if not resp.is_success:
            log.warning("nuget.bad_status", url=url, status=resp.status_code)
            raise RegistryError(f"{url} returned HTTP {resp.status_code}")

        try:
            return resp.json()
        except ValueError as exc:
            raise RegistryError(f"{url} returned invalid JSON") from exc

    @staticmethod
    def _validate(model: type[Any], data: Any, url: str) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise RegistryError(f"unexpected registration payload at {url}: {exc}") from exc


def _is_prerelease(version: str) -> bool:
    parsed = NuGetVersion.try_parse(version)
    return parsed is not None and parsed.is_prerelease
