"""Shared pytest fixtures — registry stubs and declaration file builders."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
import structlog

SOURCE = "https://nuget.test/v3/index.json"
REGISTRATION_BASE = "https://nuget.test/v3/registration5-gz-semver2/"


def _catalog_entry(
    package_id: str,
    version: str,
    *,
    deprecated: bool = False,
    vulnerable: bool = False,
    listed: bool = True,
) -> dict:
    entry: dict = {
        "@id": f"https://nuget.test/v3/catalog0/{package_id.lower()}.{version}.json",
        "id": package_id,
        "version": version,
        "listed": listed,
    }
    if deprecated:
        entry["deprecation"] = {"reasons": ["Legacy"], "message": "Use something else"}
    if vulnerable:
        entry["vulnerabilities"] = [
            {"advisoryUrl": "https://github.com/advisories/GHSA-xxxx", "severity": "2"}
        ]
    return entry


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo ``setup_logging`` so each test starts from structlog's defaults."""
    yield
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)
    logging.getLogger("nugetsentinel").setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.fixture
def catalog_entry():
    return _catalog_entry


@pytest.fixture
def nuget_source() -> str:
    return SOURCE


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler) -> None:
        super().__init__(handler)
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return await super().handle_async_request(request)


@pytest.fixture
def registry_transport() -> Callable[..., RecordingTransport]:
    """Build a MockTransport serving a service index and registration indexes.

    *packages* maps lowercase package id -> list of catalog entries. Every
    request is recorded in ``transport.requests``.
    """

    def _build(packages: dict[str, list[dict]], *, status_overrides: dict[str, int] | None = None):
        overrides = status_overrides or {}

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            if url in overrides:
                return httpx.Response(overrides[url])
            if url == SOURCE:
                return httpx.Response(
                    200,
                    json={
                        "version": "3.0.0",
                        "resources": [
                            {
                                "@id": "https://nuget.test/v3/search",
                                "@type": "SearchQueryService",
                            },
                            {
                                "@id": REGISTRATION_BASE,
                                "@type": "RegistrationsBaseUrl/3.6.0",
                            },
                        ],
                    },
                )
            if url.startswith(REGISTRATION_BASE) and url.endswith("/index.json"):
                package_id = url[len(REGISTRATION_BASE) : -len("/index.json")]
                if package_id not in packages:
                    return httpx.Response(404)
                leaves = [{"catalogEntry": e} for e in packages[package_id]]
                return httpx.Response(
                    200,
                    json={
                        "count": 1,
                        "items": [
                            {
                                "@id": f"{url}#page/0",
                                "lower": leaves[0]["catalogEntry"]["version"] if leaves else "",
                                "upper": leaves[-1]["catalogEntry"]["version"] if leaves else "",
                                "items": leaves,
                            }
                        ],
                    },
                )
            return httpx.Response(404)

        return RecordingTransport(handler)

    return _build


@pytest.fixture
def write_packages_config() -> Callable[..., Path]:
    def _write(directory: Path, *packages: tuple[str, str]) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        lines = ['<?xml version="1.0" encoding="utf-8"?>', "<packages>"]
        for package_id, version in packages:
            lines.append(f'  <package id="{package_id}" version="{version}" targetFramework="net48" />')
        lines.append("</packages>")
        path = directory / "packages.config"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_project() -> Callable[..., Path]:
    def _write(path: Path, *packages: tuple[str, str]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        refs = "\n".join(
            f'    <PackageReference Include="{package_id}" Version="{version}" />'
            for package_id, version in packages
        )
        path.write_text(
            '<Project Sdk="Microsoft.NET.Sdk">\n'
            "  <PropertyGroup>\n"
            "    <TargetFramework>net8.0</TargetFramework>\n"
            "  </PropertyGroup>\n"
            "  <ItemGroup>\n"
            f"{refs}\n"
            "  </ItemGroup>\n"
            "</Project>\n",
            encoding="utf-8",
        )
        return path

    return _write
