"""Parser for SDK-style and legacy MSBuild project files (.csproj / .vbproj)."""

from __future__ import annotations

from pathlib import Path

from nugetsentinel.engines.dependency_scanner.models import PackageRef
from nugetsentinel.engines.dependency_scanner.parsers._xml import (
    clean,
    default_namespace,
    load_document,
)
from nugetsentinel.engines.dependency_scanner.registry import register_parser


class MsBuildProjectParser:
    detection_method = "msbuild-project"
    suffixes = (".csproj", ".vbproj")

    def matches(self, file_name: str) -> bool:
        return file_name.endswith(self.suffixes)

    def parse(self, file_path: Path, content: bytes | str) -> list[PackageRef]:
        root = load_document(file_path, content)
        ns = default_namespace(root)

        refs: list[PackageRef] = []
        for el in root.iter(f"{ns}PackageReference"):
            package_id = clean(el.get("Include"))
            # A Version attribute, even an empty one, wins over a nested <Version>
            raw_version = el.get("Version")
            if raw_version is None:
                child = el.find(f"{ns}Version")
                raw_version = child.text if child is not None else None
            version = clean(raw_version)
            if not package_id or not version:
                continue
            refs.append(PackageRef(id=package_id, version=version))
        return refs


register_parser(MsBuildProjectParser())
