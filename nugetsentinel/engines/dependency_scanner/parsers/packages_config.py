"""Parser for legacy NuGet packages.config files."""

from __future__ import annotations

from pathlib import Path

from nugetsentinel.engines.dependency_scanner.models import PackageRef
from nugetsentinel.engines.dependency_scanner.parsers._xml import clean, load_document
from nugetsentinel.engines.dependency_scanner.registry import register_parser


class PackagesConfigParser:
    detection_method = "packages-config"
    file_name = "packages.config"

    def matches(self, file_name: str) -> bool:
        return file_name == self.file_name

    def parse(self, file_path: Path, content: bytes | str) -> list[PackageRef]:
        root = load_document(file_path, content)

        refs: list[PackageRef] = []
        for el in root.iter("package"):
            package_id = clean(el.get("id"))
            version = clean(el.get("version"))
            # Partial entries are common in the wild; skip rather than fail.
            if not package_id or not version:
                continue
            refs.append(PackageRef(id=package_id, version=version))
        return refs


register_parser(PackagesConfigParser())
