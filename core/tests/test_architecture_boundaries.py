from __future__ import annotations

import ast
import os
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

PACKAGE_ROOT = Path(PROJECT_ROOT) / "prefkit_core"


def _iter_python_files(root: Path) -> list[Path]:
    return sorted(path for path in root.rglob("*.py") if path.is_file())


def _collect_import_modules(file_path: Path) -> set[str]:
    tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                modules.add(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                modules.add(node.module)
    return modules


def _violations(root: Path, prefixes: tuple[str, ...]) -> list[str]:
    violations: list[str] = []
    for file_path in _iter_python_files(root):
        for module in _collect_import_modules(file_path):
            if module.startswith(prefixes):
                rel = file_path.relative_to(PACKAGE_ROOT.parent)
                violations.append(f"{rel}: {module}")
    return violations


class TestArchitectureBoundaries(unittest.TestCase):
    def test_core_top_level_is_package_only(self) -> None:
        top_level_python = sorted(
            path.name
            for path in PACKAGE_ROOT.glob("*.py")
            if path.is_file()
        )
        self.assertEqual(top_level_python, ["__init__.py"])

    def test_core_does_not_import_apps_scripts_or_qt(self) -> None:
        self.assertEqual(_violations(PACKAGE_ROOT, ("apps", "scripts", "PySide6")), [])

    def test_model_does_not_import_higher_layers(self) -> None:
        prefixes = (
            "prefkit_core.engine",
            "prefkit_core.persistence",
            "prefkit_core.cli",
            "prefkit_core.i18n",
        )
        self.assertEqual(_violations(PACKAGE_ROOT / "model", prefixes), [])

    def test_persistence_does_not_import_engine_or_cli(self) -> None:
        prefixes = ("prefkit_core.engine", "prefkit_core.cli")
        self.assertEqual(_violations(PACKAGE_ROOT / "persistence", prefixes), [])

    def test_catalogs_ship_with_the_package(self) -> None:
        catalogs = PACKAGE_ROOT / "i18n" / "catalogs"
        self.assertTrue((catalogs / "locales.json").exists())
        self.assertTrue((catalogs / "en.json").exists())
        self.assertTrue((catalogs / "es.json").exists())


if __name__ == "__main__":
    unittest.main()
