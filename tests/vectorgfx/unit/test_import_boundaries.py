from __future__ import annotations

import ast
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[3]
PACKAGE_ROOT = REPO_ROOT / "vectorgfx"


def _iter_python_files(base: Path) -> list[Path]:
    files: list[Path] = []
    for path in base.rglob("*.py"):
        if "__pycache__" in path.parts:
            continue
        files.append(path)
    return files


def _collect_import_targets(path: Path, *, top_level_only: bool) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    nodes = tree.body if top_level_only else list(ast.walk(tree))
    targets: list[str] = []
    for node in nodes:
        if isinstance(node, ast.Import):
            for alias in node.names:
                targets.append(alias.name)
        elif isinstance(node, ast.ImportFrom) and node.module is not None:
            targets.append(node.module)
    return targets


def _collect_wildcard_imports(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    wildcards: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.ImportFrom):
            continue
        if any(alias.name == "*" for alias in node.names):
            module = node.module or "<relative>"
            wildcards.append(module)
    return wildcards


def test_runtime_package_does_not_import_geometry() -> None:
    violations: list[str] = []
    for path in _iter_python_files(PACKAGE_ROOT / "runtime"):
        for target in _collect_import_targets(path, top_level_only=False):
            if target == "vectorgfx.geometry" or target.startswith("vectorgfx.geometry."):
                violations.append(f"{path.relative_to(REPO_ROOT)} -> {target}")
    assert not violations, "Runtime support must not import geometry:\n" + "\n".join(violations)


def test_runtime_package_does_not_import_numpy() -> None:
    violations: list[str] = []
    for path in _iter_python_files(PACKAGE_ROOT / "runtime"):
        for target in _collect_import_targets(path, top_level_only=False):
            if target == "numpy" or target.startswith("numpy."):
                violations.append(f"{path.relative_to(REPO_ROOT)} -> {target}")
    assert not violations, "Runtime support must stay numpy-free:\n" + "\n".join(violations)


def test_point_module_has_no_top_level_rectangle_import() -> None:
    path = PACKAGE_ROOT / "geometry" / "point.py"
    targets = _collect_import_targets(path, top_level_only=True)
    assert "vectorgfx.geometry.rectangle" not in targets


def test_no_wildcard_imports_in_package_code() -> None:
    violations: list[str] = []
    for path in _iter_python_files(PACKAGE_ROOT):
        for module in _collect_wildcard_imports(path):
            violations.append(f"{path.relative_to(REPO_ROOT)} -> from {module} import *")
    assert not violations, "Wildcard imports are forbidden in package code:\n" + "\n".join(
        violations
    )
