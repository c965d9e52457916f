"""classdeps keeps its own layering: inner layers never import outer ones."""

import ast
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).parent.parent.parent / "src" / "classdeps"

FORBIDDEN = {
    "domain": ("classdeps.application", "classdeps.infrastructure", "classdeps.presentation"),
    "infrastructure": ("classdeps.application", "classdeps.presentation"),
    "application": ("classdeps.presentation",),
}


def _imports(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            modules.add(node.module)
    return modules


@pytest.mark.parametrize("layer", sorted(FORBIDDEN))
def test_layer_does_not_import_outer_layers(layer: str) -> None:
    violations = [
        (path.relative_to(PACKAGE_ROOT).as_posix(), module)
        for path in sorted((PACKAGE_ROOT / layer).rglob("*.py"))
        for module in _imports(path)
        if module.startswith(FORBIDDEN[layer])
    ]
    assert violations == []
