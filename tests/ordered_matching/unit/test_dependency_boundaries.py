"""Boundary tests for the ordered_matching core."""

from __future__ import annotations

from pathlib import Path


def _matching_dir() -> Path:
    project_root = Path(__file__).resolve().parents[3]
    return project_root / "src" / "simple_order_checker" / "ordered_matching"


def _core_modules() -> tuple[Path, ...]:
    matching_dir = _matching_dir()
    return (
        matching_dir / "match_outcomes.py",
        matching_dir / "subsequence_matcher.py",
    )


def test_matching_core_does_not_import_io_or_process_libraries() -> None:
    forbidden_import_fragments = (
        "import logging",
        "import json",
        "import yaml",
        "import click",
        "from openpyxl",
        "from pathlib",
    )

    for module_path in _core_modules():
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"


def test_matching_core_has_no_type_check_suppressions() -> None:
    for module_path in _core_modules():
        text = module_path.read_text(encoding="utf-8")
        assert "type: ignore" not in text, f"Type check suppression in {module_path}"


def test_package_contains_only_the_matching_library() -> None:
    package_dir = _matching_dir().parent
    subpackages = sorted(
        path.name for path in package_dir.iterdir() if (path / "__init__.py").exists()
    )
    modules = sorted(path.name for path in package_dir.glob("*.py"))

    assert subpackages == ["ordered_matching"]
    assert modules == ["__init__.py"]
