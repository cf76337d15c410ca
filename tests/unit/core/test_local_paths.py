"""Tests for registry path to local path resolution."""

from pathlib import Path

import pytest

from registry_sync.core.local_paths import map_registry_path, resolve_local_path


@pytest.mark.parametrize(
    ("registry_path", "expected"),
    [
        ("registry/components/card.tsx", "src/components/card.tsx"),
        ("registry/hooks/use-toast.ts", "src/hooks/use-toast.ts"),
        ("registry/lib/utils.ts", "src/lib/utils.ts"),
        ("registry/icons/arrow-icon.tsx", "src/components/icons/arrow-icon.tsx"),
        ("registry/components/button/index.tsx", "src/components/button.tsx"),
        ("registry/components/index.tsx", "src/components/index.tsx"),
        ("styles/globals.css", "styles/globals.css"),
    ],
)
def test_map_registry_path(registry_path: str, expected: str) -> None:
    """Test prefix substitution and index collapsing."""
    assert map_registry_path(registry_path) == expected


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")


def test_resolve_primary_path(tmp_path: Path) -> None:
    """Test that the mapped path wins when it exists."""
    _touch(tmp_path / "src/components/card.tsx")
    _touch(tmp_path / "src/components/ui/card.tsx")

    resolved = resolve_local_path(tmp_path, "card", "registry/components/card.tsx")

    assert resolved == Path("src/components/card.tsx")


def test_resolve_swapped_extension(tmp_path: Path) -> None:
    """Test the .ts/.tsx alternative."""
    _touch(tmp_path / "src/hooks/use-mobile.tsx")

    resolved = resolve_local_path(tmp_path, "use-mobile", "registry/hooks/use-mobile.ts")

    assert resolved == Path("src/hooks/use-mobile.tsx")


def test_resolve_ui_subdirectory(tmp_path: Path) -> None:
    """Test the src/components/ui/ alternative."""
    _touch(tmp_path / "src/components/ui/card.tsx")

    resolved = resolve_local_path(tmp_path, "card", "registry/components/card.tsx")

    assert resolved == Path("src/components/ui/card.tsx")


def test_resolve_by_component_name(tmp_path: Path) -> None:
    """Test the fallback on the component name."""
    _touch(tmp_path / "src/components/badge.tsx")

    resolved = resolve_local_path(tmp_path, "badge", "registry/new-york/badge-root.tsx")

    assert resolved == Path("src/components/badge.tsx")


def test_resolve_returns_none_when_nothing_exists(tmp_path: Path) -> None:
    """Test that an unresolvable file yields None."""
    assert resolve_local_path(tmp_path, "card", "registry/components/card.tsx") is None
