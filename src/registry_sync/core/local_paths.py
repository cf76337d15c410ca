"""Mapping of registry file paths to files in the local project."""

from pathlib import Path, PurePosixPath

# Registry source prefix -> local prefix, first match wins
REGISTRY_PATH_MAPPINGS = (
    ("registry/components", "src/components"),
    ("registry/hooks", "src/hooks"),
    ("registry/lib", "src/lib"),
    ("registry/icons", "src/components/icons"),
)

INDEX_FILE = "index.tsx"


def map_registry_path(registry_path: str) -> str:
    """Translate a registry path to the project path it normally lands on.

    ``registry/components/button/index.tsx`` collapses to
    ``src/components/button.tsx``.
    """
    local_path = registry_path
    for registry_prefix, local_prefix in REGISTRY_PATH_MAPPINGS:
        if registry_path.startswith(registry_prefix):
            local_path = local_prefix + registry_path[len(registry_prefix) :]
            break

    if INDEX_FILE in registry_path:
        parts = local_path.split("/")
        component_dir = parts[-2] if len(parts) >= 2 else ""
        if component_dir and component_dir != "components":
            local_path = f"src/components/{component_dir}.tsx"

    return local_path


def candidate_paths(component_name: str, registry_path: str) -> list[str]:
    """Local paths to try, most likely first, without duplicates."""
    primary = map_registry_path(registry_path)
    candidates = [primary]
    if primary.endswith(".tsx"):
        candidates.append(primary[: -len(".tsx")] + ".ts")
    elif primary.endswith(".ts"):
        candidates.append(primary + "x")
    candidates.append(primary.replace("src/components/", "src/components/ui/", 1))
    candidates.append(f"src/components/{component_name}.tsx")
    candidates.append(f"src/components/ui/{component_name}.tsx")
    return list(dict.fromkeys(candidates))


def resolve_local_path(project_root: Path, component_name: str, registry_path: str) -> Path | None:
    """Find the local file corresponding to a registry file.

    Returns:
        Path relative to ``project_root`` of the first candidate that is a
        regular file, or None if no candidate exists
    """
    for candidate in candidate_paths(component_name, registry_path):
        relative = Path(PurePosixPath(candidate))
        if (project_root / relative).is_file():
            return relative
    return None
