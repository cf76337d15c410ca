import os
import shlex
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from registry_sync.core.inventory import DEFAULT_SCAN_DIRECTORIES, DEFAULT_STYLESHEET, ScanDirectory

CONFIG_FILE_NAME = "registry-sync.toml"

DEFAULT_REGISTRY_URL = "https://redpanda-ui-registry.netlify.app"
DEFAULT_INSTALLER_COMMAND = ("bun", "x", "--bun", "shadcn@latest")
DEFAULT_REQUEST_TIMEOUT = 30.0

REGISTRY_URL_ENV = "REGISTRY_SYNC_URL"
INSTALLER_ENV = "REGISTRY_SYNC_INSTALLER"


@dataclass(frozen=True)
class SyncConfig:
    """In-memory representation of `registry-sync.toml` plus environment overrides."""

    registry_url: str
    installer_command: tuple[str, ...]
    scan_directories: tuple[ScanDirectory, ...]
    stylesheet_path: Path
    request_timeout: float

    @staticmethod
    def defaults() -> "SyncConfig":
        return SyncConfig(
            registry_url=DEFAULT_REGISTRY_URL,
            installer_command=DEFAULT_INSTALLER_COMMAND,
            scan_directories=DEFAULT_SCAN_DIRECTORIES,
            stylesheet_path=DEFAULT_STYLESHEET,
            request_timeout=DEFAULT_REQUEST_TIMEOUT,
        )


def _require_str(value: Any, key: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{CONFIG_FILE_NAME}: '{key}' must be a non-empty string")
    return value


def _require_str_list(value: Any, key: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise ValueError(f"{CONFIG_FILE_NAME}: '{key}' must be a non-empty list of strings")
    if not all(isinstance(item, str) and item for item in value):
        raise ValueError(f"{CONFIG_FILE_NAME}: '{key}' must be a non-empty list of strings")
    return tuple(value)


def _parse_scan_tables(value: Any) -> tuple[ScanDirectory, ...]:
    if not isinstance(value, list) or not all(isinstance(table, dict) for table in value):
        raise ValueError(f"{CONFIG_FILE_NAME}: 'scan' must be an array of tables")
    return tuple(
        ScanDirectory(
            path=Path(_require_str(table.get("path"), "scan.path")),
            extensions=_require_str_list(table.get("extensions"), "scan.extensions"),
        )
        for table in value
    )


def _parse_timeout(value: Any) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        raise ValueError(f"{CONFIG_FILE_NAME}: 'request_timeout' must be a positive number")
    return float(value)


def load_config(project_root: Path, environ: Mapping[str, str] | None = None) -> SyncConfig:
    """Load registry-sync.toml from the project root if present; otherwise use defaults.

    Example config:
      registry_url = "https://ui.example.com"
      installer_command = ["npx", "shadcn@latest"]
      stylesheet = "app/globals.css"
      request_timeout = 10

      [[scan]]
      path = "src/components"
      extensions = [".tsx"]

    REGISTRY_SYNC_URL and REGISTRY_SYNC_INSTALLER override the file.

    Raises:
        ValueError: If the file is not valid TOML or a value has the wrong type
    """
    env = os.environ if environ is None else environ
    defaults = SyncConfig.defaults()

    data: dict[str, Any] = {}
    cfg_path = project_root / CONFIG_FILE_NAME
    if cfg_path.exists():
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))

    registry_url = defaults.registry_url
    if "registry_url" in data:
        registry_url = _require_str(data["registry_url"], "registry_url")
    if env.get(REGISTRY_URL_ENV):
        registry_url = env[REGISTRY_URL_ENV]

    installer_command = defaults.installer_command
    if "installer_command" in data:
        installer_command = _require_str_list(data["installer_command"], "installer_command")
    if env.get(INSTALLER_ENV):
        installer_command = tuple(shlex.split(env[INSTALLER_ENV]))
        if not installer_command:
            raise ValueError(f"{INSTALLER_ENV} must name a command")

    scan_directories = defaults.scan_directories
    if "scan" in data:
        scan_directories = _parse_scan_tables(data["scan"])

    stylesheet_path = defaults.stylesheet_path
    if "stylesheet" in data:
        stylesheet_path = Path(_require_str(data["stylesheet"], "stylesheet"))

    request_timeout = defaults.request_timeout
    if "request_timeout" in data:
        request_timeout = _parse_timeout(data["request_timeout"])

    return SyncConfig(
        registry_url=registry_url.rstrip("/"),
        installer_command=installer_command,
        scan_directories=scan_directories,
        stylesheet_path=stylesheet_path,
        request_timeout=request_timeout,
    )
