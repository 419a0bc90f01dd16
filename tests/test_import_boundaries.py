"""
Layering guard, checked by parsing imports with ``ast``.

- UI code (src/eventdesk/ui/) talks to the backend only through the HTTP
  client and the DTOs in eventdesk.api.schemas: no ORM, no DB, no services.
- Services and tools never import fastapi, so they stay usable from the CLI
  and from tests without an app.
"""

import ast
from collections.abc import Callable
from pathlib import Path

REPO_ROOT = Path(__file__).parent.parent
PACKAGE_ROOT = REPO_ROOT / "src" / "eventdesk"

UI_BANNED_MODULES = {"sqlmodel", "sqlalchemy"}
UI_BANNED_PREFIXES = (
    "eventdesk.models",
    "eventdesk.db",
    "eventdesk.infra",
    "eventdesk.services",
    "eventdesk.tools",
)


def _imported_modules(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    names: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            names.append(node.module or "")
    return names


def _violations(root: Path, is_banned: Callable[[str], bool]) -> list[str]:
    return [
        path.relative_to(REPO_ROOT).as_posix()
        for path in sorted(root.rglob("*.py"))
        if any(is_banned(m) for m in _imported_modules(path))
    ]


def _ui_banned(module: str) -> bool:
    top = module.split(".")[0]
    return top in UI_BANNED_MODULES or module.startswith(UI_BANNED_PREFIXES)


def _is_fastapi(module: str) -> bool:
    return module.split(".")[0] == "fastapi"


def test_ui_import_boundaries() -> None:
    violations = _violations(PACKAGE_ROOT / "ui", _ui_banned)
    assert not violations, (
        "UI files must go through the API client, not the ORM/DB/services:\n"
        + "\n".join(f"  {v}" for v in violations)
    )


def test_ui_tree_is_scanned() -> None:
    scanned = {p.name for p in (PACKAGE_ROOT / "ui").rglob("*.py")}
    assert {"api_client.py", "1_dashboard.py", "2_communications.py", "stat_cards.py"} <= scanned


def test_service_and_tool_import_boundaries() -> None:
    violations = _violations(PACKAGE_ROOT / "services", _is_fastapi)
    violations += _violations(PACKAGE_ROOT / "tools", _is_fastapi)
    assert not violations, (
        "Service/tool files must not import fastapi:\n"
        + "\n".join(f"  {v}" for v in violations)
    )
