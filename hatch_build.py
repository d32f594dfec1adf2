"""Custom build hook for Hatchling to embed the git commit in the package."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Optional

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO = "slidemark/_build_info.py"


class CustomBuildHook(BuildHookInterface):
    """Writes slidemark/_build_info.py before the wheel is assembled."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        root = Path(self.root)
        commit = self._git(["rev-parse", "HEAD"], root)
        date = self._git(["show", "-s", "--format=%cI", "HEAD"], root)
        (root / BUILD_INFO).write_text(
            "# Auto-generated at build time.\n"
            f"COMMIT = {commit!r}\n"
            f"DATE = {date!r}\n",
            encoding="utf-8",
        )
        build_data.setdefault("artifacts", []).append(BUILD_INFO)

    def _git(self, args: list[str], cwd: Path) -> Optional[str]:
        try:
            out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        except (subprocess.CalledProcessError, FileNotFoundError, OSError):
            # A source tree without git still builds
            return None
        return out.decode().strip() or None
