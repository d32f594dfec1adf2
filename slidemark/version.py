"""Version string for ``slidemark --version``.

The commit is looked up, in order, in a live git checkout, in the
``_build_info.py`` file written by the hatch build hook, and in the PEP 610
``direct_url.json`` of a VCS install.
"""

from __future__ import annotations

import importlib.metadata
import json
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

DISTRIBUTION = "slidemark"


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]
    dirty: bool = False


def _git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def _from_git_checkout() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    root = _git(["rev-parse", "--show-toplevel"], here)
    if not root:
        return None
    status = _git(["status", "--porcelain"], Path(root))
    return BuildInfo(
        commit=_git(["rev-parse", "HEAD"], Path(root)),
        date=_git(["show", "-s", "--format=%cI", "HEAD"], Path(root)),
        dirty=bool(status),
    )


def _from_build_file() -> Optional[BuildInfo]:
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    return BuildInfo(commit=getattr(_build_info, "COMMIT", None),
                     date=getattr(_build_info, "DATE", None))


def _from_direct_url() -> Optional[BuildInfo]:
    try:
        text = importlib.metadata.distribution(DISTRIBUTION).read_text("direct_url.json")
    except importlib.metadata.PackageNotFoundError:
        return None
    if not text:
        return None
    try:
        commit = (json.loads(text).get("vcs_info") or {}).get("commit_id")
    except (json.JSONDecodeError, AttributeError):
        return None
    # direct_url.json records no commit date
    return BuildInfo(commit=commit, date=None) if commit else None


def get_build_info() -> BuildInfo:
    for source in (_from_git_checkout, _from_build_file, _from_direct_url):
        info = source()
        if info and (info.commit or info.date):
            return info
    return BuildInfo(commit=None, date=None)


def get_version_string() -> str:
    """Return ``<short commit>[-dirty] <date>``."""
    info = get_build_info()
    commit = info.commit[:7] if info.commit else "unknown"
    dirty_suffix = "-dirty" if info.dirty else ""
    return f"{commit}{dirty_suffix} {info.date or 'unknown'}"
