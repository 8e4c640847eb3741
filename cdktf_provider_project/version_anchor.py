"""
version_anchor.py

Responsibility: Decide whether a provider project's major version must be pinned to 1.

The first release of a provider must be v1.x. Once a `v1.*` tag exists the major version is
left unset so release tooling can bump it (e.g. to v2 after a breaking change).

The git probe is best-effort: a missing `git`, a non-zero exit, or a timeout all count as
"no matching tags", which pins the version to 1 instead of failing.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 5.0
FIRST_MAJOR_TAG_PATTERN = "v1.*"
INITIAL_MAJOR_VERSION = 1


class TagProbe(Protocol):
    def has_version_control_metadata(self, root: Path) -> bool: ...

    def list_tags(self, root: Path, pattern: str) -> Sequence[str] | None: ...


def has_version_control_metadata(root: str | Path) -> bool:
    return (Path(root) / ".git").exists()


def list_tags(root: str | Path, pattern: str, *, timeout: float = GIT_TIMEOUT_SECONDS) -> list[str] | None:
    """
    List lightweight and annotated tags matching `pattern` in the repo at `root`.

    Returns None when the probe fails for any reason.
    """
    cmd = ["git", "tag", "-l", pattern]
    try:
        out = subprocess.run(
            cmd,
            cwd=str(root),
            check=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        logger.warning("Command failed: %s (exit %s): %s", " ".join(cmd), e.returncode, stderr)
        return None
    except subprocess.TimeoutExpired:
        logger.warning("Command timed out after %ss: %s", timeout, " ".join(cmd))
        return None
    except OSError as e:
        logger.warning("Could not run %s: %s", " ".join(cmd), e)
        return None
    # Tag names are not required to be valid UTF-8.
    return [line.decode("utf-8", errors="replace").strip() for line in out.stdout.splitlines() if line.strip()]


class GitProbe:
    """Default probe backed by the filesystem and the `git` executable."""

    def __init__(self, timeout: float = GIT_TIMEOUT_SECONDS) -> None:
        self.timeout = timeout

    def has_version_control_metadata(self, root: Path) -> bool:
        return has_version_control_metadata(root)

    def list_tags(self, root: Path, pattern: str) -> list[str] | None:
        return list_tags(root, pattern, timeout=self.timeout)


def decide_major_version(has_metadata: bool, tag_count: int | None) -> int | None:
    """
    Two-state decision table.

    | has_metadata | tag_count      | result |
    | False        | (not probed)   | 1      |
    | True         | None (failed)  | 1      |
    | True         | 0              | 1      |
    | True         | >= 1           | None   |
    """
    if not has_metadata:
        return INITIAL_MAJOR_VERSION
    if not tag_count:
        return INITIAL_MAJOR_VERSION
    return None


def resolve_major_version(root: str | Path = ".", *, probe: TagProbe | None = None) -> int | None:
    """Return 1 when the project has no v1.x history yet, otherwise None."""
    probe = probe or GitProbe()
    path = Path(root)

    if not probe.has_version_control_metadata(path):
        logger.debug("No .git directory under %s; pinning major version to %d", path, INITIAL_MAJOR_VERSION)
        return decide_major_version(False, None)

    tags = probe.list_tags(path, FIRST_MAJOR_TAG_PATTERN)
    tag_count = None if tags is None else len(tags)
    major = decide_major_version(True, tag_count)
    logger.debug("Found %s tag(s) matching %s under %s; major version %s", tag_count, FIRST_MAJOR_TAG_PATTERN, path, major)
    return major
