"""Git plumbing: branch listing and switching."""

import logging
import subprocess
import time
from dataclasses import dataclass, field

from gitsw.config import DEFAULT_TIMEOUT
from gitsw.exceptions import GitError, GitTimeoutError, SwitchError
from gitsw.utils import validate_branch_name

logger = logging.getLogger(__name__)

LOCAL_REFS = "refs/heads"
REMOTE_REFS = "refs/remotes"


class Deadline:
    """A single time budget shared by every listing query of one run."""

    def __init__(self, seconds: float = DEFAULT_TIMEOUT):
        self.seconds = seconds
        self.expires_at = time.monotonic() + seconds

    def remaining(self) -> float:
        left = self.expires_at - time.monotonic()
        if left <= 0:
            raise GitTimeoutError(f"Timed out after {self.seconds:g}s listing branches")
        return left


@dataclass
class BranchListing:
    """Result of one listing phase."""

    local: list[str] = field(default_factory=list)
    remote: list[str] = field(default_factory=list)
    current: str | None = None


def _run_git(args: list[str], deadline: Deadline | None = None) -> subprocess.CompletedProcess:
    """Run git with captured output, bounded by the deadline if one is given."""
    command = ["git", *args]
    timeout = deadline.remaining() if deadline is not None else None
    logger.debug("Running %s (timeout=%s)", " ".join(command), timeout)
    try:
        return subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise GitError("git executable not found", command=command) from e
    except subprocess.TimeoutExpired as e:
        seconds = deadline.seconds if deadline is not None else timeout
        raise GitTimeoutError(
            f"Timed out after {seconds:g}s listing branches", command=command
        ) from e


def _list_refs(namespace: str, deadline: Deadline | None) -> list[str]:
    result = _run_git(["for-each-ref", "--format=%(refname:short)", namespace], deadline)
    if result.returncode != 0:
        raise GitError(
            f"Failed to list {namespace}",
            command=result.args,
            exit_code=result.returncode,
            stderr=result.stderr,
        )
    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def list_local_branches(deadline: Deadline | None = None) -> list[str]:
    """Get sorted local branch names."""
    return sorted(set(_list_refs(LOCAL_REFS, deadline)))


def list_remote_branches(deadline: Deadline | None = None) -> list[str]:
    """Get sorted remote-tracking branch names, without symbolic HEAD pointers."""
    branches = set()
    for ref in _list_refs(REMOTE_REFS, deadline):
        # "origin" alone is what refname:short gives for refs/remotes/origin/HEAD
        if "/" not in ref:
            continue
        if ref.endswith("/HEAD"):
            continue
        branches.add(ref)
    return sorted(branches)


def get_current_branch(deadline: Deadline | None = None) -> str | None:
    """Get the checked-out branch name, or None on a detached HEAD."""
    result = _run_git(["symbolic-ref", "--quiet", "--short", "HEAD"], deadline)
    if result.returncode == 0:
        return result.stdout.strip() or None
    # --quiet: a detached HEAD exits 1 without a message
    if result.returncode == 1 and not result.stderr.strip():
        logger.debug("HEAD is detached")
        return None
    raise GitError(
        "Failed to read current branch",
        command=result.args,
        exit_code=result.returncode,
        stderr=result.stderr,
    )


def list_branches(
    local: bool = True, remote: bool = False, timeout: float = DEFAULT_TIMEOUT
) -> BranchListing:
    """Run every listing query for one invocation under a single deadline."""
    deadline = Deadline(timeout)
    listing = BranchListing()
    if local:
        listing.local = list_local_branches(deadline)
    if remote:
        listing.remote = list_remote_branches(deadline)
    listing.current = get_current_branch(deadline)
    logger.debug(
        "Found %d local, %d remote branches (current: %s)",
        len(listing.local),
        len(listing.remote),
        listing.current,
    )
    return listing


def switch_branch(branch: str) -> None:
    """Run ``git switch``, streaming its output straight to the terminal."""
    validate_branch_name(branch)
    command = ["git", "switch", branch]
    logger.debug("Running %s", " ".join(command))
    try:
        result = subprocess.run(command)
    except FileNotFoundError as e:
        raise GitError("git executable not found", command=command) from e
    if result.returncode != 0:
        raise SwitchError(
            f"git switch exited with status {result.returncode}",
            command=command,
            exit_code=result.returncode,
        )
