"""Utility functions for gitsw."""

PREVIOUS_BRANCH = "-"


def validate_branch_name(branch: str) -> None:
    """Validate branch name to prevent argument injection."""
    if not branch:
        raise ValueError("Branch name cannot be empty")
    if branch == PREVIOUS_BRANCH:
        return
    if branch.startswith("-"):
        raise ValueError(f"Invalid branch name '{branch}': cannot start with '-'")


def strip_remote_prefix(ref: str) -> str:
    """Turn a remote-qualified ref into its local name.

    origin/main -> main, origin/feature/auth -> feature/auth
    """
    _, sep, name = ref.partition("/")
    return name if sep else ref
