"""Repository identifier helpers."""


def parse_repo_string(repo: str) -> tuple[str, str]:
    """Split an 'owner/slug' string into its two parts.

    Args:
        repo: Repository in owner/slug format (e.g., 'atlassian/stash-example')

    Returns:
        Tuple of (owner, slug)

    Raises:
        ValueError: If either part is missing
    """
    owner, sep, slug = repo.strip().partition("/")
    if not sep or not owner or not slug or "/" in slug:
        raise ValueError(f"Repository must be in owner/slug format: {repo!r}")
    return owner, slug
