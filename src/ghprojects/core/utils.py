"""Small text helpers shared by ops and the CLI."""


def pluralize(count: int, noun: str) -> str:
    """Return ``"1 issue"`` / ``"2 issues"`` style counts."""
    if count == 1:
        return f"{count} {noun}"
    return f"{count} {noun}s"
