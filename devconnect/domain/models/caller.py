from dataclasses import dataclass


@dataclass(frozen=True)
class CallerIdentity:
    """Principal resolved from a verified credential; the acting user of every mutation."""
    user_id: str
