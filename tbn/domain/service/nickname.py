"""Nickname derivation shared by registration, login and restore."""

import secrets
from typing import Callable

SuffixFactory = Callable[[], str]

# Width of the nickname columns
NICKNAME_MAX_LENGTH = 50


def random_suffix() -> str:
    return secrets.token_hex(4)


def _fit(nickname: str) -> str:
    return nickname[:NICKNAME_MAX_LENGTH].rstrip()


def compute_nickname(
    display_name: str | None,
    email: str | None,
    suffix_factory: SuffixFactory = random_suffix,
) -> str:
    """Pick the nickname a (re)activated account starts with.

    Precedence: non-blank display name, then the local part of the email,
    then a synthesized ``user_<suffix>``. The result is cut to
    NICKNAME_MAX_LENGTH characters.

    Args:
        display_name: Name asserted by the provider or given at registration
        email: Account email
        suffix_factory: Produces the suffix of a synthesized nickname

    Returns:
        Candidate nickname
    """
    if display_name and display_name.strip():
        return _fit(display_name.strip())
    if email and "@" in email:
        local_part = email.split("@", 1)[0]
        if local_part:
            return _fit(local_part)
    return f"user_{suffix_factory()}"
