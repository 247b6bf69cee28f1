import re
from typing import Final

EMAIL_REGEX: Final = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def normalize_email(raw: str) -> str:
    return raw.strip().lower()


def is_valid_email(candidate: str) -> bool:
    """
    Check that an email is shaped like `local@domain.tld`. This is purely a
    syntax check, no DNS lookups or mailbox checks are done.
    """

    return EMAIL_REGEX.fullmatch(candidate) is not None
