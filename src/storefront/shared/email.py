"""Email helpers shared by the user and cart aggregates.

Emails are the join key between a user and their cart, so both sides store
and look them up in the same normalized form.
"""

from protean.exceptions import ValidationError

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def normalize_email(email: str | None) -> str:
    """Trim and lowercase an email so lookups are case-insensitive."""
    return (email or "").strip().lower()


def verify_email_address(email: str) -> None:
    """Ensure that the email address follows a basic valid structure."""
    invalid = ValidationError({"email": [f"{email!r} is not a valid email"]})

    if not email or any(ch.isspace() for ch in email):
        raise invalid

    if email.count("@") != 1:
        raise invalid

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        raise invalid

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        raise invalid

    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        raise invalid

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            raise invalid

    if any(ch in email for ch in _FORBIDDEN):
        raise invalid
