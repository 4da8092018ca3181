"""Utilities for generating task identifiers."""

import re
import secrets
import unicodedata
from collections.abc import Container

MAX_SLUG_LENGTH = 40


def slugify(text: str) -> str:
    """
    Convert text to a filesystem-safe slug.

    Example: "Comprar ingredientes para la cena!" -> "comprar-ingredientes-para-la-cena"
    """
    # Normalize unicode characters
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")

    # Convert to lowercase
    text = text.lower()

    # Replace spaces and underscores with hyphens
    text = re.sub(r"[\s_]+", "-", text)

    # Remove any character that isn't alphanumeric or hyphen
    text = re.sub(r"[^a-z0-9\-]", "", text)

    # Remove leading/trailing hyphens and collapse multiple hyphens
    text = re.sub(r"-+", "-", text).strip("-")

    return text


def generate_task_id(title: str, existing: Container[str] = ()) -> str:
    """
    Generate a unique task ID from a title.

    The ID is a truncated slug of the title plus a random suffix, so two
    tasks with the same title never share an ID and a deleted task's ID is
    not handed out again.

    Example: "Fix Login Bug" -> "fix-login-bug-3f9a2c1b"
    """
    slug = slugify(title)[:MAX_SLUG_LENGTH].strip("-") or "task"
    while True:
        candidate = f"{slug}-{secrets.token_hex(4)}"
        if candidate not in existing:
            return candidate
