"""Text normalization for titles and author names."""

import re
import unicodedata

from .models import AuthorName

LEADING_ARTICLES = frozenset({"a", "an", "the"})


def sort_title(title: str | None) -> str | None:
    """
    Rewrite a title starting with an English article into sort order.

    Only the first space-separated word is considered:
    - "The Hobbit" -> "Hobbit, The"
    - "A Tale of Two Cities" -> "Tale of Two Cities, A"
    - "Middlemarch" -> "Middlemarch"

    Returns None when given None.
    """
    if title is None:
        return None

    first_word, _, rest = title.partition(" ")
    if first_word.lower() in LEADING_ARTICLES:
        return f"{rest}, {first_word}"
    return title


def split_author_name(full_name: str) -> AuthorName:
    """
    Split a full name on single spaces into first and last name.

    Tokens past the second are dropped: "F. Scott Fitzgerald" -> ("F.", "Scott").
    """
    names = full_name.split(" ")
    return AuthorName(
        first_name=names[0],
        last_name=names[1] if len(names) > 1 else "",
    )


def normalize_text(text: str) -> str:
    """
    Normalize text for matching purposes.

    Lowercases, removes diacritical marks and punctuation, and collapses
    whitespace.
    """
    if not text:
        return ""

    # Decompose unicode characters and remove combining marks
    nfkd = unicodedata.normalize("NFKD", text)
    result = "".join(c for c in nfkd if not unicodedata.combining(c))

    result = result.lower()
    result = re.sub(r"[^\w\s]", "", result)
    result = re.sub(r"\s+", " ", result).strip()

    return result


def normalize_author_name(first_name: str, last_name: str) -> str:
    """Build the matching key for an author: "Jane", "Smith" -> "jane smith"."""
    return normalize_text(f"{first_name} {last_name}")


def clean_isbn(isbn: str) -> str:
    """
    Strip hyphens and whitespace from a caller-supplied ISBN.

    Only the length is checked. The check digit is not, since catalogs
    index misprinted ISBNs under their printed value.

    Raises:
        ValueError: The result is empty or not 10 or 13 characters long
    """
    cleaned = re.sub(r"[-\s]", "", isbn)
    if len(cleaned) not in (10, 13):
        raise ValueError(f"Invalid ISBN length: {len(cleaned)}")
    return cleaned
