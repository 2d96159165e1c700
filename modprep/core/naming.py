"""Name sanitizing and package id derivation."""
import re

from modprep.core.layout import DEFAULT_AUTHOR, DEFAULT_MOD_SLUG

# Characters Windows refuses in file names, plus ASCII control characters
INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def sanitize_mod_name(name: str) -> str:
    """Replace characters that are not allowed in file names with '_'.

    Returns an empty string for blank input.
    """
    if not name or not name.strip():
        return ""
    return INVALID_FILENAME_CHARS.sub("_", name).strip()


def slug(text: str) -> str:
    """Lower-case token of ASCII alphanumerics joined by single underscores.

    >>> slug("Jelly's  Awesome-Mod")
    'jelly_s_awesome_mod'
    """
    if not text:
        return ""
    return _NON_ALNUM_RUN.sub("_", text.lower()).strip("_")


def build_package_id(prefix: str, mod_name: str) -> str:
    """Derive ``<prefix>.<mod>`` from the author prefix and mod name."""
    prefix_part = slug(prefix) or DEFAULT_AUTHOR
    mod_part = slug(mod_name) or DEFAULT_MOD_SLUG
    return f"{prefix_part}.{mod_part}".lower()


def author_or_default(prefix: str) -> str:
    prefix = (prefix or "").strip()
    return prefix or DEFAULT_AUTHOR
