from typing import Iterable, Optional, Tuple


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def find_localisation(localisations: Iterable, language):
    """Return the localisation row for `language`, or None."""
    if language is None:
        return None

    return next(
        (loc for loc in localisations if loc.language_id == language.id),
        None
    )


def localise_text(
    text: str,
    title: Optional[str],
    localisations: Iterable,
    language,
) -> Tuple[str, Optional[str]]:
    """
    Effective (text, title) for a menu item in `language`.

    Each field falls back to its base value on its own when the
    localised value is blank.
    """
    localisation = find_localisation(localisations, language)
    if localisation is None:
        return text, title

    if not is_blank(localisation.text):
        text = localisation.text
    if not is_blank(localisation.title):
        title = localisation.title

    return text, title
