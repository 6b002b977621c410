import re

_LOWERCASE_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
})


def create_listing_slug(listing_name: str) -> str:
    """Turn a listing name into a URL-safe slug: "2B N1 A" -> "2b-n1-a"."""
    slug = re.sub(r"[^a-z0-9]+", "-", listing_name.lower().strip())
    return slug.strip("-")


def _title_word(word: str) -> str:
    if len(word) == 1:
        return word.upper()
    if word.isdigit():
        return word
    if re.fullmatch(r"\d+[a-z]+", word):
        return word[0] + word[1:].upper()
    if word in _LOWERCASE_WORDS:
        return word
    return word.capitalize()


def slug_to_listing_name(slug: str) -> str:
    """Best-effort reverse of create_listing_slug."""
    return " ".join(_title_word(w) for w in slug.lower().split("-") if w)


def is_valid_slug(slug: str) -> bool:
    return re.fullmatch(r"[a-z0-9]+(?:-[a-z0-9]+)*", slug) is not None


def find_best_matching_listing(slug: str, available_listings: list[str]) -> str | None:
    """Resolve a slug to one of the known listing names.

    Tries, in order: exact name match, case-insensitive name match, slug
    match, then a match ignoring every non-alphanumeric character.
    """
    converted = slug_to_listing_name(slug)

    for listing in available_listings:
        if listing == converted:
            return listing

    for listing in available_listings:
        if listing.lower() == converted.lower():
            return listing

    for listing in available_listings:
        if create_listing_slug(listing) == slug:
            return listing

    compact_slug = slug.replace("-", "").lower()
    for listing in available_listings:
        if re.sub(r"[^a-z0-9]", "", listing.lower()) == compact_slug:
            return listing

    return None
