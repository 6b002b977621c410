from reviewhub.mappers.slugs import (
    create_listing_slug,
    find_best_matching_listing,
    is_valid_slug,
    slug_to_listing_name,
)

LISTINGS = [
    "2B N1 A - 29 Shoreditch Heights",
    "1B Central London - Modern Flat",
    "King's Cross Studio",
]


def test_create_slug():
    assert create_listing_slug("2B N1 A - 29 Shoreditch Heights") == "2b-n1-a-29-shoreditch-heights"
    assert create_listing_slug("  Flex Living -- Canary Wharf!  ") == "flex-living-canary-wharf"


def test_slug_to_listing_name():
    assert slug_to_listing_name("2b-n1-a-29-shoreditch-heights") == "2B N1 A 29 Shoreditch Heights"
    assert slug_to_listing_name("house-by-the-river") == "House by the River"


def test_find_by_slug():
    assert find_best_matching_listing("2b-n1-a-29-shoreditch-heights", LISTINGS) == LISTINGS[0]
    assert find_best_matching_listing("1b-central-london-modern-flat", LISTINGS) == LISTINGS[1]


def test_find_case_insensitive():
    assert find_best_matching_listing("kings-cross", ["KINGS CROSS"]) == "KINGS CROSS"


def test_find_fuzzy():
    assert find_best_matching_listing("kingscross-studio", LISTINGS) == "King's Cross Studio"


def test_find_none():
    assert find_best_matching_listing("unknown-place", LISTINGS) is None


def test_is_valid_slug():
    assert is_valid_slug("central-london")
    assert not is_valid_slug("-central")
    assert not is_valid_slug("central--london")
    assert not is_valid_slug("Central")
