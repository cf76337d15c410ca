"""Tests for registry name categories."""

from registry_sync.core.breakdown import categorize


def test_categorize_places_each_name_once() -> None:
    """Test that every name lands in exactly one category."""
    names = ["button", "use-toast", "arrow-icon", "theme", "card", "use-mobile"]

    categories = categorize(names)

    assert categories.components == ("button", "card")
    assert categories.hooks == ("use-toast", "use-mobile")
    assert categories.icons == ("arrow-icon",)
    assert categories.theme == ("theme",)
    assert categories.total == len(names)


def test_restricted_to_keeps_category_order() -> None:
    """Test narrowing categories to a subset of names."""
    categories = categorize(["button", "card", "use-toast", "arrow-icon"])

    missing = categories.restricted_to(["use-toast", "card"])

    assert missing.components == ("card",)
    assert missing.hooks == ("use-toast",)
    assert missing.icons == ()
    assert missing.total == 2
