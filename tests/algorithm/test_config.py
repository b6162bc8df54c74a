"""Tests for CompareOptions frozen dataclass and IgnoreMatchMode StrEnum.

Covers:
- Default values (no ignored paths, no sort fields, SUBSTRING matching)
- Normalisation of ignored_paths to a frozenset
- Immutability (FrozenInstanceError on assignment)
- Validation: ignored paths must be non-empty strings
- Validation: secondary sort field requires a primary one
- is_ignored() in SUBSTRING and EXACT mode
- from_mapping(): known keys, unknown keys, list-valued ignored_paths
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from structural_diff.algorithm.config import CompareOptions, IgnoreMatchMode

# ---------------------------------------------------------------------------
# IgnoreMatchMode
# ---------------------------------------------------------------------------


class TestIgnoreMatchMode:
    def test_has_exactly_two_members(self) -> None:
        assert len(list(IgnoreMatchMode)) == 2

    def test_values(self) -> None:
        assert IgnoreMatchMode.SUBSTRING == "substring"
        assert IgnoreMatchMode.EXACT == "exact"


# ---------------------------------------------------------------------------
# Defaults and normalisation
# ---------------------------------------------------------------------------


class TestCompareOptionsDefaults:
    def test_default_ignored_paths_empty(self) -> None:
        assert CompareOptions().ignored_paths == frozenset()

    def test_default_sort_fields_empty(self) -> None:
        options = CompareOptions()
        assert options.primary_sort_field == ""
        assert options.secondary_sort_field == ""

    def test_default_mode_is_substring(self) -> None:
        assert CompareOptions().ignore_match_mode is IgnoreMatchMode.SUBSTRING

    def test_list_of_paths_is_frozen(self) -> None:
        options = CompareOptions(ignored_paths=["a/b", "c"])  # type: ignore[arg-type]
        assert options.ignored_paths == frozenset({"a/b", "c"})
        assert isinstance(options.ignored_paths, frozenset)

    def test_mode_string_is_coerced(self) -> None:
        options = CompareOptions(ignore_match_mode="exact")  # type: ignore[arg-type]
        assert options.ignore_match_mode is IgnoreMatchMode.EXACT

    def test_is_frozen(self) -> None:
        options = CompareOptions()
        with pytest.raises(FrozenInstanceError):
            options.primary_sort_field = "id"  # type: ignore[misc]

    def test_equal_options_compare_equal(self) -> None:
        assert CompareOptions(ignored_paths={"a"}) == CompareOptions(
            ignored_paths=frozenset({"a"})
        )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestCompareOptionsValidation:
    def test_single_string_rejected(self) -> None:
        with pytest.raises(ValueError, match="not a single string"):
            CompareOptions(ignored_paths="catalog/note")  # type: ignore[arg-type]

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            CompareOptions(ignored_paths={"  "})

    def test_non_string_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be strings"):
            CompareOptions(ignored_paths={1})  # type: ignore[arg-type]

    def test_secondary_without_primary_rejected(self) -> None:
        with pytest.raises(ValueError, match="requires a primary_sort_field"):
            CompareOptions(secondary_sort_field="name")

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(ValueError):
            CompareOptions(ignore_match_mode="prefix")  # type: ignore[arg-type]

    def test_non_string_sort_field_rejected(self) -> None:
        with pytest.raises(ValueError, match="primary_sort_field must be a string"):
            CompareOptions(primary_sort_field=None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# is_ignored
# ---------------------------------------------------------------------------


class TestIsIgnored:
    def test_substring_matches_exact_path(self) -> None:
        options = CompareOptions(ignored_paths={"catalog/internalNote"})
        assert options.is_ignored("catalog/internalNote")

    def test_substring_matches_descendant(self) -> None:
        options = CompareOptions(ignored_paths={"catalog/internalNote"})
        assert options.is_ignored("catalog/internalNote/author")

    def test_substring_matches_inside_path(self) -> None:
        options = CompareOptions(ignored_paths={"item/price"})
        assert options.is_ignored("catalog/item/price")

    def test_substring_does_not_match_unrelated(self) -> None:
        options = CompareOptions(ignored_paths={"catalog/internalNote"})
        assert not options.is_ignored("catalog/item")

    def test_exact_matches_only_equal_path(self) -> None:
        options = CompareOptions(
            ignored_paths={"item/price"}, ignore_match_mode=IgnoreMatchMode.EXACT
        )
        assert options.is_ignored("item/price")
        assert not options.is_ignored("catalog/item/price")

    def test_nothing_ignored_by_default(self) -> None:
        assert not CompareOptions().is_ignored("catalog")

    def test_empty_root_path_never_ignored(self) -> None:
        options = CompareOptions(ignored_paths={"a"})
        assert not options.is_ignored("")


# ---------------------------------------------------------------------------
# from_mapping
# ---------------------------------------------------------------------------


class TestFromMapping:
    def test_full_mapping(self) -> None:
        options = CompareOptions.from_mapping(
            {
                "ignored_paths": ["catalog/internalNote"],
                "primary_sort_field": "id",
                "secondary_sort_field": "name",
                "ignore_match_mode": "exact",
            }
        )
        assert options == CompareOptions(
            ignored_paths=frozenset({"catalog/internalNote"}),
            primary_sort_field="id",
            secondary_sort_field="name",
            ignore_match_mode=IgnoreMatchMode.EXACT,
        )

    def test_empty_mapping_gives_defaults(self) -> None:
        assert CompareOptions.from_mapping({}) == CompareOptions()

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown option"):
            CompareOptions.from_mapping({"ignored_tags": ["a"]})

    def test_string_ignored_paths_rejected(self) -> None:
        with pytest.raises(ValueError, match="list of strings"):
            CompareOptions.from_mapping({"ignored_paths": "a"})
