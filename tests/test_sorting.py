"""Tests for natural ordering and StableComparer."""
from dataclasses import dataclass
from unittest import mock

import pytest

from tumblget.utils.sorting import (
    SortDescription,
    SortDirection,
    StableComparer,
    natural_compare,
    natural_sort_key,
)


class TestNaturalCompare:
    def test_alphabetical(self):
        assert natural_compare("apple", "banana") < 0

    def test_equal(self):
        assert natural_compare("same", "same") == 0

    def test_file2_before_file10(self):
        assert natural_compare("file2", "file10") < 0
        assert natural_compare("file10", "file2") > 0

    def test_numeric_parts_with_extension(self):
        assert natural_compare("img3.png", "img12.png") < 0
        assert natural_compare("img12.png", "img3.png") > 0

    def test_case_insensitive(self):
        assert natural_compare("Apple", "apple") == 0

    def test_alphanumeric_complex(self):
        assert natural_compare("a1b2", "a1b10") < 0

    def test_digits_before_letters(self):
        assert natural_compare("1abc", "abc") < 0

    def test_prefix_sorts_first(self):
        assert natural_compare("file", "file1") < 0

    def test_sort_key(self):
        names = ["post10.jpg", "Post2.jpg", "post1.jpg"]
        assert sorted(names, key=natural_sort_key) == ["post1.jpg", "Post2.jpg", "post10.jpg"]


@dataclass
class Blog:
    name: str = ""
    progress: int = 0
    collection: str = ""


class TestStableComparer:
    def test_mixed_value_types_do_not_raise(self):
        a, b = Blog(progress=1), Blog(progress="x")
        comparer = StableComparer([a, b], [SortDescription("progress")])
        assert comparer.compare(a, b) < 0
        assert comparer.compare(b, a) > 0
        assert comparer.sort([b, a]) == [a, b]

    def test_ascending(self):
        a, b = Blog(name="a"), Blog(name="b")
        comparer = StableComparer([a, b], [SortDescription("name", SortDirection.ASCENDING)])
        assert comparer.compare(a, b) < 0

    def test_descending(self):
        a, b = Blog(name="a"), Blog(name="b")
        comparer = StableComparer([a, b], [SortDescription("name", SortDirection.DESCENDING)])
        assert comparer.compare(a, b) > 0

    def test_ties_use_initial_order(self):
        a, b = Blog(name="same"), Blog(name="same")
        comparer = StableComparer([a, b], [SortDescription("name")])
        assert comparer.compare(a, b) < 0
        assert comparer.compare(b, a) > 0

    def test_ties_ignore_direction(self):
        a, b = Blog(name="same"), Blog(name="same")
        comparer = StableComparer([a, b], [SortDescription("name", SortDirection.DESCENDING)])
        assert comparer.compare(a, b) < 0

    def test_secondary_key(self):
        a = Blog(name="x", progress=5)
        b = Blog(name="x", progress=1)
        comparer = StableComparer([a, b], [SortDescription("name"), SortDescription("progress")])
        assert comparer.compare(a, b) > 0

    def test_names_compare_naturally(self):
        a, b = Blog(name="blog10"), Blog(name="blog9")
        comparer = StableComparer([a, b], [SortDescription("name")])
        assert comparer.compare(a, b) > 0

    def test_collection_accessor(self):
        a, b = Blog(collection="C1"), Blog(collection="C2")
        accessor = mock.Mock(side_effect=lambda item: item.collection)

        comparer = StableComparer(
            [a, b], [SortDescription("__collection")], get_collection_name=accessor,
        )
        assert comparer.compare(a, b) < 0
        assert accessor.call_count >= 2

    def test_progress_accessor(self):
        a, b = Blog(progress=5), Blog(progress=10)
        accessor = mock.Mock(side_effect=lambda item: item.progress)

        comparer = StableComparer(
            [a, b], [SortDescription("__progress")], get_collection_name=None, get_progress_value=accessor,
        )
        assert comparer.compare(a, b) < 0
        assert accessor.call_count >= 2

    def test_missing_accessor(self):
        a, b = Blog(), Blog()
        comparer = StableComparer([a, b], [SortDescription("__progress")])
        with pytest.raises(ValueError):
            comparer.compare(a, b)

    def test_none_sorts_first(self):
        a, b = Blog(name=None), Blog(name="a")
        comparer = StableComparer([b, a], [SortDescription("name")])
        assert comparer.compare(a, b) < 0

    def test_sort_is_stable_for_many_keys(self):
        blogs = [Blog(name="b", progress=1), Blog(name="a", progress=1),
                 Blog(name="b", progress=1), Blog(name="a", progress=0)]
        comparer = StableComparer(blogs, [SortDescription("progress"), SortDescription("name")])
        ordered = comparer.sort()
        assert ordered == [blogs[3], blogs[1], blogs[0], blogs[2]]
        assert ordered[2] is blogs[0]
        assert ordered[3] is blogs[2]

    def test_sorted_with_key(self):
        blogs = [Blog(name="c"), Blog(name="a"), Blog(name="b")]
        comparer = StableComparer(blogs, [SortDescription("name", SortDirection.DESCENDING)])
        assert [blog.name for blog in sorted(blogs, key=comparer.key)] == ["c", "b", "a"]
