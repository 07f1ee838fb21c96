"""
Recordbook — Slug Generator Unit Tests
=======================================

Test Strategy:
    ✅ Lowercasing and space → hyphen
    ✅ Stripped punctuation leaves no hyphen behind
    ✅ Degenerate titles (empty, only punctuation)
    ✅ Collisions between distinct titles
"""

import pytest

from recordbook.schemas.record import Record
from recordbook.services.slug import slugify

STRIPPED = set("?&:!@#$%^*()")


class TestSlugify:

    def test_lowercases_and_hyphenates(self):
        assert slugify("Hello World") == "hello-world"

    def test_strips_punctuation(self):
        """'!' is dropped, not turned into a hyphen."""
        assert slugify("Hello World!") == "hello-world"

    def test_every_stripped_character(self):
        assert slugify("a?b&c:d!e@f#g$h%i^j*k(l)m") == "abcdefghijklm"

    def test_keeps_other_punctuation(self):
        assert slugify("v1.2, final") == "v1.2,-final"

    def test_each_space_becomes_a_hyphen(self):
        assert slugify("a  b") == "a--b"

    def test_empty_title(self):
        assert slugify("") == ""

    def test_only_stripped_characters(self):
        assert slugify("?!()") == ""

    def test_distinct_titles_collide(self):
        assert slugify("A B") == slugify("a-b") == "a-b"

    @pytest.mark.parametrize(
        "title",
        [
            "Hello World!",
            "Q&A: (Draft #2)",
            "100% DONE ^_^",
            "Meeting @ 10:30 *URGENT*",
            "MiXeD CaSe $$$",
        ],
    )
    def test_result_is_lowercase_without_stripped_chars(self, title):
        slug = slugify(title)
        assert slug == slug.lower()
        assert not STRIPPED & set(slug)


class TestRecordSlug:

    def test_record_slug_follows_title(self):
        record = Record(title="Shopping List", content="milk")
        assert record.slug == "shopping-list"

    def test_record_slug_changes_with_title(self):
        record = Record(title="Old", content="x")
        record.title = "New Name"
        assert record.slug == "new-name"
