# ABOUTME: Unit tests for build_book_data().
# ABOUTME: Validates schema.org property mapping, absent-value dropping and work example nesting.

import dataclasses

from shelfmark.schema.book_data import build_book_data
from shelfmark.schema.services import WrapperServices
from shelfmark.schema.wrapper import ObjectSchemaWrapper
from tests.fixtures.catalog_data import ROSE_AUDIOBOOK, ROSE_HARDBACK, png_bytes
from tests.fixtures.fakes import BASE_URL, FakeAvailability, FakeCoverCache


class TestBuildBookData:
    """Tests for build_book_data()."""

    def test_top_level_properties(self, services: WrapperServices) -> None:
        """The Book node carries the collection URL, name and description."""
        data = build_book_data(ObjectSchemaWrapper(ROSE_HARDBACK, services))

        assert data["@context"] == "https://schema.org"
        assert data["@type"] == "Book"
        assert data["url"] == f"{BASE_URL}/ting/collection/work%3Arose"
        assert data["name"] == "The Name of the Rose"
        assert data["description"] == ROSE_HARDBACK.abstract

    def test_absent_values_are_dropped(self, services: WrapperServices) -> None:
        """None values never appear as keys."""
        data = build_book_data(ObjectSchemaWrapper(ROSE_AUDIOBOOK, services))
        assert "description" not in data
        assert "image" not in data

        audiobook = data["workExample"][2]
        assert "isbn" not in audiobook
        assert "bookEdition" not in audiobook

    def test_image_with_dimensions(
        self, services: WrapperServices, cover_cache: FakeCoverCache,
    ) -> None:
        """A cover becomes an ImageObject with width and height."""
        path = cover_cache.image_path(ROSE_HARDBACK.id)
        path.parent.mkdir(parents=True)
        path.write_bytes(png_bytes(300, 450))

        image = build_book_data(ObjectSchemaWrapper(ROSE_HARDBACK, services))["image"]
        assert image["@type"] == "ImageObject"
        assert image["url"].startswith(f"{BASE_URL}/files/objects/")
        assert (image["width"], image["height"]) == (300, 450)

    def test_work_examples(
        self, services: WrapperServices, availability: FakeAvailability,
    ) -> None:
        """Each sibling is rendered once, without nested work examples."""
        examples = build_book_data(ObjectSchemaWrapper(ROSE_HARDBACK, services))["workExample"]

        assert [example["isbn"] for example in examples[:2]] == [
            "978-0-15-144647-6",
            "9780156001311",
        ]
        assert examples[0]["bookEdition"] == "1st edition"
        assert examples[0]["datePublished"] == "1983"
        assert "workExample" not in examples[0]
        assert len(availability.calls) == 1

    def test_borrow_action_only_when_reservable(self, services: WrapperServices) -> None:
        """Only reservable siblings get a BorrowAction."""
        examples = build_book_data(ObjectSchemaWrapper(ROSE_HARDBACK, services))["workExample"]

        assert examples[0]["potentialAction"] == {
            "@type": "BorrowAction",
            "lender": {"@type": "Library", "@id": f"{BASE_URL}/node/5"},
        }
        assert "potentialAction" not in examples[1]

    def test_no_reservable_examples_needs_no_lender(self, services: WrapperServices) -> None:
        """No lender lookup happens when nothing is reservable."""
        services = dataclasses.replace(services, availability=FakeAvailability())
        examples = build_book_data(ObjectSchemaWrapper(ROSE_HARDBACK, services))["workExample"]
        assert all("potentialAction" not in example for example in examples)
