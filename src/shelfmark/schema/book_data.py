# ABOUTME: Collects schema wrapper getter values into schema.org Book property dicts.
# ABOUTME: Serializing the dict into page markup is left to the caller.

from typing import Any

from shelfmark.schema.interface import SchemaWrapper

_BORROW_ACTION = "BorrowAction"


def _drop_absent(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def _image(wrapper: SchemaWrapper) -> dict[str, Any] | None:
    url = wrapper.get_image_url()
    if not url:
        return None
    image: dict[str, Any] = {"@type": "ImageObject", "url": url}
    dimensions = wrapper.get_image_dimensions()
    if dimensions is not None:
        image["width"], image["height"] = dimensions
    return image


def _work_example(wrapper: SchemaWrapper) -> dict[str, Any]:
    data: dict[str, Any] = {
        "@type": "Book",
        "@id": wrapper.get_object_url(),
        "url": wrapper.get_object_url(),
        "name": wrapper.get_name(),
        "bookEdition": wrapper.get_book_edition(),
        "datePublished": wrapper.get_date_published(),
        "isbn": wrapper.get_isbn(),
    }
    if wrapper.has_borrow_action():
        data["potentialAction"] = {
            "@type": _BORROW_ACTION,
            "lender": {"@type": "Library", "@id": wrapper.get_lender_library_id()},
        }
    return _drop_absent(data)


def build_book_data(wrapper: SchemaWrapper) -> dict[str, Any]:
    """Build the schema.org Book properties for a wrapped object.

    Absent values are left out. Work examples are nested one level deep and
    do not list their own work examples.
    """
    data: dict[str, Any] = {
        "@context": "https://schema.org",
        "@type": "Book",
        "@id": wrapper.get_collection_url(),
        "url": wrapper.get_collection_url(),
        "name": wrapper.get_name(),
        "description": wrapper.get_description(),
        "image": _image(wrapper),
        "workExample": [_work_example(example) for example in wrapper.get_work_examples()],
    }
    return _drop_absent(data)
