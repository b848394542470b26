# ABOUTME: Schema package: structured-data wrappers around catalog objects.
# ABOUTME: Exports the wrapper, its protocol, the service bundle and the Book data builder.

from shelfmark.schema.book_data import build_book_data
from shelfmark.schema.interface import SchemaWrapper
from shelfmark.schema.services import LENDER_LIBRARY_KEY, ConfigStore, WrapperServices
from shelfmark.schema.wrapper import (
    LenderLibraryNotConfiguredError,
    ObjectSchemaWrapper,
    WrapperFactory,
)

__all__ = [
    "LENDER_LIBRARY_KEY",
    "ConfigStore",
    "LenderLibraryNotConfiguredError",
    "ObjectSchemaWrapper",
    "SchemaWrapper",
    "WrapperFactory",
    "WrapperServices",
    "build_book_data",
]
