"""A JSON value model with UTF-8 checking, locale-independent number formatting, copying and merging."""

__version__ = "2.14.0"