"""searchctx core: immutable data model for point-in-time search context identifiers."""

__version__ = "0.1.0"
