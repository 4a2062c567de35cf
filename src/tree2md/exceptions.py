"""Custom exceptions for tree2md."""


class Tree2mdError(Exception):
    """Base exception for tree2md operations."""


class FetchError(Tree2mdError):
    """Error during source fetching."""


class DocumentNotFoundError(FetchError):
    """Source document does not exist."""


class ParseError(Tree2mdError):
    """Error during document loading."""


class MalformedSequenceError(ParseError):
    """Traversal sequence does not follow pre-order depth discipline."""


class ConversionError(Tree2mdError):
    """Error during Markdown serialization."""
