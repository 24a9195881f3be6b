class MdBlocksError(Exception):
    """Base exception for all mdblocks errors."""

    def __init__(self, message: str):
        super().__init__(message)


class MalformedTokenError(MdBlocksError):
    """Raised when a parsed node lacks a child the parser always produces.

    This signals a broken token tree handed in by the caller, not bad markdown:
    any markdown text parses into a well-formed tree.
    """

    def __init__(self, node_type: str, expected: str, *, message: str | None = None):
        super().__init__(message or f"{node_type!r} node has no {expected} child")
        self.node_type = node_type
        self.expected = expected


class InputReadError(MdBlocksError):
    """Raised when markdown input cannot be read."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Cannot read {source}: {reason}")
        self.source = source
        self.reason = reason
