"""
Exceptions raised by the node projection layer.

Missing content items are not errors; these cover caller mistakes only.
"""


class NodeProjectionError(Exception):
    """Base exception for node projection errors."""


class NodeArgumentError(NodeProjectionError, ValueError):
    """A required node or collaborator reference is absent."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} is required")


class NodeVariantError(NodeProjectionError, TypeError):
    """A node passed to a builder is not of the expected variant."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"source node is not of expected type ({expected}), got {actual}"
        )
