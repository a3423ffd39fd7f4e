"""
Exception hierarchy for lnview.

Every error raised on purpose by the package derives from ``LnviewError``
so callers (the CLI in particular) can catch them in one place.
"""


class LnviewError(Exception):
    """Base class for all lnview errors."""


class InvalidGraphError(LnviewError):
    """The raw graph payload does not match the expected schema."""


class DataIntegrityError(LnviewError):
    """
    The raw graph is structurally inconsistent.

    Raised for channels pointing at undeclared nodes, duplicate ids and
    self-loops. Normalization is aborted; nothing is skipped silently.
    """


class UnknownNodeError(DataIntegrityError, KeyError):
    """A node id was looked up that the adjacency index never registered."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Unknown node: {node_id}")

    def __str__(self) -> str:
        return f"Unknown node: {self.node_id}"


class GraphFileError(LnviewError):
    """A graph file could not be located or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
