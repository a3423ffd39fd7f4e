"""
Core type definitions for lnview.

Two families of models live here:

- ``Raw*`` models describe the loosely-shaped input produced by a node's
  graph dump. They accept the common field spellings and ignore the rest.
- ``Node``, ``Edge`` and ``PrunedView`` are the canonical, frozen records
  the engine works with. Visibility changes replace a ``Node`` with a copy;
  no record is ever mutated in place.
"""

from typing import List, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .exceptions import DataIntegrityError


class RawPolicy(BaseModel):
    """One side of a channel, as announced by its owner."""
    public_key: str = Field(validation_alias=AliasChoices("public_key", "publicKey", "pub_key"))

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class RawNode(BaseModel):
    """A participant record from the input graph."""
    id: str = Field(min_length=1, validation_alias=AliasChoices("id", "pub_key", "publicKey"))
    alias: str | None = Field(
        default=None,
        validation_alias=AliasChoices("alias", "display_name", "displayName", "name"),
    )
    color: str | None = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class RawChannel(BaseModel):
    """
    A channel record from the input graph.

    Endpoints may be given in any one of three shapes:
    a two-element ``policies`` list, ``node1_pub``/``node2_pub``,
    or ``source``/``target``.
    """
    id: str = Field(min_length=1, validation_alias=AliasChoices("id", "channel_id", "channelId"))
    capacity: int | float = 0
    policies: List[RawPolicy] | None = None
    node1_pub: str | None = Field(default=None, validation_alias=AliasChoices("node1_pub", "node1"))
    node2_pub: str | None = Field(default=None, validation_alias=AliasChoices("node2_pub", "node2"))
    source: str | None = None
    target: str | None = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    def endpoints(self) -> Tuple[str, str]:
        """Return the two endpoint ids, whichever shape the record used."""
        if self.policies is not None:
            if len(self.policies) != 2:
                raise DataIntegrityError(
                    f"Channel {self.id} has {len(self.policies)} policies, expected 2"
                )
            return self.policies[0].public_key, self.policies[1].public_key
        if self.node1_pub and self.node2_pub:
            return self.node1_pub, self.node2_pub
        if self.source and self.target:
            return self.source, self.target
        raise DataIntegrityError(f"Channel {self.id} does not name two endpoints")


class RawGraph(BaseModel):
    """Top-level input document."""
    nodes: List[RawNode] = Field(default_factory=list)
    links: List[RawChannel] = Field(
        default_factory=list,
        validation_alias=AliasChoices("links", "edges"),
    )

    model_config = ConfigDict(extra="ignore")


class Node(BaseModel):
    """A participant in the canonical graph."""
    id: str
    display_name: str
    color: str
    visible: bool = False

    model_config = ConfigDict(frozen=True)

    def with_visibility(self, visible: bool) -> "Node":
        if visible == self.visible:
            return self
        return self.model_copy(update={"visible": visible})


class Edge(BaseModel):
    """An undirected channel between two participants."""
    id: str
    endpoint_a: str
    endpoint_b: str
    capacity: int | float
    color: str

    model_config = ConfigDict(frozen=True)

    @property
    def endpoints(self) -> Tuple[str, str]:
        return self.endpoint_a, self.endpoint_b

    def other(self, node_id: str) -> str:
        """Return the endpoint opposite ``node_id``."""
        if node_id == self.endpoint_a:
            return self.endpoint_b
        if node_id == self.endpoint_b:
            return self.endpoint_a
        raise ValueError(f"Node {node_id} is not an endpoint of channel {self.id}")


class PrunedView(BaseModel):
    """The subset of the graph currently eligible for rendering."""
    nodes: Tuple[Node, ...] = ()
    edges: Tuple[Edge, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def node_ids(self) -> Tuple[str, ...]:
        return tuple(node.id for node in self.nodes)

    @property
    def edge_ids(self) -> Tuple[str, ...]:
        return tuple(edge.id for edge in self.edges)

    def is_empty(self) -> bool:
        return not self.nodes


class Position(BaseModel):
    """A point in the renderer's simulation space."""
    x: float
    y: float
    z: float

    model_config = ConfigDict(frozen=True)


class NodeInfo(BaseModel):
    """Summary of a node shown in the hover overlay."""
    id: str
    display_name: str
    color: str
    degree: int
    total_capacity: int | float
