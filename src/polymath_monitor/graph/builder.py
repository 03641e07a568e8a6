"""
Graph Model Builder - Turns flattened query rows into a node/edge graph.

Each row of the statement query carries a source statement, the tags of
that source, and optionally an implication leading to a target statement.
Implication nodes are collapsed into edges between the two statements.

Merge policy is first-wins: the first row that introduces an identity
decides that node's properties, labels and tags. Later rows referencing
the same identity do not update it. An implication becomes an edge only
when its row also resolves both a source and a target; partial traversals
are an expected shape of the data and are dropped without error.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from ..core.models import GraphEdge, GraphModel, GraphNode
from ..utils.logger import debug
from ..utils.settings import get_settings
from .colors import coerce_verification, get_verification_color
from .entities import EntityRef, read_entity, row_field

VERIFICATION_PROPERTY = "verification"
IMPLICATION_TYPE = "IMPLICATION"

# Query whose rows this builder expects (run by the graph-database client)
STATEMENT_GRAPH_QUERY = """
MATCH (source:Statement)
OPTIONAL MATCH (source)-[:HAS_TAG]->(t:Tag)
WITH source, collect(t.name) as sourceTags
OPTIONAL MATCH (source)-[:IS_PREMISE]->(imp:Implication)-[:IS_PROOF]->(target:Statement)
RETURN source, sourceTags, imp, target
"""


@dataclass(frozen=True)
class RowFields:
    """Names of the row fields read by the builder"""

    source: str = "source"
    target: str = "target"
    relationship: str = "imp"
    source_tags: str = "sourceTags"


DEFAULT_FIELDS = RowFields()


@dataclass
class GraphRegistry:
    """Accumulator for one build pass, keyed by external identity"""

    nodes: dict
    edges: dict

    @classmethod
    def empty(cls) -> "GraphRegistry":
        return cls(nodes={}, edges={})


def _tag_list(value: Any) -> tuple[str, ...]:
    if not value or isinstance(value, (str, bytes)):
        return ()
    return tuple(str(tag) for tag in value if tag is not None)


class GraphModelBuilder:
    """Builds GraphModels from query rows.

    Holds configuration only; every build starts from an empty registry.
    """

    def __init__(
        self,
        fields: RowFields = DEFAULT_FIELDS,
        edge_type: str = IMPLICATION_TYPE,
        node_size: Optional[int] = None,
    ):
        self.fields = fields
        self.edge_type = edge_type
        self.node_size = node_size

    def build(self, rows: Optional[Iterable[Any]]) -> GraphModel:
        """Build the graph for one pass over the rows.

        Args:
            rows: Ordered query rows (mappings or driver records)

        Returns:
            GraphModel with nodes and edges in first-seen order
        """
        registry = GraphRegistry.empty()
        size = self.node_size
        if size is None:
            size = get_settings().node_size

        for row in rows or ():
            self._process_row(row, registry, size)

        return GraphModel(
            nodes=tuple(registry.nodes.values()),
            edges=tuple(registry.edges.values()),
        )

    def _process_row(self, row: Any, registry: GraphRegistry, size: int) -> None:
        source = self._read(row, self.fields.source)
        target = self._read(row, self.fields.target)
        relationship = self._read(row, self.fields.relationship)

        if source is not None:
            tags = _tag_list(row_field(row, self.fields.source_tags))
            self._register_node(registry, source, tags, size)
        if target is not None:
            self._register_node(registry, target, (), size)

        if relationship is None:
            return
        if (
            source is None
            or target is None
            or source.identity not in registry.nodes
            or target.identity not in registry.nodes
        ):
            debug(f"Dropping relationship {relationship.identity!r}: unresolved endpoint")
            return
        if relationship.identity in registry.edges:
            return

        registry.edges[relationship.identity] = self._make_edge(
            relationship, source.identity, target.identity
        )

    def _read(self, row: Any, name: str) -> Optional[EntityRef]:
        value = row_field(row, name)
        entity = read_entity(value)
        if entity is None and value is not None:
            debug(f"Skipping {name!r} entity without a usable identity")
        return entity

    def _register_node(
        self,
        registry: GraphRegistry,
        entity: EntityRef,
        tags: tuple[str, ...],
        size: int,
    ) -> None:
        if entity.identity in registry.nodes:
            return
        raw_level = entity.properties.get(VERIFICATION_PROPERTY)
        registry.nodes[entity.identity] = GraphNode(
            id=entity.identity,
            properties=dict(entity.properties),
            labels=entity.labels,
            tags=tags,
            verification=coerce_verification(raw_level),
            color=get_verification_color(raw_level),
            size=size,
        )

    def _make_edge(self, entity: EntityRef, source_id: Any, target_id: Any) -> GraphEdge:
        raw_level = entity.properties.get(VERIFICATION_PROPERTY)
        return GraphEdge(
            id=entity.identity,
            source_id=source_id,
            target_id=target_id,
            properties=dict(entity.properties),
            verification=coerce_verification(raw_level),
            color=get_verification_color(raw_level),
            type=self.edge_type,
        )


def build_graph_model(
    rows: Optional[Iterable[Any]], fields: RowFields = DEFAULT_FIELDS
) -> GraphModel:
    """Build a graph model from query rows with default settings."""
    return GraphModelBuilder(fields=fields).build(rows)
