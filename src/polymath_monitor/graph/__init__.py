"""Knowledge graph model building from graph-database query rows."""

from .builder import (
    DEFAULT_FIELDS,
    STATEMENT_GRAPH_QUERY,
    GraphModelBuilder,
    GraphRegistry,
    RowFields,
    build_graph_model,
)
from .colors import (
    UNKNOWN_COLOR,
    VERIFICATION_COLORS,
    coerce_verification,
    get_verification_color,
)
from .entities import EntityRef, read_entity, row_field

__all__ = [
    "GraphModelBuilder",
    "GraphRegistry",
    "RowFields",
    "DEFAULT_FIELDS",
    "STATEMENT_GRAPH_QUERY",
    "build_graph_model",
    "VERIFICATION_COLORS",
    "UNKNOWN_COLOR",
    "coerce_verification",
    "get_verification_color",
    "EntityRef",
    "read_entity",
    "row_field",
]
