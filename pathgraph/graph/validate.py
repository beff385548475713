"""Schema validation for graph values.

`validate_graph` checks shape against `GRAPH_SCHEMA` with jsonschema and then
enforces the structural rules a schema cannot express: no dangling
successors, no self-loops, no repeated successors.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import jsonschema

from pathgraph.graph.types import Graph

GRAPH_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "pathgraph graph value",
    "type": "object",
    "propertyNames": {"$ref": "#/$defs/vertex"},
    "additionalProperties": {"$ref": "#/$defs/adjacency"},
    "$defs": {
        "vertex": {"type": ["integer", "string"]},
        "adjacency": {
            "oneOf": [
                {"type": "array", "items": {"$ref": "#/$defs/vertex"}},
                {
                    "type": "object",
                    "propertyNames": {"$ref": "#/$defs/vertex"},
                    "additionalProperties": {"type": "integer", "minimum": 0},
                },
            ]
        },
    },
}


def _as_schema_instance(graph: Any) -> Any:
    """Turn mapping/tuple containers into the dict/list shapes jsonschema expects."""
    if not isinstance(graph, Mapping):
        return graph
    instance: Dict[Any, Any] = {}
    for vertex, adjacency in graph.items():
        if isinstance(adjacency, Mapping):
            instance[vertex] = dict(adjacency)
        elif isinstance(adjacency, tuple):
            instance[vertex] = list(adjacency)
        else:
            instance[vertex] = adjacency
    return instance


def validate_graph(graph: Graph, *, weighted: Optional[bool] = None) -> None:
    """Validate a graph value.

    Args:
        graph: Graph mapping to check.
        weighted: When True (False), every adjacency must be a weight mapping
            (successor sequence). None accepts either, but not a mix.

    Raises:
        jsonschema.ValidationError: If the value does not match `GRAPH_SCHEMA`.
        ValueError: On mixed representations, non-int weights, dangling
            successors, self-loops or repeated successors.
    """
    jsonschema.validate(_as_schema_instance(graph), GRAPH_SCHEMA)

    kinds = {isinstance(adjacency, Mapping) for adjacency in graph.values()}
    if len(kinds) > 1:
        raise ValueError("Graph mixes weighted and unweighted adjacencies.")
    if weighted is not None and kinds and kinds != {weighted}:
        expected = "weight mappings" if weighted else "successor sequences"
        raise ValueError(f"Expected every adjacency to be one of {expected}.")

    for vertex, adjacency in graph.items():
        if isinstance(adjacency, Mapping):
            # jsonschema accepts integral floats as "integer"
            for succ, weight in adjacency.items():
                if not isinstance(weight, int):
                    raise ValueError(
                        f"Weight of edge {vertex!r} -> {succ!r} must be an int, "
                        f"got {weight!r}"
                    )
        elif len(set(adjacency)) != len(adjacency):
            raise ValueError(f"Vertex {vertex!r} lists a successor more than once.")

        for succ in adjacency:
            if succ == vertex:
                raise ValueError(f"Self-loop on vertex {vertex!r} is not allowed.")
            if succ not in graph:
                raise ValueError(
                    f"Successor {succ!r} of vertex {vertex!r} is not a vertex "
                    "of the graph."
                )
