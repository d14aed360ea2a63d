"""
Export Service - dashboard JSON for the network visualisation.

Output shape (data.json):
{
  "nodes": [{"id", "group", "roommate", "internships"}],
  "links": [{"source", "target", "value"}],   # one per undirected edge
  "logs": ["..."],
  "referral_path": [...] or null,
  "pods": [[...]] or null
}

Write failures raise ExportError; in-memory state is never touched.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from longhorn.core.exceptions import ExportError
from longhorn.models.student import Student
from longhorn.schemas.schemas import LinkOut, NetworkExport, NodeOut
from longhorn.services.graph_service import StudentGraph
from longhorn.services.messaging_service import ExecutionLog

logger = logging.getLogger(__name__)


def build_export(
    students: Iterable[Student],
    graph: StudentGraph,
    log: Optional[ExecutionLog] = None,
    referral_path: Optional[Sequence[str]] = None,
    pods: Optional[List[List[str]]] = None
) -> NetworkExport:
    """Collect nodes, links and logs into one export model."""
    nodes = [
        NodeOut(
            id=s.name,
            group=s.major,
            roommate=s.roommate if s.roommate is not None else "None",
            internships=list(s.previous_internships),
        )
        for s in students
    ]
    links = [
        LinkOut(source=source, target=target, value=weight)
        for source, target, weight in sorted(graph.edge_set())
    ]
    return NetworkExport(
        nodes=nodes,
        links=links,
        logs=log.entries() if log is not None else [],
        referral_path=list(referral_path) if referral_path is not None else None,
        pods=pods,
    )


def _write(path: Union[str, Path], content: str) -> Path:
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Error writing JSON file {target}: {e}") from e
    logger.info("Successfully exported data to %s", target)
    return target


def export_to_json(export: NetworkExport, path: Union[str, Path]) -> Path:
    """Write one export to `path`, creating parent directories."""
    return _write(path, export.model_dump_json(indent=2))


def export_test_cases(exports: Sequence[NetworkExport], path: Union[str, Path]) -> Path:
    """Write several exports as one JSON array."""
    payload = [e.model_dump(mode="json") for e in exports]
    return _write(path, json.dumps(payload, indent=2))
