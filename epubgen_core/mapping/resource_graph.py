"""
Resource Graph
==============

Registry of every resource that goes into an EPUB package, keyed by
archive path, plus the "required by" relation between them.

This module provides:
- Upsert semantics: a path registered twice with the same media type is
  merged (later non-None fields win), so a placeholder can be registered
  early and filled in later in the same build
- Media-type immutability per path
- Deterministic traversal in registration order
"""

from collections import OrderedDict, deque
from dataclasses import dataclass, asdict, fields
from typing import Dict, List, Optional
import logging

from epubgen_core.errors import DanglingDependencyError, StructuralConflictError
from epubgen_core.mapping.identifiers import id_from_path

logger = logging.getLogger(__name__)


@dataclass
class EpubResource:
    """A single file destined for the package."""

    path: str                               # Archive path, e.g. "epub/cover.xhtml"
    media_type: str                         # MIME type, immutable once registered
    id: Optional[str] = None                # Overrides the path-derived manifest id
    properties: Optional[str] = None        # Manifest "properties" attribute, e.g. "nav"
    content: Optional[bytes] = None         # Serialized payload
    include_in_spine: Optional[bool] = None

    @property
    def manifest_id(self) -> str:
        return self.id or id_from_path(self.path)

    def merge(self, other: 'EpubResource') -> None:
        """
        Merge a later registration of the same path into this one.

        Args:
            other: Later registration; its non-None fields win

        Raises:
            StructuralConflictError: If the media types differ
        """
        if other.media_type != self.media_type:
            raise StructuralConflictError(self.path, self.media_type, other.media_type)

        for f in fields(self):
            value = getattr(other, f.name)
            if value is not None:
                setattr(self, f.name, value)

    def to_dict(self) -> dict:
        """Convert to dictionary, omitting the payload."""
        data = asdict(self)
        content = data.pop('content')
        data['size'] = len(content) if content is not None else 0
        return data


class ResourceGraph:
    """
    Ordered resource registry with a dependency relation.

    Nodes are kept in an ordered map keyed by path. A synthetic root node
    (the package document) carries no resource; everything reachable from
    it belongs in the package.

    Example usage:
        graph = ResourceGraph()
        graph.add_root("epub/document.opf")

        graph.upsert(
            EpubResource("epub/cover.xhtml", "application/xhtml+xml"),
            required_by="epub/document.opf",
        )

        for resource in graph.ordered_dependencies_of("epub/document.opf"):
            ...
    """

    def __init__(self):
        """Initialize empty graph."""
        self._nodes: "OrderedDict[str, Optional[EpubResource]]" = OrderedDict()
        self._edges: Dict[str, List[str]] = {}

    def __contains__(self, path: str) -> bool:
        return path in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def contains(self, path: str) -> bool:
        """Check whether a node is registered at ``path``."""
        return path in self._nodes

    def get(self, path: str) -> Optional[EpubResource]:
        """Get the resource stored at ``path`` (None for the root or unknown paths)."""
        return self._nodes.get(path)

    def reset(self) -> None:
        """Discard all nodes and edges."""
        self._nodes.clear()
        self._edges.clear()
        logger.debug("Reset resource graph")

    def add_root(self, name: str) -> None:
        """Register a synthetic node that carries no resource."""
        if name not in self._nodes:
            self._nodes[name] = None
            self._edges[name] = []

    def add_dependency(self, source: str, target: str) -> None:
        """
        Record that ``source`` requires ``target``. Re-adding is a no-op.

        Raises:
            DanglingDependencyError: If either node is not registered
        """
        if source not in self._nodes:
            raise DanglingDependencyError(source)
        if target not in self._nodes:
            raise DanglingDependencyError(target)

        dependencies = self._edges[source]
        if target not in dependencies:
            dependencies.append(target)

    def upsert(self, resource: EpubResource, required_by: str) -> EpubResource:
        """
        Register a resource, merging into an existing one at the same path.

        Args:
            resource: Resource to register
            required_by: Node that requires this resource

        Returns:
            The stored (possibly merged) resource

        Raises:
            StructuralConflictError: If the path is registered with another media type
            DanglingDependencyError: If ``required_by`` is not registered
        """
        if required_by not in self._nodes:
            raise DanglingDependencyError(required_by)

        existing = self._nodes.get(resource.path)
        if existing is None:
            if resource.path in self._nodes:
                # Root nodes cannot carry a resource
                raise StructuralConflictError(resource.path, "(root)", resource.media_type)
            stored = EpubResource(**{f.name: getattr(resource, f.name) for f in fields(resource)})
            self._nodes[resource.path] = stored
            self._edges[resource.path] = []
            logger.debug(f"Registered resource: {resource.path} ({resource.media_type})")
        else:
            existing.merge(resource)
            stored = existing
            logger.debug(f"Merged resource: {resource.path}")

        self.add_dependency(required_by, resource.path)
        return stored

    def ordered_dependencies_of(self, node: str) -> List[EpubResource]:
        """
        Return every resource reachable from ``node``, each exactly once.

        Traversal is breadth-first in registration order: the node's direct
        dependencies come first, followed by what they require in turn.
        The node itself is excluded.

        Raises:
            DanglingDependencyError: If ``node`` is not registered
        """
        if node not in self._nodes:
            raise DanglingDependencyError(node)

        seen = {node}
        ordered: List[EpubResource] = []
        queue = deque([node])

        while queue:
            current = queue.popleft()
            for dependency in self._edges[current]:
                if dependency in seen:
                    continue
                seen.add(dependency)
                resource = self._nodes[dependency]
                if resource is not None:
                    ordered.append(resource)
                queue.append(dependency)

        return ordered

    def dependencies_of(self, path: str) -> List[str]:
        """Direct dependencies of ``path``, in the order they were added."""
        if path not in self._nodes:
            raise DanglingDependencyError(path)
        return list(self._edges[path])

    def export_mapping(self) -> dict:
        """Export the graph as a dictionary (for debugging)."""
        return {
            'resources': {
                path: resource.to_dict()
                for path, resource in self._nodes.items()
                if resource is not None
            },
            'edges': {path: list(deps) for path, deps in self._edges.items()},
        }
