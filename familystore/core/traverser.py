"""Traversal engine for FamilyStore.

Every read that looks past a store's own backend goes through a traverser.
The engine walks the directed graph formed by a store and its ``parents``
relation, visiting each distinct node exactly once no matter how many paths
reach it, so diamonds and cycles are handled by construction.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Iterator, Optional, Set, Tuple

from .contracts import backend_of, parents_of

# visitor(backend, node, depth) -> result, None meaning "keep going"
Visitor = Callable[[Any, Any, int], Optional[Any]]


class FamilyTraverser(ABC):
    """Abstract base class for family graph traversal strategies.

    Traversers only rely on the structural node contract (``backend`` or
    ``store`` plus ``parents``), so they work for FamilyStore instances and
    for any conforming object built elsewhere.
    """

    @abstractmethod
    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Any, int]]:
        """Walk the family graph starting from root.

        Args:
            root: Starting store for traversal
            max_depth: Maximum depth to walk (None = unlimited)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def search(self, root: Any, visitor: Visitor) -> Optional[Any]:
        """Run visitor over the walk and return its first non-None result.

        The walk is lazy, so once the visitor produces a value nothing else
        is visited: neither the nodes still queued nor the parents of the
        node that produced the value.

        Args:
            root: Starting store for traversal
            visitor: Callable(backend, node, depth) -> Optional[Any]

        Returns:
            First non-None visitor result, or None if the walk completes
        """
        for node, depth in self.traverse(root):
            result = visitor(backend_of(node), node, depth)
            if result is not None:
                return result
        return None

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if parents of node at given depth should be enqueued.

        Args:
            depth: Current depth
            max_depth: Maximum depth limit

        Returns:
            True if parents should be explored
        """
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(FamilyTraverser):
    """Breadth-first traversal strategy.

    Visits every node at depth N, in the order their enqueuing parents were
    declared, before any node at depth N+1. This order decides which value
    wins when several ancestors define the same key, so it is part of the
    observable behavior.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Any, int]]:
        """Traverse the family graph breadth-first.

        Uses a FIFO queue and a visited set keyed on object identity. Names
        are not used here: two distinct stores sharing a name are still two
        nodes.
        """
        # Queue stores (node, depth) tuples
        queue: Deque[Tuple[Any, int]] = deque([(root, 0)])
        visited: Set[int] = set()

        while queue:
            node, depth = queue.popleft()

            # Skip if already visited (handles cycles and diamonds)
            if id(node) in visited:
                continue
            visited.add(id(node))

            yield (node, depth)

            # Parents are enqueued only after the consumer resumes us
            if self._should_explore(depth, max_depth):
                for parent in parents_of(node):
                    queue.append((parent, depth + 1))


# Shared engine; traversers hold no per-walk state
default_traverser = BreadthFirstTraverser()
