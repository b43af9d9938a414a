"""Static spatial index over bounding boxes."""

from collections.abc import Sequence

from rtree import index

from profile2d.domain import BoundingBox2D


class BoxIndex:
    """Bulk-loaded R-tree answering box-overlap queries.

    Example:
        index = BoxIndex([bp.bounding_box for bp in blueprints])
        for i in index.search(query_box):
            ...
    """

    def __init__(self, boxes: Sequence[BoundingBox2D]) -> None:
        """Build the index.

        Args:
            boxes: Boxes to index; query results are positions in this sequence
        """
        self._boxes = list(boxes)
        if self._boxes:
            self._tree = index.Index(
                (i, box.to_tuple(), None) for i, box in enumerate(self._boxes)
            )
        else:
            # Bulk loading rejects an empty stream
            self._tree = index.Index()

    def __len__(self) -> int:
        return len(self._boxes)

    def search(self, box: BoundingBox2D) -> list[int]:
        """Indices of the boxes overlapping ``box`` (touching included).

        Args:
            box: Query box

        Returns:
            Matching indices in ascending order
        """
        candidates = self._tree.intersection(box.to_tuple())
        return sorted(i for i in candidates if not self._boxes[i].is_out(box))
