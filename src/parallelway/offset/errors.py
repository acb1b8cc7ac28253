from __future__ import annotations


class InvalidTopologyError(ValueError):
    """The polylines do not reduce to one simple path or one simple cycle."""

    def __init__(self, detail: str | None = None) -> None:
        message = "The ways selected must form a simple branchless path"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.detail = detail


class DegenerateSegmentError(ValueError):
    """A segment of the ordered path has zero length."""

    def __init__(self, segment_index: int | None = None) -> None:
        if segment_index is None:
            message = "path needs at least 2 points"
        else:
            message = f"segment {segment_index} has zero length"
        super().__init__(message)
        self.segment_index = segment_index
