from __future__ import annotations

"""无界面拖动手势：在参考线段上按下，拖动时偏移，提交或取消。"""

from dataclasses import dataclass
from enum import Enum
import logging
import math

from .config import ParallelWayConfig
from .geometry.model import Point2D, SourceChain, WaySegment
from .geometry.primitives import closest_point_to_line, distance, is_right_of_line
from .materialize import ChangeSet, MaterializedCopy, copy_chain
from .modifiers import ModifierState
from .offset.core import OrderedPath, build_ordered_path
from .offset.engine import change_offset
from .offset.errors import DegenerateSegmentError, InvalidTopologyError

logger = logging.getLogger(__name__)


class GestureState(Enum):
    IDLE = "idle"
    ARMED = "armed"
    OFFSETTING = "offsetting"
    COMMITTED = "committed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class GestureFlags:
    copy_tags: bool
    snap: bool

    @staticmethod
    def resolve(config: ParallelWayConfig, modifiers: ModifierState) -> "GestureFlags":
        # 修饰键命中时翻转默认值
        copy_tags = config.copy_tags_default != config.copy_tags_modifiers.matches(modifiers)
        snap = config.snap_default != config.snap_modifiers.matches(modifiers)
        return GestureFlags(copy_tags=copy_tags, snap=snap)


@dataclass(frozen=True)
class OffsetUpdate:
    distance: float
    helper_line_start: Point2D
    helper_line_end: Point2D


def modifiers_valid_for_drag(config: ParallelWayConfig, modifiers: ModifierState) -> bool:
    return (
        not modifiers.any_pressed
        or config.snap_modifiers.matches(modifiers)
        or config.copy_tags_modifiers.matches(modifiers)
    )


def snap_distance(d: float, threshold: float) -> float:
    """Snap to the nearest whole unit within ``threshold``, otherwise to the nearest half unit."""
    nearest = math.floor(d + 0.5)
    if d == nearest or abs(nearest - d) < threshold:
        return float(nearest)
    return nearest + math.copysign(0.5, d - nearest)


class ParallelWayGesture:
    def __init__(self, config: ParallelWayConfig | None = None) -> None:
        self._config = config or ParallelWayConfig.from_dict({})
        self._config.validate()
        self.state = GestureState.IDLE
        self.flags: GestureFlags | None = None
        self.copy: MaterializedCopy | None = None
        self.path: OrderedPath | None = None
        self._reference_line: tuple[Point2D, Point2D] | None = None

    @property
    def config(self) -> ParallelWayConfig:
        return self._config

    def arm(
        self,
        chain: SourceChain,
        reference_segment: WaySegment,
        modifiers: ModifierState | None = None,
    ) -> OrderedPath:
        self._require(GestureState.IDLE)
        modifiers = modifiers or ModifierState()
        if not modifiers_valid_for_drag(self._config, modifiers):
            raise ValueError("modifier combination is not valid for dragging")
        if not 0 <= reference_segment.polyline_index < len(chain.polylines):
            raise ValueError("reference segment is not part of the chain")
        reference_line = chain.segment_points(reference_segment)

        flags = GestureFlags.resolve(self._config, modifiers)
        copied = copy_chain(chain, flags.copy_tags)
        try:
            path = build_ordered_path(copied, reference_segment.polyline_index)
        except (InvalidTopologyError, DegenerateSegmentError) as exc:
            logger.warning("Parallel way rejected: %s", exc)
            raise

        self.flags = flags
        self.copy = copied
        self.path = path
        self._reference_line = reference_line
        self.state = GestureState.ARMED
        logger.info("Gesture armed: copy_tags=%s snap=%s", flags.copy_tags, flags.snap)
        return path

    def drag(
        self,
        pointer: Point2D,
        modifiers: ModifierState | None = None,
        elapsed_ms: float | None = None,
    ) -> OffsetUpdate | None:
        """Recompute the copy for a pointer position; None while the initial move delay lasts."""
        self._require(GestureState.ARMED, GestureState.OFFSETTING)
        if modifiers is not None:
            # snap 可在拖动过程中切换，copy_tags 只在按下时确定
            snap = GestureFlags.resolve(self._config, modifiers).snap
            self.flags = GestureFlags(copy_tags=self.flags.copy_tags, snap=snap)
        if (
            self.state is GestureState.ARMED
            and elapsed_ms is not None
            and elapsed_ms < self._config.initial_move_delay_ms
        ):
            return None

        line_start, line_end = self._reference_line
        pointer = (float(pointer[0]), float(pointer[1]))
        nearest = closest_point_to_line(line_start, line_end, pointer)
        d = distance(nearest, pointer)
        if self.flags.snap:
            d = snap_distance(d, self._config.snap_threshold)
        if is_right_of_line(line_start, line_end, pointer):
            d = -d

        self.copy.apply_positions(self.path, change_offset(self.path, d))
        self.state = GestureState.OFFSETTING
        return OffsetUpdate(distance=d, helper_line_start=nearest, helper_line_end=pointer)

    def commit(self) -> ChangeSet:
        self._require(GestureState.ARMED, GestureState.OFFSETTING)
        change_set = self.copy.change_set(self.path)
        self.state = GestureState.COMMITTED
        logger.info("Gesture committed: %s operations", len(change_set.operations))
        return change_set

    def abort(self) -> None:
        self._require(GestureState.ARMED, GestureState.OFFSETTING)
        self.copy = None
        self.path = None
        self.state = GestureState.ABORTED
        logger.info("Gesture aborted")

    def reset(self) -> None:
        self._require(GestureState.COMMITTED, GestureState.ABORTED)
        self.flags = None
        self.copy = None
        self.path = None
        self._reference_line = None
        self.state = GestureState.IDLE

    def _require(self, *states: GestureState) -> None:
        if self.state not in states:
            allowed = ", ".join(state.value for state in states)
            raise RuntimeError(f"gesture is {self.state.value}, expected {allowed}")
