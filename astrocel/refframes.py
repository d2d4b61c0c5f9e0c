"""Hierarchy of reference frames and their global transforms."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Optional

from astrocel.spaceutils import IDENTITY_QUAT, Quat, Vec3, quat_multiply, quat_normalize, quat_rotate


@dataclass
class Transform:
    """Position and orientation."""

    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Quat = IDENTITY_QUAT


@dataclass
class ReferenceFrame:
    """A frame placed relative to its parent frame (or the root if none)."""

    parent_id: Optional[int] = None
    scale: float = 1.0
    visual_scale: float = 1.0
    local_transform: Transform = field(default_factory=Transform)
    global_transform: Transform = field(default_factory=Transform)


class CyclicFrameError(RuntimeError):
    """Raised when the parent links of reference frames form a cycle."""


class ReferenceFrameSystem:
    """Keeps the global transforms of a set of reference frames up to date.

    ``frames`` maps entity IDs to their frames and is used by reference, so
    later changes to the frames are picked up; call :meth:`invalidate` after
    adding or re-parenting frames.
    """

    def __init__(
        self,
        frames: MutableMapping[int, ReferenceFrame],
        names: Optional[Mapping[int, str]] = None,
    ) -> None:
        self.frames = frames
        self._names: Mapping[int, str] = names if names is not None else {}
        self._order: list[int] = []
        self._tree_sorted = False

    @property
    def order(self) -> list[int]:
        """Entity IDs in the order their transforms are computed."""
        return list(self._order)

    def invalidate(self) -> None:
        """Mark the frame tree as needing to be sorted again."""
        self._tree_sorted = False

    def update_all_frames(self) -> None:
        """Sort the tree if needed, then recompute all global transforms."""
        if not self._tree_sorted:
            self.sort_frame_tree()
            self._tree_sorted = True
        self.compute_global_transforms()

    def sort_frame_tree(self) -> list[int]:
        """Order the frames so that every parent comes before its children."""
        order: list[int] = []
        visited: set[int] = set()
        in_progress: set[int] = set()

        def visit(entity: int) -> None:
            if entity in in_progress:
                name = self._names.get(entity, str(entity))
                raise CyclicFrameError(
                    "Failed to sort reference frame tree due to a cyclic dependency!\n"
                    f'Entry node of the cycle has entity "{name}" (ID #{entity}).'
                )
            if entity in visited:
                return

            visited.add(entity)
            in_progress.add(entity)

            parent = self.frames[entity].parent_id
            if parent is not None:
                if parent not in self.frames:
                    raise KeyError(
                        f"Entity #{entity} has parent #{parent}, which has no reference frame"
                    )
                visit(parent)

            in_progress.discard(entity)
            order.append(entity)

        for entity in self.frames:
            visit(entity)

        self._order = order
        return list(order)

    def compute_global_transforms(self) -> None:
        """Recompute global transforms in the sorted order."""
        for entity in self._order:
            frame = self.frames[entity]
            local = frame.local_transform

            if frame.parent_id is None:
                frame.global_transform = Transform(local.position, local.rotation)
                continue

            parent_global = self.frames[frame.parent_id].global_transform
            rotated = quat_rotate(parent_global.rotation, local.position)
            position = (
                parent_global.position[0] + rotated[0],
                parent_global.position[1] + rotated[1],
                parent_global.position[2] + rotated[2],
            )
            rotation = quat_normalize(quat_multiply(parent_global.rotation, local.rotation))
            frame.global_transform = Transform(position, rotation)