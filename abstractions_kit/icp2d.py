"""Point-to-point ICP for 2-D scans solved with Gauss-Newton."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from abstractions_kit.kdtree import KdTree

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 10
MAX_DISTANCE2 = 2.5
MIN_EFFECTIVE_POINTS = 4


class AlignmentError(RuntimeError):
    """Raised when a scan cannot be aligned to the target."""


@dataclass(frozen=True)
class SE2:
    """A planar rigid transform: rotation by ``theta`` then translation by (x, y)."""

    theta: float = 0.0
    x: float = 0.0
    y: float = 0.0

    @property
    def translation(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def rotation_matrix(self) -> np.ndarray:
        c, s = math.cos(self.theta), math.sin(self.theta)
        return np.array([[c, -s], [s, c]])

    def apply(self, point: Sequence[float] | np.ndarray) -> np.ndarray:
        """Return the transformed point ``R @ p + t``."""
        return self.rotation_matrix() @ np.asarray(point, dtype=float) + self.translation


def compute_jacobian(pose: SE2, point: Sequence[float] | np.ndarray) -> np.ndarray:
    """Return the 3x2 derivative of the transformed point by (x, y, theta).

    Row ``i`` holds the derivative with respect to parameter ``i``.
    """
    c, s = math.cos(pose.theta), math.sin(pose.theta)
    px, py = (float(v) for v in point)
    return np.array(
        [
            [1.0, 0.0],
            [0.0, 1.0],
            [-s * px - c * py, c * px - s * py],
        ]
    )


def _as_points(points: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 2))
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("points must be an (n, 2) array")
    return arr


class Icp2d:
    """Aligns a source scan to a target scan.

    Set the target first (this builds its search tree), then the source, then
    call :meth:`align_gauss_newton`.
    """

    def __init__(self) -> None:
        self._target = np.empty((0, 2))
        self._source = np.empty((0, 2))
        self._tree = KdTree(approximate=False)

    def set_target(self, target: Sequence[Sequence[float]] | np.ndarray) -> None:
        self._target = _as_points(target)
        if len(self._target) == 0:
            logger.error("target is not set")
            self._tree.clear()
            return
        self._tree.build(self._target)

    def set_source(self, source: Sequence[Sequence[float]] | np.ndarray) -> None:
        self._source = _as_points(source)

    def is_target_set(self) -> bool:
        return len(self._target) > 0

    def align_gauss_newton(self, init_pose: SE2 | None = None) -> SE2:
        """Return the pose mapping the source onto the target, starting from ``init_pose``."""
        if not self.is_target_set():
            raise AlignmentError("target is not set")
        pose = init_pose if init_pose is not None else SE2()
        last_cost = 0.0

        for iteration in range(MAX_ITERATIONS):
            hessian = np.zeros((3, 3))
            gradient = np.zeros(3)
            cost = 0.0
            effective = 0

            for point in self._source:
                pw = pose.apply(point)
                nearest = self._tree.closest_points(pw, 1)[0]
                error = pw - self._target[nearest]
                dis2 = float(error @ error)
                if dis2 >= MAX_DISTANCE2:
                    continue
                effective += 1
                jac = compute_jacobian(pose, point)
                gradient += -jac @ error
                hessian += jac @ jac.T
                cost += dis2

            if effective < MIN_EFFECTIVE_POINTS:
                raise AlignmentError(
                    f"only {effective} matched points, need {MIN_EFFECTIVE_POINTS}"
                )

            try:
                dx = np.linalg.solve(hessian, gradient)
            except np.linalg.LinAlgError:
                break
            if math.isnan(dx[0]):
                break

            cost /= effective
            if iteration > 0 and cost >= last_cost:
                break

            logger.info("iter %d cost = %g, effect num: %d", iteration, cost, effective)
            theta = pose.theta + float(dx[2])
            pose = SE2(
                theta=math.atan2(math.sin(theta), math.cos(theta)),
                x=pose.x + float(dx[0]),
                y=pose.y + float(dx[1]),
            )
            last_cost = cost

        logger.info("estimated pose: %g %g, theta: %g", pose.x, pose.y, pose.theta)
        return pose