"""Placement transforms for scene geometry.

A Transform is a 4x4 homogeneous matrix that places an object's local frame in
world space. Scene objects are normally placed with rigid transforms (rotation
followed by translation), built with ``Transform.new`` from a translation and
an axis-angle rotation vector:

    >>> import math
    >>> from facetracer.core.transform import Transform
    >>> t = Transform.new((0.0, 0.0, -5.0), (0.0, math.pi / 2.0, 0.0))
    >>> t.apply_vector((0.0, 0.0, 1.0)).round(6)  # local +Z now points along +X
    array([1., 0., 0.])

The inverse is computed once, when the transform is created. A matrix that
cannot be inverted means the scene is malformed, so construction fails with
DegenerateTransformError instead of producing wrong geometry later.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from facetracer.core.ray import Vec3, as_vec3

# Determinants smaller than this are treated as singular
SINGULAR_DETERMINANT = 1e-12


class DegenerateTransformError(ValueError):
    """Raised when a transform matrix has no usable inverse."""


def rotation_matrix(axis_angle: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Build a 3x3 rotation matrix from an axis-angle vector.

    The direction of ``axis_angle`` is the rotation axis and its length is the
    rotation angle in radians (right-hand rule). Uses Rodrigues' formula.

    Args:
        axis_angle: Rotation vector (axis * angle).

    Returns:
        The 3x3 rotation matrix. A zero vector gives the identity.
    """
    w = as_vec3(axis_angle)
    theta = float(np.linalg.norm(w))
    if theta < 1e-15:
        return np.eye(3)

    k = w / theta
    kx = np.array(
        [
            [0.0, -k[2], k[1]],
            [k[2], 0.0, -k[0]],
            [-k[1], k[0], 0.0],
        ]
    )
    return np.eye(3) + np.sin(theta) * kx + (1.0 - np.cos(theta)) * (kx @ kx)


class Transform:
    """An affine placement of a local frame in world space.

    Attributes:
        matrix: The 4x4 homogeneous matrix mapping local to world coordinates.
    """

    __slots__ = ("_matrix", "_inverse")

    def __init__(self, matrix: npt.ArrayLike) -> None:
        """Create a transform from a 4x4 homogeneous matrix.

        Args:
            matrix: Local-to-world matrix. The bottom row must be (0, 0, 0, 1).

        Raises:
            ValueError: If the matrix is not 4x4 or not affine.
            DegenerateTransformError: If the matrix is not invertible.
        """
        m = np.array(matrix, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"Transform matrix must be 4x4, got shape {m.shape}")
        if not np.allclose(m[3], (0.0, 0.0, 0.0, 1.0)):
            raise ValueError(f"Transform matrix is not affine, bottom row is {m[3].tolist()}")
        if not np.all(np.isfinite(m)):
            raise DegenerateTransformError("Transform matrix contains non-finite values")

        det = float(np.linalg.det(m[:3, :3]))
        if abs(det) < SINGULAR_DETERMINANT:
            raise DegenerateTransformError(
                f"Transform is not invertible (determinant {det:g}); "
                "check for a zero scale in the scene description"
            )

        m.setflags(write=False)
        inverse = np.linalg.inv(m)
        inverse.setflags(write=False)
        self._matrix = m
        self._inverse = inverse

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls) -> Transform:
        """Return the identity transform."""
        return cls(np.eye(4))

    @classmethod
    def new(
        cls,
        translation: npt.ArrayLike = (0.0, 0.0, 0.0),
        axis_angle: npt.ArrayLike = (0.0, 0.0, 0.0),
    ) -> Transform:
        """Create a rigid transform: rotate by ``axis_angle``, then translate.

        Args:
            translation: World-space position of the local origin.
            axis_angle: Rotation vector (axis * angle in radians).

        Returns:
            The rigid transform p -> R p + translation.
        """
        m = np.eye(4)
        m[:3, :3] = rotation_matrix(axis_angle)
        m[:3, 3] = as_vec3(translation)
        return cls(m)

    @classmethod
    def from_matrix(cls, matrix: npt.ArrayLike) -> Transform:
        """Create a transform from an arbitrary 4x4 affine matrix."""
        return cls(matrix)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def matrix(self) -> npt.NDArray[np.float64]:
        return self._matrix

    @property
    def translation(self) -> Vec3:
        """World-space position of the local origin."""
        return self._matrix[:3, 3].copy()

    @property
    def linear(self) -> npt.NDArray[np.float64]:
        """The 3x3 rotation (or general linear) part."""
        return self._matrix[:3, :3].copy()

    @property
    def normal_matrix(self) -> npt.NDArray[np.float64]:
        """Matrix mapping local normals to world space.

        This is the inverse transpose of the linear part. For a rigid
        transform it equals the rotation.
        """
        return self._inverse[:3, :3].T.copy()

    def inverse(self) -> Transform:
        """Return the world-to-local transform."""
        return Transform(self._inverse)

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------

    def apply_point(self, p: npt.ArrayLike) -> Vec3:
        """Map a local point to world space."""
        m = self._matrix
        return m[:3, :3] @ np.asarray(p, dtype=np.float64) + m[:3, 3]

    def apply_vector(self, v: npt.ArrayLike) -> Vec3:
        """Map a local direction to world space (translation ignored)."""
        return self._matrix[:3, :3] @ np.asarray(v, dtype=np.float64)

    def inverse_apply_point(self, p: npt.ArrayLike) -> Vec3:
        """Map a world point into the local frame."""
        inv = self._inverse
        return inv[:3, :3] @ np.asarray(p, dtype=np.float64) + inv[:3, 3]

    def then(self, other: Transform) -> Transform:
        """Compose: apply this transform first, then ``other``."""
        return Transform(other._matrix @ self._matrix)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def approx_eq(self, other: Transform, atol: float = 1e-9) -> bool:
        """Check whether two transforms are equal within a tolerance."""
        return bool(np.allclose(self._matrix, other._matrix, rtol=0.0, atol=atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return self.approx_eq(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Transform({self._matrix.tolist()})"
