"""Vectors, 4x4 matrices and the affine helpers used by the game world.

Matrices follow the row-vector convention: a point is transformed as
``v @ M``, so translation lives in the fourth row.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Sequence, Tuple, Union

Rows = Tuple[Tuple[float, float, float, float], ...]


@dataclass
class Vector2:
    """Two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Vector3:
    """Three-component vector with the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def __pos__(self) -> "Vector3":
        return self.copy()

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)


@dataclass
class Vector4:
    """Four-component vector, used for RGBA colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


def _zero_rows() -> Rows:
    return tuple((0.0, 0.0, 0.0, 0.0) for _ in range(4))


@dataclass(frozen=True)
class Matrix4x4:
    """Immutable 4x4 matrix stored as four rows."""

    m: Rows = field(default_factory=_zero_rows)

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.m)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "m", rows)

    @classmethod
    def from_values(cls, *values: float) -> "Matrix4x4":
        """Build a matrix from 16 values in row-major order."""
        if len(values) != 16:
            raise ValueError("a Matrix4x4 needs exactly 16 values")
        return cls(tuple(tuple(values[row * 4 : row * 4 + 4]) for row in range(4)))

    @classmethod
    def identity(cls) -> "Matrix4x4":
        return cls(tuple(tuple(1.0 if r == c else 0.0 for c in range(4)) for r in range(4)))

    def __getitem__(self, row: int) -> Tuple[float, float, float, float]:
        return self.m[row]

    def __matmul__(self, other: "Matrix4x4") -> "Matrix4x4":
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return matrix_multiply(self, other)


def matrix_multiply(m1: Matrix4x4, m2: Matrix4x4) -> Matrix4x4:
    """Return the product ``m1 * m2``."""
    columns = list(zip(*m2.m))
    return Matrix4x4(
        tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in m1.m
        )
    )


def make_rotate_x_matrix(radian: float) -> Matrix4x4:
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4.from_values(
        1.0, 0.0, 0.0, 0.0,
        0.0, c, s, 0.0,
        0.0, -s, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def make_rotate_y_matrix(radian: float) -> Matrix4x4:
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4.from_values(
        c, 0.0, -s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        s, 0.0, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def make_rotate_z_matrix(radian: float) -> Matrix4x4:
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4.from_values(
        c, s, 0.0, 0.0,
        -s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def make_affine_matrix(scale: Vector3, rot: Vector3, translate: Vector3) -> Matrix4x4:
    """Scale, then rotate (Z, X, Y order), then translate."""
    scale_matrix = Matrix4x4.from_values(
        scale.x, 0.0, 0.0, 0.0,
        0.0, scale.y, 0.0, 0.0,
        0.0, 0.0, scale.z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )
    rotate_matrix = matrix_multiply(
        matrix_multiply(make_rotate_z_matrix(rot.z), make_rotate_x_matrix(rot.x)),
        make_rotate_y_matrix(rot.y),
    )
    translate_matrix = Matrix4x4.from_values(
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        translate.x, translate.y, translate.z, 1.0,
    )
    return matrix_multiply(matrix_multiply(scale_matrix, rotate_matrix), translate_matrix)


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point by a matrix, treating w as 1 and dropping it afterwards."""
    m = matrix.m
    return Vector3(
        vector.x * m[0][0] + vector.y * m[1][0] + vector.z * m[2][0] + m[3][0],
        vector.x * m[0][1] + vector.y * m[1][1] + vector.z * m[2][1] + m[3][1],
        vector.x * m[0][2] + vector.y * m[1][2] + vector.z * m[2][2] + m[3][2],
    )


Lerpable = Union[float, Vector3]


def lerp(a: Lerpable, b: Lerpable, t: float) -> Lerpable:
    """Linear interpolation between two floats or two vectors."""
    if isinstance(a, Vector3) and isinstance(b, Vector3):
        return Vector3(*(lerp(p, q, t) for p, q in zip(a, b)))
    if isinstance(a, Vector3) or isinstance(b, Vector3):
        raise TypeError("lerp needs two floats or two Vector3 values")
    return (1.0 - t) * a + t * b


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def flatten(matrix: Matrix4x4) -> Sequence[float]:
    """Return the 16 values of a matrix in row-major order."""
    return [value for row in matrix.m for value in row]