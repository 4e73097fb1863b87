"""Vector and 4x4 matrix math for row-vector transforms (v * M)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Sequence

Row = tuple[float, float, float, float]


@dataclass(frozen=True)
class Vector3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return add(self, other)
        return NotImplemented

    def __sub__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return subtract(self, other)
        return NotImplemented

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: object) -> Vector3:
        if isinstance(scalar, (int, float)):
            return scale_vector(scalar, self)
        return NotImplemented

    __rmul__ = __mul__


def _zero_rows() -> tuple[Row, ...]:
    return tuple((0.0, 0.0, 0.0, 0.0) for _ in range(4))


@dataclass(frozen=True)
class Matrix4x4:
    """An immutable 4x4 matrix stored as rows; ``m[row][col]`` reads an element."""

    rows: tuple[Row, ...] = field(default_factory=_zero_rows)

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def column(self, index: int) -> tuple[float, ...]:
        return tuple(row[index] for row in self.rows)

    def __matmul__(self, other: object) -> Matrix4x4:
        if isinstance(other, Matrix4x4):
            return multiply(self, other)
        return NotImplemented


def identity_matrix() -> Matrix4x4:
    """Return the 4x4 identity matrix."""
    return Matrix4x4(
        tuple(tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4))
    )


def multiply(m1: Matrix4x4, m2: Matrix4x4) -> Matrix4x4:
    """Return the matrix product m1 * m2."""
    columns = list(zip(*m2.rows))
    return Matrix4x4(
        tuple(
            tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
            for row in m1.rows
        )
    )


def scale_vector(scalar: float, v: Vector3) -> Vector3:
    """Return v scaled by scalar."""
    return Vector3(v.x * scalar, v.y * scalar, v.z * scalar)


def make_rotate_x_matrix(theta: float) -> Matrix4x4:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, c, s, 0.0),
            (0.0, -s, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_rotate_y_matrix(theta: float) -> Matrix4x4:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4(
        (
            (c, 0.0, -s, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (s, 0.0, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_rotate_z_matrix(theta: float) -> Matrix4x4:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4(
        (
            (c, -s, 0.0, 0.0),
            (s, c, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def _row_product(v: Vector3, m: Matrix4x4, w: float) -> list[float]:
    r0, r1, r2, r3 = m.rows
    return [v.x * a + v.y * b + v.z * c + w * d for a, b, c, d in zip(r0, r1, r2, r3)]


def transform_normal(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a direction by the upper 3x3 part of m, ignoring translation."""
    x, y, z, _ = _row_product(v, m, 0.0)
    return Vector3(x, y, z)


def dot(v1: Vector3, v2: Vector3) -> float:
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def length(v: Vector3) -> float:
    return math.sqrt(dot(v, v))


def normalize(v: Vector3) -> Vector3:
    """Return the unit vector along v; a zero vector raises ValueError."""
    size = length(v)
    if size == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return Vector3(v.x / size, v.y / size, v.z / size)


def make_affine_matrix(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """Build scale, X*(Y*Z) rotation and translation into one matrix."""
    rotation = multiply(
        make_rotate_x_matrix(rotate.x),
        multiply(make_rotate_y_matrix(rotate.y), make_rotate_z_matrix(rotate.z)),
    )
    scaled = [
        (factor * row[0], factor * row[1], factor * row[2], 0.0)
        for factor, row in zip(scale, rotation.rows)
    ]
    return Matrix4x4((*scaled, (translate.x, translate.y, translate.z, 1.0)))


def _minor(rows: Sequence[Sequence[float]], skip_row: int, skip_col: int) -> list[list[float]]:
    return [
        [value for j, value in enumerate(row) if j != skip_col]
        for i, row in enumerate(rows)
        if i != skip_row
    ]


def _det3(a: Sequence[Sequence[float]]) -> float:
    return (
        a[0][0] * (a[1][1] * a[2][2] - a[1][2] * a[2][1])
        - a[0][1] * (a[1][0] * a[2][2] - a[1][2] * a[2][0])
        + a[0][2] * (a[1][0] * a[2][1] - a[1][1] * a[2][0])
    )


def _cofactor(rows: Sequence[Sequence[float]], i: int, j: int) -> float:
    sign = -1.0 if (i + j) % 2 else 1.0
    return sign * _det3(_minor(rows, i, j))


def inverse(m: Matrix4x4) -> Matrix4x4:
    """Return the inverse of m; a singular matrix raises ValueError."""
    rows = m.rows
    determinant = sum(rows[0][j] * _cofactor(rows, 0, j) for j in range(4))
    if determinant == 0.0:
        raise ValueError("matrix is singular and has no inverse")
    reciprocal = 1.0 / determinant
    return Matrix4x4(
        tuple(
            tuple(_cofactor(rows, j, i) * reciprocal for j in range(4))
            for i in range(4)
        )
    )


def make_perspective_fov_matrix(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    cot = 1.0 / math.tan(fov_y / 2)
    depth = far_clip - near_clip
    return Matrix4x4(
        (
            ((1.0 / aspect_ratio) * cot, 0.0, 0.0, 0.0),
            (0.0, cot, 0.0, 0.0),
            (0.0, 0.0, far_clip / depth, 1.0),
            (0.0, 0.0, -(near_clip * far_clip) / depth, 0.0),
        )
    )


def make_orthographic_matrix(
    left: float, top: float, right: float, bottom: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    return Matrix4x4(
        (
            (2.0 / (right - left), 0.0, 0.0, 0.0),
            (0.0, 2.0 / (top - bottom), 0.0, 0.0),
            (0.0, 0.0, 1.0 / (far_clip - near_clip), 0.0),
            (
                (left + right) / (left - right),
                (top + bottom) / (bottom - top),
                near_clip / (near_clip - far_clip),
                1.0,
            ),
        )
    )


def make_viewport_matrix(
    left: float, top: float, width: float, height: float, min_depth: float, max_depth: float
) -> Matrix4x4:
    return Matrix4x4(
        (
            (width / 2, 0.0, 0.0, 0.0),
            (0.0, -(height / 2), 0.0, 0.0),
            (0.0, 0.0, max_depth - min_depth, 0.0),
            (left + width / 2, top + height / 2, min_depth, 1.0),
        )
    )


def transpose(m: Matrix4x4) -> Matrix4x4:
    return Matrix4x4(tuple(zip(*m.rows)))


def transform(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a point by m with perspective divide; w == 0 raises ValueError."""
    x, y, z, w = _row_product(v, m, 1.0)
    if w == 0.0:
        raise ValueError("transformed point has w == 0")
    return Vector3(x / w, y / w, z / w)


def multiply_transposed(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a point as a column vector (M * v), without perspective divide."""
    x, y, z = (
        v.x * row[0] + v.y * row[1] + v.z * row[2] + row[3] for row in m.rows[:3]
    )
    return Vector3(x, y, z)


def subtract_matrices(m1: Matrix4x4, m2: Matrix4x4) -> Matrix4x4:
    return Matrix4x4(
        tuple(
            tuple(a - b for a, b in zip(row1, row2)) for row1, row2 in zip(m1.rows, m2.rows)
        )
    )


def add(v1: Vector3, v2: Vector3) -> Vector3:
    return Vector3(v1.x + v2.x, v1.y + v2.y, v1.z + v2.z)


def subtract(v1: Vector3, v2: Vector3) -> Vector3:
    return Vector3(v1.x - v2.x, v1.y - v2.y, v1.z - v2.z)


def add_scalar(v: Vector3, scalar: float) -> Vector3:
    return Vector3(v.x + scalar, v.y + scalar, v.z + scalar)