"""
Vector, matrix and quaternion value types.

Public API:
    Vector2, Vector3, Vector4, VectorN (and Point* aliases)
    Matrix3, Matrix4, MatrixN; det, inverse, euler_angles act on matrices
    Quaternion; its inverse and euler_angles are exported here as
        quaternion_inverse and quaternion_euler_angles (they keep their
        plain names in pylinalg.types.quaternion)
    Generic accessors: get_row, set_row, get_col, set_col, get_diag,
        set_diag, swap_rows, swap_cols
"""

from pylinalg.types.vector import (
    Vector2,
    Vector3,
    Vector4,
    VectorN,
    Point2,
    Point3,
    Point4,
    PointN,
    cross,
    dot,
    normalize,
)
from pylinalg.types.matrix import (
    Matrix3,
    Matrix4,
    MatrixN,
    copy_block,
    det,
    euler_angles,
    inverse,
    outer_product,
)
from pylinalg.types.quaternion import Quaternion, distance, rotate, rotate_in_place, slerp
from pylinalg.types.quaternion import euler_angles as quaternion_euler_angles
from pylinalg.types.quaternion import inverse as quaternion_inverse
from pylinalg.types.accessors import (
    get_col,
    get_diag,
    get_row,
    set_col,
    set_diag,
    set_row,
    swap_cols,
    swap_rows,
)

__all__ = [
    # Vectors
    "Vector2",
    "Vector3",
    "Vector4",
    "VectorN",
    "Point2",
    "Point3",
    "Point4",
    "PointN",
    "cross",
    "dot",
    "normalize",
    # Matrices
    "Matrix3",
    "Matrix4",
    "MatrixN",
    "copy_block",
    "det",
    "euler_angles",
    "inverse",
    "outer_product",
    # Quaternion
    "Quaternion",
    "distance",
    "rotate",
    "rotate_in_place",
    "slerp",
    "quaternion_euler_angles",
    "quaternion_inverse",
    # Accessors
    "get_col",
    "get_diag",
    "get_row",
    "set_col",
    "set_diag",
    "set_row",
    "swap_cols",
    "swap_rows",
]
