"""3×3 行列の Pure Python ヘルパー。"""

from __future__ import annotations

Vec3 = tuple[float, float, float]
Mat3 = tuple[Vec3, Vec3, Vec3]

IDENTITY: Mat3 = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
)


def mat3_mul_vec(m: Mat3, v: Vec3) -> Vec3:
    """行列×列ベクトル。"""
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def mat3_mul(a: Mat3, b: Mat3) -> Mat3:
    """行列積 a·b。"""
    rows = []
    for i in range(3):
        rows.append(
            tuple(sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3))
        )
    return (rows[0], rows[1], rows[2])  # type: ignore[return-value]


def mat3_determinant(m: Mat3) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def mat3_inverse(m: Mat3) -> Mat3:
    """余因子展開による逆行列。

    Raises:
        ValueError: 特異行列
    """
    det = mat3_determinant(m)
    if det == 0.0:
        raise ValueError("matrix is singular")
    inv_det = 1.0 / det
    return (
        (
            (m[1][1] * m[2][2] - m[1][2] * m[2][1]) * inv_det,
            (m[0][2] * m[2][1] - m[0][1] * m[2][2]) * inv_det,
            (m[0][1] * m[1][2] - m[0][2] * m[1][1]) * inv_det,
        ),
        (
            (m[1][2] * m[2][0] - m[1][0] * m[2][2]) * inv_det,
            (m[0][0] * m[2][2] - m[0][2] * m[2][0]) * inv_det,
            (m[0][2] * m[1][0] - m[0][0] * m[1][2]) * inv_det,
        ),
        (
            (m[1][0] * m[2][1] - m[1][1] * m[2][0]) * inv_det,
            (m[0][1] * m[2][0] - m[0][0] * m[2][1]) * inv_det,
            (m[0][0] * m[1][1] - m[0][1] * m[1][0]) * inv_det,
        ),
    )
