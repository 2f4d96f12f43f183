import pytest

from linregkit.matrix import Matrix, SingularMatrixError
from linregkit.vector import Vector

A1 = [[5, 2, -3], [-1, 4, 1], [3, -2, 6]]
A2 = [[6, 2, 1], [2, 5, 0], [1, 0, 3]]


def _identity(n):
    return Matrix.from_rows([[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)])


def _assert_close(m1, m2, tol=1e-9):
    assert (m1.num_rows, m1.num_cols) == (m2.num_rows, m2.num_cols)
    for r1, r2 in zip(m1.rows(), m2.rows()):
        assert r1 == pytest.approx(r2, abs=tol)


def test_new_matrix_is_zero_with_given_shape():
    m = Matrix(2, 3)
    assert (m.num_rows, m.num_cols) == (2, 3)
    assert m.rows() == [[0.0] * 3, [0.0] * 3]


@pytest.mark.parametrize("shape", [(0, 3), (3, 0), (-1, 2)])
def test_invalid_shape_raises(shape):
    with pytest.raises(ValueError):
        Matrix(*shape)


def test_from_rows_rejects_ragged_and_empty():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])
    with pytest.raises(ValueError):
        Matrix.from_rows([])


def test_one_based_indexing_reads_and_writes():
    m = Matrix.from_rows(A1)
    assert m[1, 1] == 5.0
    assert m[3, 2] == -2.0
    m[2, 3] = 42
    assert m.rows()[1][2] == 42.0


@pytest.mark.parametrize("key", [(0, 1), (1, 0), (4, 1), (1, 4)])
def test_out_of_range_index_raises(key):
    m = Matrix.from_rows(A1)
    with pytest.raises(IndexError):
        m[key]
    with pytest.raises(IndexError):
        m[key] = 1.0
    assert m.rows() == [[float(x) for x in row] for row in A1]


def test_rows_returns_independent_copy():
    m = Matrix.from_rows(A1)
    rows = m.rows()
    rows[0][0] = 99
    assert m[1, 1] == 5.0


def test_copy_is_independent():
    m = Matrix.from_rows(A1)
    c = m.copy()
    c[1, 1] = -7
    assert m[1, 1] == 5.0
    assert c != m


def test_transpose_swaps_shape_and_is_involution():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    t = m.transpose()
    assert (t.num_rows, t.num_cols) == (3, 2)
    assert t[3, 1] == m[1, 3]
    assert t.transpose() == m


def test_add_sub_round_trip():
    a = Matrix.from_rows(A1)
    b = Matrix.from_rows(A2)
    assert (a + b) - b == a


def test_add_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(2, 2) + Matrix(2, 3)
    with pytest.raises(ValueError):
        Matrix(2, 2) - Matrix(3, 2)


def test_multiply_by_identity_is_identity_operation():
    a = Matrix.from_rows(A1)
    assert a * _identity(3) == a
    assert _identity(3) * a == a


def test_matrix_product_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(2, 3) * Matrix(2, 3)


def test_matrix_vector_matches_matrix_column_product():
    a = Matrix.from_rows(A1)
    v = Vector([7, 2, 13])
    column = Matrix.from_rows([[7], [2], [13]])
    result = a * v
    assert list(result) == [row[0] for row in (a * column).rows()]


def test_matrix_vector_size_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(3, 3) * Vector([1, 2])


def test_scalar_multiplication_matches_addition():
    a = Matrix.from_rows(A2)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_determinant_of_identity():
    assert _identity(4).determinant() == pytest.approx(1.0)


def test_determinant_of_singular_matrix_is_zero():
    m = Matrix.from_rows([[1, 2], [2, 4]])
    assert m.determinant() == 0.0


def test_row_swap_negates_determinant():
    a = Matrix.from_rows(A1)
    swapped = Matrix.from_rows([A1[1], A1[0], A1[2]])
    assert swapped.determinant() == pytest.approx(-a.determinant())


def test_determinant_of_product_and_inverse():
    a = Matrix.from_rows(A1)
    b = Matrix.from_rows(A2)
    assert (a * b).determinant() == pytest.approx(a.determinant() * b.determinant())
    assert a.determinant() * a.inverse().determinant() == pytest.approx(1.0)


def test_determinant_requires_square():
    with pytest.raises(ValueError):
        Matrix(2, 3).determinant()


@pytest.mark.parametrize("rows", [A1, A2, [[0, 1], [1, 0]]])
def test_inverse_times_matrix_is_identity(rows):
    a = Matrix.from_rows(rows)
    n = a.num_rows
    _assert_close(a * a.inverse(), _identity(n))
    _assert_close(a.inverse() * a, _identity(n))


def test_inverse_of_singular_raises():
    with pytest.raises(SingularMatrixError):
        Matrix.from_rows([[1, 2], [2, 4]]).inverse()


def test_singular_error_is_value_error():
    with pytest.raises(ValueError):
        Matrix(2, 2).inverse()


def test_inverse_requires_square():
    with pytest.raises(ValueError):
        Matrix(3, 2).inverse()


def test_pseudo_inverse_of_square_equals_inverse():
    a = Matrix.from_rows(A1)
    _assert_close(a.pseudo_inverse(), a.inverse())


def test_pseudo_inverse_of_tall_matrix_is_left_inverse():
    a = Matrix.from_rows([[1, 2], [3, 4], [5, 7]])
    p = a.pseudo_inverse()
    assert (p.num_rows, p.num_cols) == (2, 3)
    _assert_close(p * a, _identity(2))


def test_pseudo_inverse_of_wide_matrix_is_right_inverse():
    a = Matrix.from_rows([[1, 0, 2], [0, 1, 3]])
    p = a.pseudo_inverse()
    assert (p.num_rows, p.num_cols) == (3, 2)
    _assert_close(a * p, _identity(2))


def test_is_symmetric():
    assert Matrix.from_rows(A2).is_symmetric() is True
    assert Matrix.from_rows(A1).is_symmetric() is False
    assert Matrix(2, 3).is_symmetric() is False


def test_is_symmetric_respects_tolerance():
    m = Matrix.from_rows([[1, 2], [2 + 1e-6, 1]])
    assert m.is_symmetric() is False
    assert m.is_symmetric(tol=1e-3) is True


def test_str_lays_out_rows():
    assert str(Matrix.from_rows([[1, 2.5], [3, 4]])) == "1 2.5\n3 4"