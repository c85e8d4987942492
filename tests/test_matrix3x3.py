import pytest

from enginecore.matrix import Matrix
from enginecore.matrix3x3 import IDENTITY, Matrix3x3


def flat(matrix):
    return [value for row in matrix for value in row]


@pytest.fixture
def sample():
    return Matrix3x3([[2, 1, 0], [1, 3, 1], [0, 1, 4]])


def test_default_is_zero():
    assert Matrix3x3() == Matrix.zeros(3, 3)


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        Matrix3x3([[1, 2], [3, 4]])


def test_identity_constant():
    assert IDENTITY == Matrix3x3.identity()
    assert IDENTITY.transpose() == IDENTITY


def test_identity_inverse_is_identity():
    assert Matrix3x3.identity().inverse() == Matrix3x3.identity()


def test_inverse_times_matrix_is_identity(sample):
    inverse = sample.inverse()
    assert isinstance(inverse, Matrix3x3)
    assert flat(sample @ inverse) == pytest.approx(flat(IDENTITY))
    assert flat(inverse @ sample) == pytest.approx(flat(IDENTITY))


def test_inverse_of_inverse(sample):
    assert flat(sample.inverse().inverse()) == pytest.approx(flat(sample))


def test_singular_matrix_raises():
    with pytest.raises(ValueError):
        Matrix3x3([[1, 2, 3], [2, 4, 6], [0, 1, 1]]).inverse()


def test_operations_keep_type(sample):
    total = sample + sample
    assert isinstance(total, Matrix3x3)
    assert flat(total) == [4.0, 2.0, 0.0, 2.0, 6.0, 2.0, 0.0, 2.0, 8.0]

    product = sample @ sample
    assert isinstance(product, Matrix3x3)
    assert flat(product) == [5.0, 5.0, 1.0, 5.0, 11.0, 7.0, 1.0, 7.0, 17.0]

    transposed = sample.transpose()
    assert isinstance(transposed, Matrix3x3)
    assert transposed == sample

    scaled = sample.scaled(3)
    assert isinstance(scaled, Matrix3x3)
    assert flat(scaled) == [6.0, 3.0, 0.0, 3.0, 9.0, 3.0, 0.0, 3.0, 12.0]


def test_identity_is_neutral(sample):
    assert sample @ IDENTITY == sample
    assert IDENTITY @ sample == sample