import collections.abc
import typing

from .Matrix import Matrix, Row
from .. import Exceptions
from .. import Misc


def construct(values: typing.Iterable) -> Matrix:
	"""
	Creates a matrix from a flat sequence of numbers or a sequence of equal-length sequences
	:param values: The matrix values
	:return: The new matrix
	:raises InvalidShapeError: If a single row is redundantly nested or the rows differ in length
	"""

	return Matrix(values)


def addable(a: Matrix, b: Matrix) -> bool:
	"""
	:param a: First operand
	:param b: Second operand
	:return: Whether both matrices have the same number of rows and columns
	"""

	Misc.raise_ifn(isinstance(a, Matrix), Exceptions.InvalidArgumentException(addable, 'a', type(a), (Matrix,)))
	return a.addable(b)


def add(a: Matrix, b: Matrix) -> Matrix:
	"""
	Adds two matrices position for position
	:param a: First operand
	:param b: Second operand
	:return: The sum
	:raises NotAddableError: If the matrix dimensions differ
	"""

	Misc.raise_ifn(isinstance(a, Matrix), Exceptions.InvalidArgumentException(add, 'a', type(a), (Matrix,)))
	return a.add(b)


def multipliable(a: Matrix, b: Matrix) -> bool:
	"""
	:param a: Left operand
	:param b: Right operand
	:return: Whether 'a' has as many columns as 'b' has rows
	"""

	Misc.raise_ifn(isinstance(a, Matrix), Exceptions.InvalidArgumentException(multipliable, 'a', type(a), (Matrix,)))
	return a.multipliable(b)


def multiply(a: Matrix, b: Matrix) -> Matrix:
	"""
	Calculates the matrix product of two matrices
	:param a: Left operand
	:param b: Right operand
	:return: The product
	:raises NotMultipliableError: If the inner dimensions differ
	"""

	Misc.raise_ifn(isinstance(a, Matrix), Exceptions.InvalidArgumentException(multiply, 'a', type(a), (Matrix,)))
	return a.multiply(b)


def transpose(matrix: Matrix) -> Matrix:
	"""
	:param matrix: The matrix to transpose
	:return: The matrix with rows and columns swapped
	"""

	Misc.raise_ifn(isinstance(matrix, Matrix), Exceptions.InvalidArgumentException(transpose, 'matrix', type(matrix), (Matrix,)))
	return matrix.transposed()


def invert(matrix: Matrix | typing.Iterable) -> Matrix:
	"""
	Calculates the multiplicative inverse of a square matrix
	Raw nested sequences are converted to a matrix first
	:param matrix: The matrix to invert
	:return: The inverse
	:raises InvalidArgumentException: If 'matrix' is neither a matrix nor an iterable
	:raises InversionFailedError: If the matrix is singular or not square
	"""

	Misc.raise_ifn(isinstance(matrix, (Matrix, collections.abc.Iterable)) and not isinstance(matrix, (str, bytes)), Exceptions.InvalidArgumentException(invert, 'matrix', type(matrix), (Matrix, list, tuple)))
	return (matrix if isinstance(matrix, Matrix) else Matrix(matrix)).inverted()


def map_matrix(matrix: Matrix, callback: typing.Callable) -> Matrix:
	"""
	Applies a function over a matrix
	Row vectors pass (value, index) to the callback; rectangular matrices pass (row, index)
	:param matrix: The source matrix
	:param callback: The transformer callback
	:return: The transformed matrix
	"""

	Misc.raise_ifn(isinstance(matrix, Matrix), Exceptions.InvalidArgumentException(map_matrix, 'matrix', type(matrix), (Matrix,)))
	return matrix.map(callback)


def count_rows(matrix: Matrix) -> int:
	"""
	:param matrix: The matrix
	:return: The number of rows; 1 for a row vector
	"""

	Misc.raise_ifn(isinstance(matrix, Matrix), Exceptions.InvalidArgumentException(count_rows, 'matrix', type(matrix), (Matrix,)))
	return matrix.count_rows()


def count_columns(matrix: Matrix) -> int:
	"""
	:param matrix: The matrix
	:return: The number of columns
	"""

	Misc.raise_ifn(isinstance(matrix, Matrix), Exceptions.InvalidArgumentException(count_columns, 'matrix', type(matrix), (Matrix,)))
	return matrix.count_columns()


def raw_value(matrix: Matrix) -> Row | tuple[Row, ...]:
	"""
	:param matrix: The matrix
	:return: The read-only backing values; a flat tuple for a row vector
	"""

	Misc.raise_ifn(isinstance(matrix, Matrix), Exceptions.InvalidArgumentException(raw_value, 'matrix', type(matrix), (Matrix,)))
	return matrix.value


def render(matrix: Matrix) -> str:
	"""
	:param matrix: The matrix
	:return: The column-aligned text form of the matrix
	"""

	Misc.raise_ifn(isinstance(matrix, Matrix), Exceptions.InvalidArgumentException(render, 'matrix', type(matrix), (Matrix,)))
	return str(matrix)


def inner_product(a: typing.Iterable[float], b: typing.Iterable[float]) -> float:
	"""
	Sums the pairwise products of two equal-length sequences
	:param a: The first sequence
	:param b: The second sequence
	:return: The inner product
	:raises ValueError: If the sequences differ in length
	"""

	a: tuple[float, ...] = tuple(a)
	b: tuple[float, ...] = tuple(b)
	Misc.raise_if(len(a) != len(b), ValueError(f'Mismatched sequence lengths {len(a)} and {len(b)}'))
	return Matrix.__inner_product__(a, b)
