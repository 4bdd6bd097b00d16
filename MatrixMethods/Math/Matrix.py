from __future__ import annotations

import collections.abc
import math
import numbers
import numpy
import typing
import typeguard

from .. import Exceptions
from .. import Logger
from .. import Misc

Row = tuple[float, ...]


class Matrix(collections.abc.Hashable):
	"""
	Class representing an immutable row vector (1xN) or rectangular (MxN) matrix
	A single row is always stored flat; two or more rows are stored as a tuple of equal-length rows
	"""

	__logger__: typing.Optional[Logger.Logger] = None

	@classmethod
	def attach_logger(cls, logger: Logger.Logger) -> None:
		"""
		Installs a trace logger shared by all matrices
		Operations write their operand dimensions on DEBUG level and failures on ERROR level
		:param logger: The log writer to use
		:raises InvalidArgumentException: If 'logger' is not a Logger
		"""

		Misc.raise_ifn(isinstance(logger, Logger.Logger), Exceptions.InvalidArgumentException(Matrix.attach_logger, 'logger', type(logger), (Logger.Logger,)))
		Matrix.__logger__ = logger

	@classmethod
	def detach_logger(cls) -> typing.Optional[Logger.Logger]:
		"""
		Removes the trace logger
		The logger itself is left open
		:return: The previously attached logger or None
		"""

		logger: typing.Optional[Logger.Logger] = Matrix.__logger__
		Matrix.__logger__ = None
		return logger

	@classmethod
	def __trace__(cls, msg: str) -> None:
		"""
		INTERNAL METHOD
		Writes a DEBUG line to the attached logger, if any
		:param msg: The message
		"""

		if Matrix.__logger__ is not None and not Matrix.__logger__.closed:
			Matrix.__logger__.debug(msg)

	@classmethod
	def __fail__(cls, exception: BaseException) -> BaseException:
		"""
		INTERNAL METHOD
		Writes an ERROR line to the attached logger, if any
		:param exception: The exception about to be raised
		:return: The same exception
		"""

		if Matrix.__logger__ is not None and not Matrix.__logger__.closed:
			Matrix.__logger__.error(f'{type(exception).__name__}: {exception}')

		return exception

	@classmethod
	def __from_rows__(cls, rows: typing.Sequence[typing.Sequence[float]]) -> Matrix:
		"""
		INTERNAL METHOD
		Builds a matrix from rows already known to be rectangular
		A single row collapses to a row vector
		:param rows: The matrix rows
		:return: The new matrix
		"""

		instance: Matrix = cls.__new__(cls)

		if len(rows) == 1:
			instance.__vector__ = True
			instance.__values__ = tuple(rows[0])
		else:
			instance.__vector__ = False
			instance.__values__ = tuple(tuple(row) for row in rows)

		return instance

	@staticmethod
	def __check_scalar__(value: typing.Any) -> float:
		"""
		INTERNAL METHOD
		Validates a single matrix cell
		:param value: The cell value
		:return: The value unchanged
		:raises InvalidShapeError: If the value is itself a sequence
		:raises InvalidArgumentException: If the value is not a real number
		"""

		if isinstance(value, numbers.Real) and not isinstance(value, bool):
			return value
		elif isinstance(value, collections.abc.Iterable) and not isinstance(value, (str, bytes)):
			raise Matrix.__fail__(Exceptions.InvalidShapeError('Matrix cells must be numbers; matrices of more than two dimensions are not supported'))
		else:
			raise Matrix.__fail__(Exceptions.InvalidArgumentException(Matrix.__init__, 'values', type(value), (int, float)))

	@staticmethod
	def __is_row__(value: typing.Any) -> bool:
		return isinstance(value, collections.abc.Iterable) and not isinstance(value, (str, bytes))

	@staticmethod
	def __inner_product__(a: typing.Sequence[float], b: typing.Sequence[float]) -> float:
		"""
		INTERNAL METHOD
		Sums the pairwise products of two equal-length sequences, left to right, starting from zero
		:param a: The first sequence
		:param b: The second sequence
		:return: The inner product
		"""

		total: float = 0

		for x, y in zip(a, b):
			total += x * y

		return total

	def __init__(self, values: typing.Iterable[float] | typing.Iterable[typing.Iterable[float]] | Matrix | numpy.ndarray):
		"""
		Class representing an immutable row vector (1xN) or rectangular (MxN) matrix
		- Constructor -
		:param values: Either a flat sequence of numbers, a sequence of two or more equal-length sequences of numbers, another matrix, or a 1D or 2D numpy array
		:raises InvalidArgumentException: If 'values' is not iterable or contains a non-number
		:raises InvalidShapeError: If a single row is redundantly nested, rows differ in length, or a row is empty
		"""

		if isinstance(values, Matrix):
			self.__vector__: bool = values.__vector__
			self.__values__: Row | tuple[Row, ...] = values.__values__
			return
		elif isinstance(values, numpy.ndarray):
			if values.ndim not in (1, 2):
				raise Matrix.__fail__(Exceptions.InvalidShapeError(f'Cannot build a matrix from a {values.ndim}-dimensional array'))

			values = values[0].tolist() if values.ndim == 2 and values.shape[0] == 1 else values.tolist()
		elif isinstance(values, (str, bytes)):
			raise Matrix.__fail__(Exceptions.InvalidArgumentException(Matrix.__init__, 'values', type(values), (list, tuple, Matrix, numpy.ndarray)))

		try:
			typeguard.check_type(values, typing.Iterable)
		except typeguard.TypeCheckError:
			raise Matrix.__fail__(Exceptions.InvalidArgumentException(Matrix.__init__, 'values', type(values), (list, tuple, Matrix, numpy.ndarray))) from None

		items: tuple = tuple(values)

		if len(items) == 0 or not Matrix.__is_row__(items[0]):
			self.__vector__: bool = True
			self.__values__: Row | tuple[Row, ...] = tuple(Matrix.__check_scalar__(x) for x in items)
			return
		elif len(items) == 1:
			raise Matrix.__fail__(Exceptions.InvalidShapeError('A single row must be passed as a flat sequence, not nested'))

		rows: list[Row] = []

		for item in items:
			if not Matrix.__is_row__(item):
				raise Matrix.__fail__(Exceptions.InvalidShapeError('Matrix rows must all be sequences'))

			rows.append(tuple(Matrix.__check_scalar__(x) for x in item))

		width: int = len(rows[0])

		if width == 0:
			raise Matrix.__fail__(Exceptions.InvalidShapeError('Matrix rows must not be empty'))
		elif any(len(row) != width for row in rows):
			raise Matrix.__fail__(Exceptions.InvalidShapeError(f'Matrix rows must all have length {width}; got lengths {", ".join(str(len(row)) for row in rows)}'))

		self.__vector__: bool = False
		self.__values__: Row | tuple[Row, ...] = tuple(rows)

	def __hash__(self) -> int:
		return hash((self.__vector__, self.__values__))

	def __eq__(self, other: typing.Any) -> bool:
		"""
		:param other: The object to compare
		:return: Whether both matrices have the same shape and the same values
		"""

		if not isinstance(other, Matrix):
			return NotImplemented

		return self.__vector__ == other.__vector__ and self.__values__ == other.__values__

	def __len__(self) -> int:
		"""
		:return: The number of cells in this matrix
		"""

		return self.count_rows() * self.count_columns()

	def __iter__(self) -> typing.Iterator[Row]:
		"""
		:return: An iterator over the rows of this matrix
		"""

		return iter(self.__rows__())

	def __getitem__(self, position: int | tuple[int, int]) -> Row | float:
		"""
		Gets either a row or a single cell from this matrix
		:param position: The zero-indexed row or (row, column) pair
		:return: The row as a tuple or the cell value
		:raises InvalidArgumentException: If 'position' is neither an int nor a pair of ints
		:raises IndexError: If the position is out of range
		"""

		if isinstance(position, int):
			return self.__rows__()[position]
		elif isinstance(position, tuple) and len(position) == 2 and all(isinstance(x, int) for x in position):
			row, column = position
			return self.__rows__()[row][column]
		else:
			raise Exceptions.InvalidArgumentException(Matrix.__getitem__, 'position', type(position), (int, tuple))

	def __repr__(self) -> str:
		return f'<{type(self).__name__} {self.count_rows()}x{self.count_columns()} @ {hex(id(self))}>'

	def __str__(self) -> str:
		"""
		Row vectors render on one line; rectangular matrices render one line per row
		with every column right-aligned to its own widest value
		:return: The formatted matrix
		"""

		if self.__vector__:
			return f'[ {" ".join(str(x) for x in self.__values__)} ]'

		widths: tuple[int, ...] = tuple(max(len(str(x)) for x in column) for column in zip(*self.__values__))
		return '\n'.join(f'[ {" ".join(str(x).rjust(widths[j]) for j, x in enumerate(row))} ]' for row in self.__values__)

	def __add__(self, other: Matrix) -> Matrix:
		if not isinstance(other, Matrix):
			return NotImplemented

		return self.add(other)

	def __matmul__(self, other: Matrix) -> Matrix:
		if not isinstance(other, Matrix):
			return NotImplemented

		return self.multiply(other)

	def __rows__(self) -> tuple[Row, ...]:
		"""
		INTERNAL METHOD
		:return: The rows of this matrix, treating a row vector as a single row
		"""

		return (self.__values__,) if self.__vector__ else self.__values__

	def __column__(self, index: int) -> Row:
		"""
		INTERNAL METHOD
		A row vector yields each of its cells as a column of length one
		:param index: The column index
		:return: The column values from top to bottom
		"""

		return tuple(row[index] for row in self.__rows__())

	def __shape__(self) -> str:
		return f'{self.count_rows()}x{self.count_columns()}'

	def count_rows(self) -> int:
		"""
		:return: The number of rows in this matrix; 1 for a row vector
		"""

		return 1 if self.__vector__ else len(self.__values__)

	def count_columns(self) -> int:
		"""
		:return: The number of columns in this matrix
		"""

		return len(self.__values__) if self.__vector__ else len(self.__values__[0])

	def is_row_vector(self) -> bool:
		return self.__vector__

	def is_square(self) -> bool:
		return self.count_rows() == self.count_columns()

	def addable(self, other: Matrix) -> bool:
		"""
		Determines whether two matrices can be summed
		:param other: The other matrix
		:return: Whether both matrices have the same number of rows and columns
		:raises InvalidArgumentException: If 'other' is not a matrix
		"""

		Misc.raise_ifn(isinstance(other, Matrix), Exceptions.InvalidArgumentException(Matrix.addable, 'other', type(other), (Matrix,)))
		return self.count_rows() == other.count_rows() and self.count_columns() == other.count_columns()

	def add(self, other: Matrix) -> Matrix:
		"""
		Adds two matrices position for position
		:param other: The matrix to add
		:return: The new matrix holding the sum
		:raises InvalidArgumentException: If 'other' is not a matrix
		:raises NotAddableError: If the matrix dimensions differ
		"""

		if not self.addable(other):
			raise Matrix.__fail__(Exceptions.NotAddableError(f'Cannot add matrix of dimension {other.__shape__()} to matrix of dimension {self.__shape__()}'))

		Matrix.__trace__(f'add {self.__shape__()} + {other.__shape__()}')

		if self.__vector__:
			return self.map(lambda value, i: value + other.__values__[i])

		return self.map(lambda row, i: tuple(value + other.__values__[i][j] for j, value in enumerate(row)))

	def multipliable(self, other: Matrix) -> bool:
		"""
		Determines whether two matrices can be multiplied
		:param other: The right-hand matrix
		:return: Whether this matrix has as many columns as 'other' has rows
		:raises InvalidArgumentException: If 'other' is not a matrix
		"""

		Misc.raise_ifn(isinstance(other, Matrix), Exceptions.InvalidArgumentException(Matrix.multipliable, 'other', type(other), (Matrix,)))
		return self.count_columns() == other.count_rows()

	def multiply(self, other: Matrix) -> Matrix:
		"""
		Calculates the matrix product of this matrix and another
		Each cell (i, j) is the inner product of row i of this matrix and column j of 'other'
		A row vector on the left produces a row vector
		:param other: The right-hand matrix
		:return: The new matrix holding the product
		:raises InvalidArgumentException: If 'other' is not a matrix
		:raises NotMultipliableError: If the inner dimensions differ
		"""

		if not self.multipliable(other):
			raise Matrix.__fail__(Exceptions.NotMultipliableError(f'Cannot multiply matrix of dimension {self.__shape__()} by matrix of dimension {other.__shape__()}'))

		Matrix.__trace__(f'multiply {self.__shape__()} @ {other.__shape__()}')
		columns: tuple[Row, ...] = tuple(other.__column__(j) for j in range(other.count_columns()))

		if self.__vector__:
			return Matrix.__from_rows__((tuple(Matrix.__inner_product__(self.__values__, column) for column in columns),))

		return Matrix.__from_rows__(tuple(tuple(Matrix.__inner_product__(row, column) for column in columns) for row in self.__values__))

	def transposed(self) -> Matrix:
		"""
		:return: The transposed matrix; a row vector becomes a column and a single column becomes a row vector
		"""

		Matrix.__trace__(f'transpose {self.__shape__()}')

		if self.count_columns() == 0:
			return Matrix(self)

		return Matrix.__from_rows__(tuple(zip(*self.__rows__())))

	def inverted(self) -> Matrix:
		"""
		Calculates the multiplicative inverse of this matrix using numpy
		:return: The inverse matrix with the same dimensions
		:raises InversionFailedError: If the matrix is singular or not square, or holds values too large for a float
		"""

		Matrix.__trace__(f'invert {self.__shape__()}')

		try:
			inverse: numpy.ndarray = numpy.linalg.inv(self.to_numpy())
		except (numpy.linalg.LinAlgError, OverflowError) as e:
			raise Matrix.__fail__(Exceptions.InversionFailedError(f'Cannot invert matrix of dimension {self.__shape__()}: {e}')) from e

		return Matrix.__from_rows__(inverse.tolist())

	def map(self, callback: typing.Callable[[float, int], float] | typing.Callable[[Row, int], typing.Iterable[float]]) -> Matrix:
		"""
		Applies a function over this matrix
		For a row vector the callback receives each value and its index and returns a value
		For a rectangular matrix the callback receives each row (as a tuple) and its index and returns a new row
		:param callback: The transformer callback
		:return: The transformed matrix
		:raises InvalidArgumentException: If the callback is not callable
		:raises InvalidShapeError: If the returned rows differ in length
		"""

		Misc.raise_ifn(callable(callback), Exceptions.InvalidArgumentException(Matrix.map, 'callback', type(callback), ('callable',)))

		if self.__vector__:
			return Matrix([callback(value, i) for i, value in enumerate(self.__values__)])

		return Matrix([callback(row, i) for i, row in enumerate(self.__values__)])

	def transform_by(self, callback: typing.Callable[[float], float]) -> Matrix:
		"""
		Applies a function to all values in this matrix
		:param callback: A transformer callback accepting a single number and returning a single number
		:return: The transformed matrix
		:raises InvalidArgumentException: If the callback is not callable
		"""

		Misc.raise_ifn(callable(callback), Exceptions.InvalidArgumentException(Matrix.transform_by, 'callback', type(callback), ('callable',)))

		if self.__vector__:
			return Matrix([callback(x) for x in self.__values__])

		return Matrix([[callback(x) for x in row] for row in self.__values__])

	def isclose(self, other: Matrix, *, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
		"""
		Compares two matrices within floating-point tolerance
		:param other: The other matrix
		:param rel_tol: The relative tolerance passed to 'math.isclose'
		:param abs_tol: The absolute tolerance passed to 'math.isclose'
		:return: Whether both matrices have the same dimensions and all cells are close
		:raises InvalidArgumentException: If 'other' is not a matrix
		"""

		Misc.raise_ifn(isinstance(other, Matrix), Exceptions.InvalidArgumentException(Matrix.isclose, 'other', type(other), (Matrix,)))

		if not self.addable(other):
			return False

		return all(math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol) for x, y in zip(self.__rows__(), other.__rows__()) for a, b in zip(x, y))

	def to_nested(self) -> list[float] | list[list[float]]:
		"""
		:return: A mutable copy of the backing values; a flat list for a row vector
		"""

		return list(self.__values__) if self.__vector__ else [list(row) for row in self.__values__]

	def to_numpy(self) -> numpy.ndarray:
		"""
		:return: This matrix converted to a 2D numpy array of floats
		"""

		return numpy.array(self.__rows__(), dtype=float).reshape(self.dimensions)

	def __array__(self, dtype: typing.Optional[numpy.dtype] = None, copy: typing.Optional[bool] = None) -> numpy.ndarray:
		"""
		Allows 'numpy.asarray' and friends to accept a matrix directly
		:param dtype: The requested array type
		:param copy: Ignored; a new array is always built
		:return: This matrix as a 2D numpy array
		"""

		array: numpy.ndarray = self.to_numpy()
		return array if dtype is None else array.astype(dtype)

	@property
	def value(self) -> Row | tuple[Row, ...]:
		"""
		:return: The read-only backing values; a flat tuple for a row vector, otherwise a tuple of rows
		"""

		return self.__values__

	@property
	def dimensions(self) -> tuple[int, int]:
		"""
		:return: The (rows, columns) pair of this matrix
		"""

		return self.count_rows(), self.count_columns()
