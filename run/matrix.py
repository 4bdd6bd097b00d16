import sys

from MatrixMethods.Logger import Logger
from MatrixMethods.Math.Matrix import Matrix


if __name__ == '__main__':
	Matrix.attach_logger(Logger(sys.stderr))
	matrix: Matrix = Matrix([[1, 2, 3], [-10, 11, -12], [100, 0, 0]])
	print(matrix, matrix.transposed(), matrix.inverted(), matrix @ Matrix([[1], [0], [1]]), sep='\n\n')
	Matrix.detach_logger().detach()
