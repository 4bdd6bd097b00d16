import typing
import types


class InvalidArgumentException(TypeError):
	"""
	[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
	"""

	def __init__(self, caller: typing.Callable | types.FunctionType | types.MethodType | types.LambdaType = None, parameter_name: str = None, argument_type: type = None, parameter_types: typing.Iterable[type | str] = None):
		"""
		[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
		- Constructor -
		:param caller: (CALLABLE) The callable that raised this exception
		:param parameter_name: (str) The name of the parameter
		:param argument_type: (type) The type of the argument passed in
		:param parameter_types: (ITERABLE[type]) The types this parameter accepts
		"""

		if caller is None or parameter_name is None or argument_type is None:
			super().__init__()
			return

		if parameter_types is None:
			type_list: str = '<UNKNOWN>'
		else:
			names: tuple[str, ...] = tuple(f"'{x.__name__ if isinstance(x, type) else x}'" for x in parameter_types)
			type_list: str = f'either {", ".join(names[:-1])} or {names[-1]}' if len(names) > 1 else names[0]

		callable_type: str = 'Callable'

		if '<lambda>' in caller.__qualname__:
			callable_type = 'Lambda'
		elif '.' in caller.__qualname__:
			callable_type = 'Method'
		elif isinstance(caller, types.FunctionType):
			callable_type = 'Function'

		super().__init__(f'{callable_type} {caller.__qualname__.replace(".", "::")} - parameter \'{parameter_name}\' must be {type_list}; got \'{argument_type.__name__}\'')


class InvalidShapeError(ValueError):
	"""
	[InvalidShapeError(ValueError)] - Exception representing matrix data with redundant nesting or uneven rows
	"""

	def __init__(self, what: str = ''):
		"""
		[InvalidShapeError(ValueError)] - Exception representing matrix data with redundant nesting or uneven rows
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)


class NotAddableError(ValueError):
	"""
	[NotAddableError(ValueError)] - Exception representing an addition of two matrices with different shapes
	"""

	def __init__(self, what: str = ''):
		super().__init__(what)


class NotMultipliableError(ValueError):
	"""
	[NotMultipliableError(ValueError)] - Exception representing a product of two matrices with mismatched inner dimensions
	"""

	def __init__(self, what: str = ''):
		super().__init__(what)


class InversionFailedError(ArithmeticError):
	"""
	[InversionFailedError(ArithmeticError)] - Exception representing a singular or non-square matrix passed to inversion
	"""

	def __init__(self, what: str = ''):
		"""
		[InversionFailedError(ArithmeticError)] - Exception representing a singular or non-square matrix passed to inversion
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)
