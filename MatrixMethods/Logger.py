from __future__ import annotations

import datetime
import io
import typing

from . import Exceptions

DEBUG: int = 10
INFO: int = 20
WARN: int = 30
ERROR: int = 40
CRITICAL: int = 50

LEVEL_NAMES: dict[int, str] = {DEBUG: 'DEBUG', INFO: 'INFO', WARN: 'WARN', ERROR: 'ERROR', CRITICAL: 'CRITICAL'}


class Logger:
	"""
	Class representing a log file writer
	"""

	def __init__(self, stream: io.IOBase, timezone: datetime.timezone = datetime.timezone.utc, level: int = DEBUG):
		"""
		Class representing a log file writer
		- Constructor -
		:param stream: The stream to write results to
		:param timezone: The timezone to log with
		:param level: The minimum level a message must have to be written
		:raises InvalidArgumentException: If any argument has the wrong type
		:raises ValueError: If 'level' is not one of the known levels
		:raises IOError: If the stream is closed or not writable
		"""

		if not isinstance(stream, io.IOBase):
			raise Exceptions.InvalidArgumentException(Logger.__init__, 'stream', type(stream), (io.IOBase,))
		elif not isinstance(timezone, datetime.timezone):
			raise Exceptions.InvalidArgumentException(Logger.__init__, 'timezone', type(timezone), (datetime.timezone,))
		elif not isinstance(level, int) or isinstance(level, bool):
			raise Exceptions.InvalidArgumentException(Logger.__init__, 'level', type(level), (int,))
		elif level not in LEVEL_NAMES:
			raise ValueError(f'Unknown log level \'{level}\'')

		if stream.closed:
			raise IOError('Stream is closed')
		elif not stream.writable():
			raise IOError('Target stream is not writable')

		self.__stream__: io.IOBase | None = stream
		self.__timezone__: datetime.timezone = timezone
		self.__level__: int = level
		self.__state__: bool = True
		self.__stream__.write('==========[ Log Opened ]==========\n\n')

	def __write__(self, level: int, msg: typing.Any) -> Logger:
		"""
		INTERNAL METHOD
		Writes a single line to the stream if 'level' meets this log's threshold
		:param level: The message level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		if self.__state__ is False:
			raise IOError('Log is closed')
		elif level < self.__level__:
			return self

		timestamp: str = datetime.datetime.now(self.__timezone__).strftime("%m/%d/%Y %H:%M:%S.%f")
		self.__stream__.write(f'{timestamp} [ {self.__timezone__} ] [ {LEVEL_NAMES[level]} ]: {str(msg).strip()}\n')
		return self

	def close(self) -> None:
		"""
		Closes the log writer
		Any further write is erroneous
		:raises IOError: If log is already closed
		"""

		if self.__state__ is False:
			raise IOError('Log is closed')

		self.__stream__.write('\n==========[ Log Closed ]==========')
		self.__state__ = False
		self.__stream__.flush()
		self.__stream__.close()
		self.__stream__ = None

	def detach(self) -> None:
		"""
		Detaches the log writer
		The underlying stream is not closed
		Any further write is erroneous
		:raises IOError: If log is already closed
		"""

		if self.__state__ is False:
			raise IOError('Log is closed')

		self.__stream__.write('\n==========[ Log Closed ]==========')
		self.__state__ = False
		self.__stream__ = None

	def debug(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on DEBUG level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__(DEBUG, msg)

	def info(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on INFO level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__(INFO, msg)

	def warn(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on WARN level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__(WARN, msg)

	def error(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on ERROR level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__(ERROR, msg)

	def critical(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on CRITICAL level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__(CRITICAL, msg)

	@property
	def closed(self) -> bool:
		"""
		:return: Whether this log writer has been closed or detached
		"""

		return not self.__state__

	@property
	def level(self) -> int:
		"""
		:return: The minimum level a message must have to be written
		"""

		return self.__level__
