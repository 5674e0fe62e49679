"""
Error types raised by the query pipeline and the record store.
Every error is terminal for the current request.
"""

from typing import Optional


class FilmQueryError(Exception):
	"""Base class for all request-aborting errors."""


class MalformedParameter(FilmQueryError):
	"""A recognized parameter value cannot be parsed as its declared type."""

	def __init__(self, name: str, value: str, expected: str):
		self.name = name
		self.value = value
		self.expected = expected
		super().__init__(f"Parameter '{name}' expects {expected}, got '{value}'")


class UnsupportedSortKey(FilmQueryError):
	"""The sortBy value is not one of the supported orderings."""

	def __init__(self, value: str, suggestion: Optional[str] = None):
		self.value = value
		self.suggestion = suggestion
		message = f"Unsupported sortBy value '{value}'"
		if suggestion:
			message += f" (did you mean '{suggestion}'?)"
		super().__init__(message)


class AdapterUnavailable(FilmQueryError):
	"""The record store cannot supply candidates."""


class ContainerNotFound(AdapterUnavailable):
	"""The requested container path does not exist in the content tree."""

	def __init__(self, path: str):
		self.path = path
		super().__init__(f"Container not found: '{path}'")
