"""
Data models for the Film Query Service.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass  # auto-generates __init__, __repr__, etc.
# Import enum for the closed set of sort orderings
from enum import Enum  # tagged enumeration
# Import typing helpers for precise and self-documenting types
from typing import Any, Callable, Optional, Tuple  # optional values and fixed-size tuples


@dataclass(frozen=True)
class FilmEntry:
	"""
	Represents a single film award entry as stored below a container.
	Only the public fields live here; storage metadata is dropped by the store.
	"""
	title: str  # film title, the only required field
	year: Optional[int] = None  # year of the nomination
	awards: Optional[int] = None  # number of awards won
	nominations: Optional[int] = None  # number of nominations received
	number_of_references: Optional[int] = None  # how often the film is referenced
	is_best_picture: Optional[bool] = None  # True if the film won best picture


class SortKey(Enum):
	"""The four supported orderings; TITLE is the default."""
	TITLE = 'title'
	YEAR = 'year'
	AWARDS = 'awards'
	NOMINATIONS = 'nominations'


@dataclass(frozen=True)
class Predicate:
	"""
	A single boolean test over one FilmEntry field, derived from one query parameter.
	"""
	name: str  # parameter name that produced it (e.g. "minYear")
	accessor: Callable[[FilmEntry], Any]  # typed field getter
	compare: Callable[[Any, Any], bool]  # operator applied as compare(actual, expected)
	expected: Any  # already-coerced parameter value

	def test(self, film: FilmEntry) -> bool:
		"""Return True if the film satisfies this predicate; absent fields never match."""
		actual = self.accessor(film)
		if actual is None:
			return False
		return self.compare(actual, self.expected)


@dataclass(frozen=True)
class Query:
	"""
	Everything a single request asks for, after parameter parsing.
	"""
	predicates: Tuple[Predicate, ...] = ()  # AND-combined filters
	sort_key: Optional[SortKey] = None  # None means no explicit sortBy
	limit: Optional[int] = None  # None means unbounded
