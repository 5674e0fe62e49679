"""
Request parameter parsing module.
Turns raw name -> string pairs into a typed, immutable Query:
filter predicates, an optional sort key and an optional limit.
Unknown parameter names are ignored; malformed values abort the request.
"""

import operator  # comparison functions used by predicates
import re  # strict integer syntax
from dataclasses import dataclass  # parameter table rows
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union  # type annotations

from loguru import logger  # console logging

from .errors import MalformedParameter  # raised on coercion failures
from .models import FilmEntry, Predicate, Query  # typed records and query
from .sorting import parse_sort_key  # sortBy -> SortKey

# Raw request parameters: either a mapping or ordered (name, value) pairs
RawParams = Union[Mapping[str, str], Iterable[Tuple[str, str]]]

SORT_PARAM = 'sortBy'
LIMIT_PARAM = 'limit'
RE_INT = re.compile(r"[+-]?[0-9]+")  # no whitespace, no underscores
INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1  # signed 32-bit range


def parse_int(name: str, value: str) -> int:
	"""Parse a signed decimal integer; anything else is a MalformedParameter."""
	if not RE_INT.fullmatch(value):
		raise MalformedParameter(name, value, 'an integer')
	parsed = int(value)
	if not INT_MIN <= parsed <= INT_MAX:
		raise MalformedParameter(name, value, 'a 32-bit integer')
	return parsed


def parse_bool(name: str, value: str) -> bool:
	"""Parse the literals true/false (any case)."""
	lowered = value.lower()
	if lowered == 'true':
		return True
	if lowered == 'false':
		return False
	raise MalformedParameter(name, value, "'true' or 'false'")


def parse_text(name: str, value: str) -> str:
	return value


@dataclass(frozen=True)
class FilterParam:
	"""One row of the parameter table: how a name becomes a Predicate."""
	accessor: Callable[[FilmEntry], Any]
	parse: Callable[[str, str], Any]
	compare: Callable[[Any, Any], bool]


# Recognized filter parameters mapped to typed field accessors
FILTER_PARAMS: Dict[str, FilterParam] = {
	'title': FilterParam(lambda f: f.title, parse_text, operator.eq),
	'year': FilterParam(lambda f: f.year, parse_int, operator.eq),
	'minYear': FilterParam(lambda f: f.year, parse_int, operator.ge),
	'maxYear': FilterParam(lambda f: f.year, parse_int, operator.le),
	'minAwards': FilterParam(lambda f: f.awards, parse_int, operator.ge),
	'maxAwards': FilterParam(lambda f: f.awards, parse_int, operator.le),
	'nominations': FilterParam(lambda f: f.nominations, parse_int, operator.eq),
	'isBestPicture': FilterParam(lambda f: f.is_best_picture, parse_bool, operator.eq),
}


def first_values(params: RawParams) -> List[Tuple[str, str]]:
	"""
	Normalize raw parameters to ordered (name, value) pairs.
	When a name repeats, only its first value is kept.
	"""
	pairs = params.items() if isinstance(params, Mapping) else params
	seen = set()
	result: List[Tuple[str, str]] = []
	for name, value in pairs:
		if name in seen:
			continue
		seen.add(name)
		result.append((name, '' if value is None else str(value)))
	return result


def build_predicates(params: RawParams) -> Tuple[Predicate, ...]:
	"""Create one Predicate per recognized filter parameter, in order of appearance."""
	predicates: List[Predicate] = []
	for name, value in first_values(params):
		param = FILTER_PARAMS.get(name)
		if param is None:
			continue  # unrecognized names are a no-op
		expected = param.parse(name, value)
		predicates.append(Predicate(name=name, accessor=param.accessor, compare=param.compare, expected=expected))
		logger.debug(f"[Params] Predicate {name} -> {expected!r}")
	return tuple(predicates)


def parse_limit(value: Optional[str]) -> Optional[int]:
	"""Blank or missing means unbounded; otherwise a non-negative integer."""
	if value is None or not value.strip():
		return None
	limit = parse_int(LIMIT_PARAM, value)
	if limit < 0:
		raise MalformedParameter(LIMIT_PARAM, value, 'a non-negative integer')
	return limit


def build_query(params: RawParams) -> Query:
	"""
	Main entry: produce an immutable Query from raw request parameters.
	Raises MalformedParameter or UnsupportedSortKey.
	"""
	pairs = first_values(params)
	lookup = dict(pairs)

	predicates = build_predicates(pairs)
	sort_key = parse_sort_key(lookup.get(SORT_PARAM))
	limit = parse_limit(lookup.get(LIMIT_PARAM))

	logger.debug(
		f"[Params] Query built | predicates={[p.name for p in predicates]} sort={sort_key} limit={limit}"
	)
	return Query(predicates=predicates, sort_key=sort_key, limit=limit)
