"""
Sorting module.
Selects one of four ascending, stable orderings and applies it to filtered films.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from rapidfuzz import fuzz, process  # "did you mean" suggestions for bad sort keys

from loguru import logger

from .errors import UnsupportedSortKey
from .models import FilmEntry, SortKey


def _numeric(value: Optional[int]) -> Tuple[bool, int]:
	# Missing values sort after present ones
	return (value is None, value if value is not None else 0)


# Key function per ordering; Python's sort is stable so ties keep input order
SORT_KEYS: Dict[SortKey, Callable[[FilmEntry], Any]] = {
	SortKey.TITLE: lambda f: f.title,
	SortKey.YEAR: lambda f: _numeric(f.year),
	SortKey.AWARDS: lambda f: _numeric(f.awards),
	SortKey.NOMINATIONS: lambda f: _numeric(f.nominations),
}

_SORT_NAMES = [k.value for k in SortKey]


def parse_sort_key(value: Optional[str]) -> Optional[SortKey]:
	"""
	Map a raw sortBy value to a SortKey (case-insensitive).
	Returns None when no sort key was supplied; raises UnsupportedSortKey otherwise.
	"""
	if value is None or not value.strip():
		return None
	try:
		return SortKey(value.lower())
	except ValueError:
		pass

	suggestion = None
	match = process.extractOne(value.lower(), _SORT_NAMES, scorer=fuzz.ratio)
	if match and match[1] >= 70:
		suggestion = match[0]
	logger.debug(f"[Sort] Rejected sortBy='{value}' suggestion={suggestion}")
	raise UnsupportedSortKey(value, suggestion)


def sort_films(films: List[FilmEntry], sort_key: Optional[SortKey]) -> List[FilmEntry]:
	"""
	Return the films in the requested order.
	Without an explicit key the title ordering is used, and 0 or 1 films are returned as-is.
	"""
	if sort_key is None:
		if len(films) <= 1:
			return list(films)
		sort_key = SortKey.TITLE
	logger.debug(f"[Sort] Sorting {len(films)} films by {sort_key.value}")
	return sorted(films, key=SORT_KEYS[sort_key])
