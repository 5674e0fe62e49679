"""
Query engine module.
Runs one request end to end: parameter parsing, filtering, limiting, sorting and projection.
"""

from typing import Iterable, List

from loguru import logger  # simple structured logger

from .filters import filter_films, truncate  # AND filtering and limiting
from .models import FilmEntry, Query  # core data classes
from .params import RawParams, build_query  # request parameter parsing
from .serializer import FilmResult, to_result  # public projection
from .sorting import sort_films  # ordering strategies

# Limit modes
NATURAL = 'natural'  # limit applied while filtering, in store order
SORTED = 'sorted'  # limit applied after the full sort
LIMIT_MODES = (NATURAL, SORTED)


class FilmQueryEngine:
	"""
	High-level query API over a sequence of candidate films.

	In "natural" mode the limit caps the filter pass, so a non-title sortBy
	re-orders the first N matches in store order rather than picking the
	global top N. "sorted" mode filters and sorts everything before truncating.
	"""
	def __init__(self, limit_mode: str = NATURAL):
		if limit_mode not in LIMIT_MODES:
			raise ValueError(f"Unknown limit mode '{limit_mode}', expected one of {LIMIT_MODES}")
		self.limit_mode = limit_mode  # how limit and sort interact

	def run(self, query: Query, candidates: Iterable[FilmEntry]) -> List[FilmEntry]:
		"""Filter, limit and sort candidates according to an already-built Query."""
		if self.limit_mode == NATURAL:
			films = filter_films(candidates, query.predicates, limit=query.limit)  # stop early
			films = sort_films(films, query.sort_key)  # order what was kept
		else:
			films = filter_films(candidates, query.predicates)  # everything that matches
			films = sort_films(films, query.sort_key)  # global order
			films = truncate(films, query.limit)  # then cut
		return films

	def search(self, params: RawParams, candidates: Iterable[FilmEntry]) -> FilmResult:
		"""
		Build a Query from raw request parameters and return the projected result.
		Raises MalformedParameter or UnsupportedSortKey before any candidate is read.
		"""
		query = build_query(params)  # structured query
		films = self.run(query, candidates)  # filtered, sorted, limited
		logger.info(
			f"[Engine] Returning {len(films)} films | filters={len(query.predicates)} "
			f"sort={query.sort_key.value if query.sort_key else 'default'} limit={query.limit} mode={self.limit_mode}"
		)
		return to_result(films)
