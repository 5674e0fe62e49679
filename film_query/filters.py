"""
Filtering module.
Applies the AND of all predicates to candidate films in store order,
optionally stopping once enough matches have been collected.
"""

from typing import Iterable, List, Optional, Sequence

from loguru import logger

from .models import FilmEntry, Predicate


def matches(film: FilmEntry, predicates: Sequence[Predicate]) -> bool:
	"""True if every predicate holds; stops at the first failing one."""
	for predicate in predicates:
		if not predicate.test(film):
			logger.debug(f"[Filter] Filtered out by {predicate.name} | film={film.title}")
			return False
	return True


def filter_films(
	candidates: Iterable[FilmEntry],
	predicates: Sequence[Predicate],
	limit: Optional[int] = None,
) -> List[FilmEntry]:
	"""
	Collect matching films in candidate order.
	With a limit, collection stops as soon as `limit` matches are found.
	"""
	results: List[FilmEntry] = []
	if limit is not None and limit <= 0:
		return results
	for film in candidates:
		if matches(film, predicates):
			results.append(film)
			if limit is not None and len(results) >= limit:
				break  # leave the rest of the candidates unread
	return results


def truncate(films: List[FilmEntry], limit: Optional[int]) -> List[FilmEntry]:
	"""First `limit` films in current order; None keeps everything."""
	if limit is None:
		return films
	return films[:limit]
