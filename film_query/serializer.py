"""
Projection and serialization of query results.
Only the six public film fields are ever emitted, wrapped under "result".
"""

from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field  # response schema definitions

from .models import FilmEntry


# Pydantic model that describes the shape of a single film in responses
class FilmOut(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	title: str  # exact film title
	year: Optional[int] = None  # year of the nomination
	awards: Optional[int] = None  # awards won
	nominations: Optional[int] = None  # nominations received
	number_of_references: Optional[int] = Field(default=None, alias='numberOfReferences')
	is_best_picture: Optional[bool] = Field(default=None, alias='isBestPicture')


# Pydantic model for the complete response payload
class FilmResult(BaseModel):
	result: List[FilmOut] = Field(default_factory=list)  # never null, possibly empty


def project(film: FilmEntry) -> FilmOut:
	"""Map a stored film to its public representation."""
	return FilmOut(
		title=film.title,
		year=film.year,
		awards=film.awards,
		nominations=film.nominations,
		number_of_references=film.number_of_references,
		is_best_picture=film.is_best_picture,
	)


def to_result(films: Iterable[FilmEntry]) -> FilmResult:
	"""Wrap the ordered films under the single "result" key."""
	return FilmResult(result=[project(f) for f in films])


def to_dict(result: FilmResult) -> dict:
	"""Plain-dict body with the public (camelCase) field names."""
	return result.model_dump(by_alias=True)


def render(result: FilmResult) -> str:
	"""Compact JSON body, e.g. '{"result":[]}'."""
	return result.model_dump_json(by_alias=True)
