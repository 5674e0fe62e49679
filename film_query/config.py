"""
Runtime settings read from environment variables.
"""

import os  # env-based settings
from typing import Literal

from pydantic import BaseModel


class Settings(BaseModel):
	data_path: str = 'data/oscars.json'  # content-tree JSON file
	container: str = 'content/oscars'  # container served by GET /films
	limit_mode: Literal['natural', 'sorted'] = 'natural'  # see FilmQueryEngine

	@classmethod
	def from_env(cls) -> 'Settings':
		"""Build settings from FILMS_* variables, falling back to the defaults."""
		values = {}
		for field, env_name in (
			('data_path', 'FILMS_DATA_PATH'),
			('container', 'FILMS_CONTAINER'),
			('limit_mode', 'FILMS_LIMIT_MODE'),
		):
			raw = os.environ.get(env_name)
			if raw:
				values[field] = raw.strip()
		return cls(**values)
