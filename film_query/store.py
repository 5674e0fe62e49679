"""
Content store module.
Loads a JSON content tree (JCR/Sling-style export) and exposes the film entries
below a container node as an ordered sequence of FilmEntry records.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read the content tree
from typing import Any, Dict, Iterator, List, Optional  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our data class and error types
from .models import FilmEntry  # structured film record
from .errors import AdapterUnavailable, ContainerNotFound  # store failures

# Console logging
from loguru import logger  # console logger


class ContentStore:
	"""
	Read-only access to a content tree stored as one JSON document.
	Keys containing ':' (jcr:primaryType, sling:resourceType, ...) are node metadata;
	object-valued keys without ':' are child nodes, kept in document order.
	"""

	# Stored property names -> FilmEntry field names
	INT_PROPERTIES = {
		'year': 'year',
		'awards': 'awards',
		'nominations': 'nominations',
		'numberOfReferences': 'number_of_references',
	}
	BOOL_PROPERTIES = {
		'isBestPicture': 'is_best_picture',
	}

	# Only nodes of this resource type answer film queries
	RESOURCE_TYPE_PROPERTY = 'sling:resourceType'
	CONTAINER_TYPE = 'test/filmEntryContainer'

	def __init__(self, filepath: str):
		"""Remember where the tree lives; nothing is read until load()."""
		self.filepath = Path(filepath)  # normalize path
		self._tree: Optional[Dict[str, Any]] = None  # parsed document, cached after load
		self._films: Dict[str, List[FilmEntry]] = {}  # container path -> adapted entries

	@property
	def loaded(self) -> bool:
		return self._tree is not None

	def load(self) -> Dict[str, Any]:
		"""
		Parse the content tree once and cache it.
		Raises AdapterUnavailable when the file is missing, unreadable, or not a JSON object.
		"""
		if self._tree is not None:  # already parsed
			return self._tree

		# Validate the file presence early to give clear error messages
		if not self.filepath.exists():
			raise AdapterUnavailable(f"Content file not found: {self.filepath}")

		logger.info(f"[Store] Loading content tree from {self.filepath}...")  # log action
		try:
			with open(self.filepath, 'r', encoding='utf-8') as f:
				tree = json.load(f)  # dicts keep document order
		except json.JSONDecodeError as e:
			raise AdapterUnavailable(f"Invalid JSON in {self.filepath}: {e}") from e
		except OSError as e:
			raise AdapterUnavailable(f"Cannot read {self.filepath}: {e}") from e

		if not isinstance(tree, dict):  # the root must be a node
			raise AdapterUnavailable(f"Content root in {self.filepath} is not an object")

		self._tree = tree  # cache for later requests
		logger.info(f"[Store] Content tree loaded from {self.filepath}")  # summary
		return tree

	def resolve(self, path: str) -> Dict[str, Any]:
		"""Walk a slash-separated path (e.g. 'content/oscars') down to a node."""
		node = self.load()  # make sure the tree is there
		for name in [p for p in path.strip('/').split('/') if p]:  # skip empty segments
			child = node.get(name) if ':' not in name else None  # metadata is never a container
			if not isinstance(child, dict):
				raise ContainerNotFound(path)
			node = child  # descend
		return node

	def container(self, path: str) -> Dict[str, Any]:
		"""Resolve `path` and require it to be a film container node."""
		node = self.resolve(path)  # raises on unknown paths
		if node.get(self.RESOURCE_TYPE_PROPERTY) != self.CONTAINER_TYPE:  # root, folders, film leaves
			raise ContainerNotFound(path)
		return node

	def candidates(self, path: str) -> Iterator[FilmEntry]:
		"""
		Return the films below the container at `path`, in document order.
		Each container is adapted once; later requests reuse the same entries.
		"""
		key = path.strip('/')  # '/content/oscars/' and 'content/oscars' share an entry
		films = self._films.get(key)
		if films is None:
			films = self._adapt_films(self.container(path), key)  # dict children -> FilmEntry
			self._films[key] = films  # cache for later requests
			logger.info(f"[Store] Adapted {len(films)} films below '{key}'")  # summary
		logger.debug(f"[Store] Serving candidates from '{key}'")  # trace
		return iter(films)

	def _adapt_films(self, container: Dict[str, Any], path: str) -> List[FilmEntry]:
		films: List[FilmEntry] = []  # accumulator
		for name, child in container.items():  # document order
			if ':' in name or not isinstance(child, dict):  # metadata or plain property
				continue
			film = self._parse_film(child, f"{path}/{name}")  # dict -> FilmEntry
			if film is not None:
				films.append(film)
		return films

	def _parse_film(self, data: Dict[str, Any], node_path: str) -> Optional[FilmEntry]:
		"""
		Convert a raw node into a FilmEntry, dropping metadata.
		Returns None (with a warning) when the node has no usable title.
		"""
		title = data.get('title')
		if isinstance(title, (int, float)) and not isinstance(title, bool):
			title = str(title)  # stored as a number, read as text
		if not isinstance(title, str):
			logger.warning(f"[Store] Skipping node without title at {node_path}")  # unusable entry
			return None

		fields: Dict[str, Any] = {'title': title}
		for prop, field in self.INT_PROPERTIES.items():
			fields[field] = self._coerce_int(data.get(prop), prop, node_path)
		for prop, field in self.BOOL_PROPERTIES.items():
			fields[field] = self._coerce_bool(data.get(prop), prop, node_path)
		return FilmEntry(**fields)

	def _coerce_int(self, value: Any, prop: str, node_path: str) -> Optional[int]:
		"""Accept ints, integral floats and digit strings; anything else becomes absent."""
		if value is None:  # missing property
			return None
		if isinstance(value, bool):  # bool is an int subclass, but not a count
			pass
		elif isinstance(value, int):
			return value
		elif isinstance(value, float) and value.is_integer():
			return int(value)
		elif isinstance(value, str):
			try:
				return int(value.strip())
			except ValueError:
				pass
		logger.warning(f"[Store] Ignoring non-integer {prop}={value!r} at {node_path}")
		return None

	def _coerce_bool(self, value: Any, prop: str, node_path: str) -> Optional[bool]:
		"""Accept JSON booleans and the strings 'true'/'false'."""
		if value is None:
			return None
		if isinstance(value, bool):
			return value
		if isinstance(value, str) and value.strip().lower() in ('true', 'false'):
			return value.strip().lower() == 'true'
		logger.warning(f"[Store] Ignoring non-boolean {prop}={value!r} at {node_path}")
		return None
