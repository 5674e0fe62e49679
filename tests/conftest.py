"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from film_query.models import FilmEntry
from film_query.store import ContentStore

ROOT = Path(__file__).resolve().parents[1]
OSCARS_PATH = ROOT / 'data' / 'oscars.json'

# Small content tree: five films below content/films, in a deliberately unsorted order
SAMPLE_TREE = {
	"jcr:primaryType": "nt:unstructured",
	"content": {
		"jcr:primaryType": "nt:unstructured",
		"films": {
			"jcr:primaryType": "nt:unstructured",
			"sling:resourceType": "test/filmEntryContainer",
			"zeta": {
				"jcr:primaryType": "nt:unstructured",
				"sling:resourceType": "test/filmEntry",
				"title": "Zeta", "year": 2005, "awards": 2, "nominations": 4,
				"isBestPicture": False, "numberOfReferences": 10,
			},
			"alpha": {
				"jcr:primaryType": "nt:unstructured",
				"title": "Alpha", "year": 2001, "awards": 5, "nominations": 9,
				"isBestPicture": True, "numberOfReferences": 30,
			},
			"mid": {
				"title": "Mid", "year": "2003", "awards": 5, "nominations": 6,
				"isBestPicture": "false",
			},
			"beta": {
				"title": "Beta", "year": 2001, "awards": 1, "nominations": 2,
				"isBestPicture": False, "numberOfReferences": 5,
			},
			"gamma": {
				"title": "Gamma", "awards": "many", "nominations": 4,
			},
			"broken": {
				"jcr:primaryType": "nt:unstructured",
				"year": 1999,
			},
		},
	},
}


@pytest.fixture
def sample_path(tmp_path):
	"""Write the sample content tree to a temporary file and return its path."""
	path = tmp_path / 'films.json'
	path.write_text(json.dumps(SAMPLE_TREE), encoding='utf-8')
	return path


@pytest.fixture
def sample_store(sample_path):
	return ContentStore(str(sample_path))


@pytest.fixture
def oscars_store():
	"""Store over the shipped Oscar data set."""
	return ContentStore(str(OSCARS_PATH))


@pytest.fixture
def oscars(oscars_store):
	"""All shipped Oscar films in document order."""
	return list(oscars_store.candidates('content/oscars'))


@pytest.fixture
def films():
	"""Plain FilmEntry list for engine-level tests."""
	return [
		FilmEntry('Zeta', 2005, 2, 4, 10, False),
		FilmEntry('Alpha', 2001, 5, 9, 30, True),
		FilmEntry('Mid', 2003, 5, 6, None, False),
		FilmEntry('Beta', 2001, 1, 2, 5, False),
		FilmEntry('Gamma', None, None, 4, None, None),
	]
