"""
Run a single film query from the command line.

This script:
1) Loads the content tree configured by FILMS_DATA_PATH (data/oscars.json by default)
2) Parses the query string into filters, sort key and limit
3) Prints the JSON body the API would return

Usage:
    python -m scripts.query_films "minYear=2018&minAwards=3&sortBy=nominations&limit=4"
    python -m scripts.query_films "title=Parasite" content/oscars
"""

import argparse  # command line parsing
import sys  # exit status
from typing import List, Optional  # type hints
from urllib.parse import parse_qsl  # query string -> ordered pairs

from loguru import logger  # console logging

from film_query.config import Settings  # env-based settings
from film_query.engine import FilmQueryEngine  # query pipeline
from film_query.errors import FilmQueryError  # request failures
from film_query.serializer import render  # compact JSON body
from film_query.store import ContentStore  # content tree access


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
	"""Parse command line arguments."""
	parser = argparse.ArgumentParser(
		description="Query the Oscar film content tree and print the JSON result",
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Examples:
    python -m scripts.query_films "year=2019&minAwards=4"
    python -m scripts.query_films "sortBy=awards&limit=5" content/oscars
		"""
	)

	parser.add_argument(
		"query",
		type=str,
		help="Query string, e.g. 'minYear=2018&sortBy=nominations&limit=4'"
	)

	parser.add_argument(
		"container",
		type=str,
		nargs="?",
		default=None,
		help="Container path in the content tree (default: FILMS_CONTAINER or content/oscars)"
	)

	return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
	args = parse_args(argv)  # exits with status 2 on bad usage

	settings = Settings.from_env()  # FILMS_* variables
	container = args.container or settings.container  # default container

	# keep_blank_values so "limit=" behaves like the API (unset, not missing)
	params = parse_qsl(args.query, keep_blank_values=True)
	logger.info(f"[CLI] Querying '{container}' in {settings.data_path} with {params}")

	store = ContentStore(settings.data_path)  # reader
	engine = FilmQueryEngine(limit_mode=settings.limit_mode)  # pipeline
	try:
		result = engine.search(params, store.candidates(container))  # run
	except FilmQueryError as e:
		logger.error(f"[CLI] {type(e).__name__}: {e}")  # report and fail
		return 1

	print(render(result))  # JSON body on stdout
	return 0


if __name__ == '__main__':
	sys.exit(main())  # invoke runner
