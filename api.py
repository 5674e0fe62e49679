"""
FastAPI server exposing the Oscar film query API.
Endpoints:
- GET /health: basic health check
- GET /films?year=2019&minAwards=4&sortBy=year&limit=10: queries the configured container
- GET /{container path}.json?...: queries any container in the content tree (e.g. /content/oscars.json)

Startup loads the content tree from FILMS_DATA_PATH (data/oscars.json by default).
"""

# Import standard libraries for timing
import time  # measure startup and request latencies
from typing import Optional  # precise typing for clarity

# Import FastAPI for building the web API
from fastapi import FastAPI, Request  # FastAPI primitives
from fastapi.responses import JSONResponse  # JSON bodies for results and errors

# Import our internal modules for settings, storage and querying
from film_query.config import Settings  # env-based settings
from film_query.engine import FilmQueryEngine  # core query engine
from film_query.errors import AdapterUnavailable, ContainerNotFound, FilmQueryError  # request failures
from film_query.serializer import FilmResult  # response schema
from film_query.store import ContentStore  # content tree access

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger


# JSON responses always announce their charset
class FilmJSONResponse(JSONResponse):
	media_type = "application/json; charset=utf-8"


# Instantiate the FastAPI application with metadata
app = FastAPI(title="Oscar Film Query API", version="1.0.0", default_response_class=FilmJSONResponse)  # web app

# Globals that hold the settings, store, engine and measured startup time
SETTINGS: Optional[Settings] = None  # populated at startup
STORE: Optional[ContentStore] = None  # content tree reader
ENGINE: Optional[FilmQueryEngine] = None  # query pipeline
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# FastAPI startup hook to load settings and the content tree once
@app.on_event("startup")
async def startup_event():
	"""Read settings, load the content tree and log how it went."""
	global SETTINGS, STORE, ENGINE, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	SETTINGS = Settings.from_env()  # FILMS_* environment variables
	logger.info(f"[API] Startup: data={SETTINGS.data_path} container={SETTINGS.container} limit_mode={SETTINGS.limit_mode}")

	ENGINE = FilmQueryEngine(limit_mode=SETTINGS.limit_mode)  # create engine
	STORE = ContentStore(SETTINGS.data_path)  # create store
	try:
		STORE.load()  # parse once, cached for all requests
	except AdapterUnavailable as e:
		# Keep serving; every query will report the store as unavailable
		logger.error(f"[API] Content tree could not be loaded: {e}")

	# Compute and log startup duration
	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s. store_ready={STORE.loaded}")  # summary log


# Map every request-aborting error to a status code and a small JSON body
@app.exception_handler(FilmQueryError)
async def film_query_error_handler(request: Request, exc: FilmQueryError):
	if isinstance(exc, ContainerNotFound):
		status = 404  # unknown container path
	elif isinstance(exc, AdapterUnavailable):
		status = 503  # store cannot supply candidates
	else:
		status = 400  # malformed parameter or unsupported sort key
	logger.warning(f"[API] {request.url.path} failed with {status}: {exc}")  # failure log
	return FilmJSONResponse(status_code=status, content={"error": type(exc).__name__, "detail": str(exc)})


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"store_ready": STORE is not None and STORE.loaded,  # True if content tree parsed
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


def run_query(request: Request, container: str) -> FilmResult:
	"""Execute a query against one container using the raw request parameters."""
	if ENGINE is None or STORE is None:  # startup must have run
		raise AdapterUnavailable("Service not initialized")

	# Time the query for latency insight
	start = time.time()  # start timer
	params = request.query_params.multi_items()  # ordered (name, value) pairs
	logger.debug(f"[API] {request.url.path} container='{container}' params={params}")  # debug log of input

	# Delegate to the engine
	candidates = STORE.candidates(container)  # raises if tree or container is missing
	result = ENGINE.search(params, candidates)  # filtered, sorted, limited
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] {request.url.path} served {len(result.result)} films in {elapsed_ms:.2f} ms")  # summary
	return result


# Query the configured default container
@app.get("/films", response_model=FilmResult)
def films(request: Request):
	"""Filter, sort and limit the films of the default container."""
	return run_query(request, SETTINGS.container if SETTINGS else '')


# Query any container addressed by its path plus the .json extension
@app.get("/{container_path:path}.json", response_model=FilmResult)
def container_films(container_path: str, request: Request):
	"""Filter, sort and limit the films below the requested container."""
	return run_query(request, container_path)
