"""
Word Bank API Server.
"""

import logging
from contextlib import asynccontextmanager

import redis
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from wordbank.core.apis.datamuse import DatamuseClient
from wordbank.core.apis.dictionary_api import DictionaryApiClient
from wordbank.core.apis.wikipedia import WikipediaClient
from wordbank.core.config import Settings
from wordbank.core.errors import FetchFailure, IndexUnavailable, NotFound
from wordbank.core.loader import DictionaryLoader
from wordbank.core.sources import source_from_location
from wordbank.core.word_bank import WordBankStore
from wordbank.server.routes import concepts, dictionary, lookup, words


logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def print_routes(app: FastAPI):
    print("\n" + "=" * 60)
    print("Word Bank API Routes")
    print("=" * 60)

    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        print(f"  {methods:8} {path:40} → {name}")

    print("=" * 60 + "\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    client = redis.Redis.from_url(settings.redis_url)
    source = source_from_location(settings.data_source)

    app.state.settings = settings
    app.state.loader = DictionaryLoader(source, cache_size=settings.cache_size)
    app.state.word_bank = WordBankStore(client, key=settings.storage_key)
    app.state.dictionary_api = DictionaryApiClient()
    app.state.datamuse = DatamuseClient()
    app.state.wikipedia = WikipediaClient()
    logger.info("Serving dictionary from %r", source)

    print_routes(app)
    yield

    for api in (app.state.dictionary_api, app.state.datamuse, app.state.wikipedia):
        await api.aclose()
    if hasattr(source, "aclose"):
        await source.aclose()
    client.close()


app = FastAPI(title="Word Bank API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dictionary.router)
app.include_router(lookup.router)
app.include_router(concepts.router)
app.include_router(words.router)


@app.exception_handler(IndexUnavailable)
async def index_unavailable_handler(request: Request, exc: IndexUnavailable):
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(FetchFailure)
async def fetch_failure_handler(request: Request, exc: FetchFailure):
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(redis.RedisError)
async def storage_error_handler(request: Request, exc: redis.RedisError):
    logger.error("Word bank storage failed: %s", exc)
    return JSONResponse(status_code=503, content={"detail": "Word bank storage unavailable"})


@app.get("/")
async def root():
    return {"name": "Word Bank API", "version": VERSION}
