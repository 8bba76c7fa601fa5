"""FastAPI application entrypoint."""
import logging
import os
from pathlib import Path
from urllib.parse import urlencode

from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from .logging_setup import configure_logging
from .reader import reader_mode_for
from .schemas import ReaderFailure
from .templating import Page, html_view

LOG_FILE_PATH = configure_logging(os.getenv("LOG_LEVEL"))
logger = logging.getLogger(__name__)
logger.info("Logging configured. File output: %s", LOG_FILE_PATH)

PUBLIC_DIR = Path(os.getenv("READER_PUBLIC_DIR") or Path(__file__).resolve().parent / "public")

HOME_TITLE = "Reader Mode: Static, Shareable Version of the Reader Mode for Any Webpage"
ERROR_MESSAGE = (
    "There was an error converting the page to reader mode. "
    "Please make sure it's a valid public URL."
)
# Tells htmx to swap the error fragment into the form instead of navigating.
ERROR_SWAP_HEADERS = {
    "HX-Retarget": "#error",
    "HX-Reselect": "#error",
    "HX-Reswap": "outerHTML",
    "HX-Push-Url": "false",
}

app = FastAPI(title="Reader Mode For", docs_url=None, redoc_url=None)


@app.get("/", response_class=HTMLResponse, response_model=None)
@html_view
def index():
    return Page("index.html", {"title": HOME_TITLE})


def permalink_for(url: str) -> str:
    return "/reader/?" + urlencode({"url": url})


@app.get("/reader", response_class=HTMLResponse, response_model=None, include_in_schema=False)
@app.get("/reader/", response_class=HTMLResponse, response_model=None)
@html_view
def reader(url: str = Query("")):
    logger.info("Reader mode requested for %s", url or "<missing url>")
    result = reader_mode_for(url)

    if isinstance(result, ReaderFailure):
        return Page("error.html", {"message": ERROR_MESSAGE}, headers=ERROR_SWAP_HEADERS)

    return Page(
        "reader.html",
        {
            "title": f'Reader Mode for "{result.title}"',
            "article": result,
            "permalink": permalink_for(result.url),
        },
    )


app.mount("/", StaticFiles(directory=PUBLIC_DIR), name="public")
