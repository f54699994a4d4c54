# backend/main.py
import logging
import os
import shutil
import anyio
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError as JinjaTemplateError
from .config import CONFIG
from .errors import FetchError, MissingParameterError, ParseError, TemplateError
from .fetcher import fetch_video_json, parse_metadata
from .formats import simplify

logging.basicConfig(level=getattr(logging, CONFIG["LOGGING_LEVEL"], logging.INFO))
logger = logging.getLogger(__name__)

MISSING_URL_MESSAGE = "URL parameter is required"
FETCH_ERROR_MESSAGE = "Failed to fetch video info. Make sure the URL is correct and public."
PARSE_ERROR_MESSAGE = "Error parsing video info"

app = FastAPI(title="Video Info Gateway")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

templates = Jinja2Templates(directory=CONFIG["TEMPLATE_DIR"])

@app.on_event("startup")
async def startup_event():
    logger.info(f"Video Info Gateway laeuft auf http://{CONFIG['HOST']}:{CONFIG['PORT']}")
    binary = CONFIG["YTDLP_BINARY"]
    if shutil.which(binary) is None:
        logger.warning(f"'{binary}' wurde nicht im PATH gefunden. Anfragen an /api/video werden fehlschlagen.")
    else:
        logger.info(f"Verwende Extraktor: {shutil.which(binary)}")

def render_index(request: Request):
    try:
        return templates.TemplateResponse(request, CONFIG["INDEX_TEMPLATE"])
    except JinjaTemplateError as e:
        raise TemplateError(f"Template error: {e}") from e

@app.get("/")
async def home(request: Request):
    try:
        return render_index(request)
    except TemplateError as e:
        logger.error(f"Fehler beim Laden des Templates: {e}", exc_info=True)
        return PlainTextResponse(str(e), status_code=500)

@app.get("/api/video")
async def get_video_info(url: str = Query(default="", description="URL der Videoseite")):
    if not url:
        return PlainTextResponse(MISSING_URL_MESSAGE, status_code=400)
    logger.info(f"Video-Info angefordert fuer: {url}")
    try:
        # Blockierender Prozessaufruf im Worker-Thread
        raw = await anyio.to_thread.run_sync(fetch_video_json, url)
    except MissingParameterError:
        return PlainTextResponse(MISSING_URL_MESSAGE, status_code=400)
    except FetchError as e:
        logger.error(f"yt-dlp Fehler fuer {url}: {e}, Ausgabe: {e.diagnostic}")
        return PlainTextResponse(FETCH_ERROR_MESSAGE, status_code=500)

    try:
        meta = parse_metadata(raw)
    except ParseError as e:
        logger.error(f"Fehler beim Parsen der yt-dlp-Ausgabe fuer {url}: {e}", exc_info=True)
        return PlainTextResponse(PARSE_ERROR_MESSAGE, status_code=500)

    info = simplify(meta)
    logger.debug(f"{len(meta.formats)} Formate -> {len(info.files)} Eintraege fuer '{info.title}'")
    return JSONResponse(info.model_dump(), headers={"Access-Control-Allow-Origin": "*"})

static_dir = CONFIG["STATIC_DIR"]
if os.path.isdir(static_dir):
    app.mount("/static", StaticFiles(directory=static_dir), name="static")
    logger.info(f"Statische Dateien bereitgestellt von: {static_dir}")
else:
    logger.warning(f"Static-Verzeichnis nicht gefunden unter {static_dir}. Statische Dateien werden nicht serviert.")

def run():
    import uvicorn

    uvicorn.run(app, host=CONFIG["HOST"], port=CONFIG["PORT"], log_level=CONFIG["LOGGING_LEVEL"].lower())

if __name__ == "__main__":
    run()
