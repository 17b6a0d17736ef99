"""FastAPI application exposing the helper commands."""
import logging
from dataclasses import asdict

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config import Config, load_settings, save_settings, setup_logging
from errors import ConfigError, InvalidResult, LookupServiceError, TranslationError
from models import PluginSettings
from pipeline import DIRECTIONS, HelperPipeline
from plugins import get_plugin_class


logger = logging.getLogger(__name__)

app = FastAPI(title="Japanese Helper API", version="1.0.0")

# CORS middleware for Streamlit UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict to specific origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configuration
config = Config.from_env()
setup_logging(config.log_level)


class TranslateRequest(BaseModel):
    text: str
    direction: str = "ja-en"


class LookupRequest(BaseModel):
    term: str


class SettingsBody(BaseModel):
    enabled: bool = True
    model: str = ""
    api_key: str = ""
    insert_mode: str = "below"


def get_config() -> Config:
    return config


async def get_pipeline(cfg: Config = Depends(get_config)):
    pipeline = HelperPipeline(cfg)
    try:
        yield pipeline
    finally:
        await pipeline.close()


def _check_plugin(plugin_id: str) -> None:
    try:
        get_plugin_class(plugin_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown plugin: {plugin_id}")


@app.post("/translate")
async def translate_text(body: TranslateRequest, pipeline: HelperPipeline = Depends(get_pipeline)):
    """Translate text between Japanese and English."""
    if body.direction not in DIRECTIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported direction. Allowed: {', '.join(DIRECTIONS)}"
        )
    if not body.text.strip():
        raise HTTPException(status_code=400, detail="Text is empty")

    try:
        translation = await pipeline.translate(body.text, body.direction)
    except ConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TranslationError as e:
        logger.error(f"Translation failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return {"translation": translation}


@app.post("/lookup")
async def lookup_term(body: LookupRequest, pipeline: HelperPipeline = Depends(get_pipeline)):
    """Look up a word and return its entry as Markdown."""
    term = body.term.strip()
    if not term:
        raise HTTPException(status_code=400, detail="Term is empty")

    try:
        markdown = await pipeline.lookup(term)
    except InvalidResult:
        raise HTTPException(status_code=404, detail=f'No information found for "{term}".')
    except ConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LookupServiceError as e:
        logger.error(f"Lookup failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return {"term": term, "markdown": markdown}


@app.get("/settings/{plugin_id}")
async def get_settings(plugin_id: str, cfg: Config = Depends(get_config)):
    """Get a plugin's persisted settings."""
    _check_plugin(plugin_id)
    try:
        settings = load_settings(cfg, plugin_id)
    except ConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return asdict(settings)


@app.put("/settings/{plugin_id}")
async def put_settings(plugin_id: str, body: SettingsBody, cfg: Config = Depends(get_config)):
    """Replace a plugin's persisted settings."""
    _check_plugin(plugin_id)
    settings = PluginSettings(**body.model_dump())
    try:
        save_settings(cfg, plugin_id, settings)
    except ConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return asdict(settings)


@app.get("/health")
async def health_check(cfg: Config = Depends(get_config)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "backend": cfg.translator_backend,
        "model": cfg.default_model,
        "jisho_url": cfg.jisho_url,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
