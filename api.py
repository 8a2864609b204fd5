"""FastAPI layer over the file parser."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, field_validator

from config import (
    CORS_ORIGINS,
    get_tunable_config, apply_config, save_config, load_config,
)
from handler import (
    EmptyOrUnreadableError,
    InspectionError,
    MissingFileError,
    UnknownFormatError,
    UnsupportedFormatError,
    inspect_file,
)
from logging_config import setup_logging
from parsers import get_parser, supported_extensions

setup_logging()
logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    MissingFileError: 404,
    UnknownFormatError: 400,
    UnsupportedFormatError: 415,
    EmptyOrUnreadableError: 422,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Serving formats: %s", ", ".join(supported_extensions()))
    yield


app = FastAPI(title="Multi-Format File Parser API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["Content-Type", "Authorization"],
)


# --- Request / response models ---
class InspectRequest(BaseModel):
    path: str

    @field_validator("path")
    @classmethod
    def path_must_be_nonempty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Path must not be empty")
        return v


class RenderRequest(BaseModel):
    format: str
    content: str

    @field_validator("format")
    @classmethod
    def format_normalized(cls, v: str) -> str:
        return v.strip().lstrip(".").lower()


class InspectResponse(BaseModel):
    path: str
    file_type: str
    size: int
    output: str
    ok: bool


class RenderResponse(BaseModel):
    file_type: str
    output: str
    ok: bool


class FormatInfo(BaseModel):
    extension: str
    file_type: str


class ConfigResponse(BaseModel):
    config: dict


# --- Endpoints ---
@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/formats", response_model=list[FormatInfo])
def formats() -> list[FormatInfo]:
    return [
        FormatInfo(extension=ext, file_type=get_parser(ext).file_type)
        for ext in supported_extensions()
    ]


@app.post("/inspect", response_model=InspectResponse)
def inspect(req: InspectRequest) -> InspectResponse:
    try:
        result = inspect_file(req.path)
    except InspectionError as e:
        raise HTTPException(status_code=_STATUS_BY_ERROR[type(e)], detail=str(e))
    except Exception:
        logger.exception("Inspection failed for %s", req.path)
        raise HTTPException(status_code=500, detail="Inspection failed. Check server logs.")
    return InspectResponse(
        path=result.path,
        file_type=result.file_type,
        size=result.size,
        output=result.output,
        ok=result.ok,
    )


@app.post("/render", response_model=RenderResponse)
def render(req: RenderRequest) -> RenderResponse:
    try:
        parser = get_parser(req.format)
    except ValueError as e:
        raise HTTPException(status_code=415, detail=str(e))
    if not req.content:
        raise HTTPException(status_code=422, detail="Content must not be empty")
    result = parser.parse(req.content)
    return RenderResponse(file_type=parser.file_type, output=result.text, ok=result.ok)


@app.get("/config", response_model=ConfigResponse)
def get_config() -> ConfigResponse:
    return ConfigResponse(config=get_tunable_config())


@app.put("/config", response_model=ConfigResponse)
def update_config(updates: dict) -> ConfigResponse:
    try:
        apply_config(updates)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ConfigResponse(config=get_tunable_config())


@app.post("/config/save")
def save_config_endpoint() -> dict:
    try:
        save_config()
    except OSError:
        logger.exception("Failed to save config")
        raise HTTPException(status_code=500, detail="Failed to save config. Check server logs.")
    return {"status": "ok"}


@app.post("/config/load", response_model=ConfigResponse)
def load_config_endpoint() -> ConfigResponse:
    try:
        load_config()
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="No saved config file found")
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OSError:
        logger.exception("Failed to load config")
        raise HTTPException(status_code=500, detail="Failed to load config. Check server logs.")
    return ConfigResponse(config=get_tunable_config())
