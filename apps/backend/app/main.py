"""FastAPI application exposing the anypdf conversion pipeline."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse, Response

from anypdf import (
    FileInput,
    NoInputError,
    PlaywrightEngine,
    RenderEngine,
    Settings,
    convert,
    load_settings,
    supported_media_types,
)

DOCS_PREFIX = "/api"
NO_INPUT_MESSAGE = "No files or URL provided"
FAILURE_MESSAGE = "Failed to convert to PDF"
OUTPUT_FILENAME = "converted.pdf"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def get_engine(settings: Settings = Depends(get_settings)) -> RenderEngine:
    """Rendering engine used for Word documents and webpages."""

    return PlaywrightEngine(settings)


logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
LOGGER = logging.getLogger("anypdf.backend")

app = FastAPI(title="anypdf API", version="0.1.0")


@app.get("/health", response_class=JSONResponse)
async def health() -> dict[str, str]:
    """Lightweight health endpoint for uptime checks."""
    return {"status": "ok"}


@app.get(f"{DOCS_PREFIX}/formats", response_class=JSONResponse)
async def formats() -> dict[str, list[str]]:
    """List the media types accepted for uploaded files."""
    return {"formats": list(supported_media_types())}


@app.get(
    f"{DOCS_PREFIX}/openapi.json",
    include_in_schema=False,
    name="prefixed_openapi",
)
async def prefixed_openapi() -> JSONResponse:
    """Expose the OpenAPI schema under the gateway's ``/api`` prefix."""

    return JSONResponse(app.openapi())


@app.get(f"{DOCS_PREFIX}/docs", include_in_schema=False)
async def prefixed_swagger_ui(request: Request) -> HTMLResponse:
    """Serve Swagger UI from the same ``/api`` prefix used by the gateway."""

    return get_swagger_ui_html(
        openapi_url=str(request.url_for("prefixed_openapi")),
        title=f"{app.title} - Swagger UI",
    )


async def _read_uploads(uploads: List[UploadFile]) -> list[FileInput]:
    inputs: list[FileInput] = []
    for upload in uploads:
        contents = await upload.read()
        inputs.append(
            FileInput(
                media_type=upload.content_type or "application/octet-stream",
                data=contents,
                filename=upload.filename,
            )
        )
    return inputs


@app.post(
    f"{DOCS_PREFIX}/convert",
    response_class=Response,
    summary="Convert files and/or a webpage into a single PDF",
    response_description="The merged PDF document.",
)
async def convert_documents(
    file: List[UploadFile] | None = File(
        None,
        description="Files to convert; each part's content type selects the renderer.",
    ),
    url: str | None = Form(None, description="Optional webpage to print before the files."),
    engine: RenderEngine = Depends(get_engine),
) -> Response:
    """Convert every upload (and the URL, if any) to PDF and merge the results.

    The webpage always comes first, followed by the files in the order they
    were submitted. Any failure fails the whole request.
    """

    inputs = await _read_uploads(file or [])

    try:
        pdf_bytes = await convert(inputs, url, engine=engine)
    except NoInputError:
        LOGGER.info("Rejected conversion request without files or URL")
        return JSONResponse({"error": NO_INPUT_MESSAGE}, status_code=400)
    except Exception:
        LOGGER.exception(
            "Conversion error (%d file(s), url=%s)",
            len(inputs),
            "yes" if url else "no",
        )
        return JSONResponse({"error": FAILURE_MESSAGE}, status_code=500)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={OUTPUT_FILENAME}"},
    )


__all__ = ["app", "get_engine", "get_settings"]
