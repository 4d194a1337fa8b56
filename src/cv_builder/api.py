# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
REST surface for CV preview and export.

Authentication happens upstream: the gateway that validates the session token
forwards the caller's user id in the X-User-Id header.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from cv_builder.errors import CVNotFoundError, ExportFailedError, NotPermittedError, TemplateNotFoundError
from cv_builder.exporter import ExportFormat, ExportService

logger = logging.getLogger(__name__)


def get_requester(x_user_id: Optional[str] = Header(default=None)) -> int:
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Access token required")
    try:
        return int(x_user_id)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid token")


def _parse_cv_id(cv_id: str) -> int:
    try:
        return int(cv_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid CV ID")


def _attachment(result) -> Response:
    return Response(
        content=result.content,
        media_type=result.content_type,
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )


def create_app(service: ExportService) -> FastAPI:
    """Builds the API around an ExportService."""
    app = FastAPI(title="CV Builder", version="1.0.0")
    app.state.service = service

    @app.exception_handler(HTTPException)
    async def http_error(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.exception_handler(CVNotFoundError)
    @app.exception_handler(TemplateNotFoundError)
    async def not_found(request: Request, exc):
        return JSONResponse(status_code=404, content={"message": exc.public_message})

    @app.exception_handler(NotPermittedError)
    async def not_permitted(request: Request, exc: NotPermittedError):
        return JSONResponse(status_code=403, content={"message": exc.public_message})

    @app.exception_handler(ExportFailedError)
    async def export_failed(request: Request, exc: ExportFailedError):
        # Cause is already in the operator log
        return JSONResponse(status_code=500, content={"message": exc.public_message})

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    @app.get("/api/templates")
    def list_templates():
        return [
            {
                "id": t.id,
                "name": t.name,
                "category": t.category,
                "description": t.description,
                "version": t.version,
            }
            for t in service.registry.list()
        ]

    @app.get("/api/cv/{cv_id}/preview", response_class=HTMLResponse)
    def preview(cv_id: str, template_id: Optional[str] = None, requester: int = Depends(get_requester)):
        html = service.preview(_parse_cv_id(cv_id), requester, template_id)
        return HTMLResponse(content=html)

    @app.post("/api/cv/{cv_id}/export/pdf")
    def export_pdf(cv_id: str, requester: int = Depends(get_requester)):
        return _attachment(service.export(_parse_cv_id(cv_id), ExportFormat.PDF, requester))

    @app.post("/api/cv/{cv_id}/export/docx")
    def export_docx(cv_id: str, requester: int = Depends(get_requester)):
        return _attachment(service.export(_parse_cv_id(cv_id), ExportFormat.DOCX, requester))

    return app
