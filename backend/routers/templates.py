from fastapi import APIRouter, Depends, File, UploadFile
import logging

from models.template import TemplateInfo
from services.documents import DocumentError, DocumentFile
from services.templates import TemplateError, placeholder_help
from services.templates.store import TemplateStore, get_template_store
from schemas.responses import (
    PlaceholderHelpResponse,
    TemplateDeleteResponse,
    TemplateListResponse,
)
from routers.errors import to_http_exception

router = APIRouter(prefix="/api/templates", tags=["Templates"])
logger = logging.getLogger(__name__)


@router.get("", response_model=TemplateListResponse)
async def list_templates(store: TemplateStore = Depends(get_template_store)):
    """List built-in and uploaded templates."""
    return TemplateListResponse(templates=store.list_templates())


@router.get("/placeholders", response_model=PlaceholderHelpResponse)
async def list_placeholders():
    """Placeholders a custom template may contain."""
    return PlaceholderHelpResponse(placeholders=placeholder_help())


@router.post("", response_model=TemplateInfo, status_code=201)
async def upload_template(
    file: UploadFile = File(...),
    store: TemplateStore = Depends(get_template_store),
):
    """Upload a custom template document (DOCX, DOC, TXT or PDF)."""
    document = DocumentFile(file.filename or "", await file.read())
    try:
        template = store.add_custom(document)
    except DocumentError as e:
        raise to_http_exception(e)
    return template.to_info()


@router.delete("/{template_id}", response_model=TemplateDeleteResponse)
async def delete_template(
    template_id: str,
    store: TemplateStore = Depends(get_template_store),
):
    """Remove an uploaded template. Built-in templates cannot be removed."""
    try:
        store.delete_custom(template_id)
    except TemplateError as e:
        raise to_http_exception(e)
    return TemplateDeleteResponse(template_id=template_id)
