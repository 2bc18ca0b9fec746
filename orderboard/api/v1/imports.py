"""导入API路由

两步流程：先预览（生成候选变更集），人工确认后再提交。
"""

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from typing import Optional
import logging

from ... import crud, schemas
from ...config.settings import settings
from ...core.commit import CommitResult, commit_import
from ...core.errors import CommitFailed, CommitPartialFailure, EmptyImportResult, UnknownOrderType
from ...core.order_types import OrderType
from ...core.reconciler import analyze_import
from ...database.connection import get_db
from .orders import load_orders

router = APIRouter(prefix="/imports", tags=["imports"])

logger = logging.getLogger(__name__)


def _preview(db: Session, text: str, order_type, source_file: Optional[str] = None):
    existing = load_orders(db)
    report = analyze_import(text, order_type, existing, source_file=source_file)

    warning = None
    try:
        report.ensure_not_empty()
    except EmptyImportResult as exc:
        logger.warning("Empty import preview (%d lines skipped)", exc.skipped_count)
        warning = str(exc)

    return schemas.ImportPreviewResponse(
        candidates=[schemas.ImportCandidateSchema.from_candidate(c) for c in report.candidates],
        skipped=[schemas.SkippedLineSchema.model_validate(s) for s in report.skipped],
        new_count=report.new_count,
        update_count=report.update_count,
        warning=warning,
    )


@router.post("/preview", response_model=schemas.ImportPreviewResponse)
def preview_text_import(payload: schemas.ImportTextRequest, db: Session = Depends(get_db)):
    """解析粘贴的文本并返回候选变更集"""
    return _preview(db, payload.text, payload.order_type, payload.source_file)


@router.post("/preview-file", response_model=schemas.ImportPreviewResponse)
async def preview_file_import(
    file: UploadFile = File(...),
    order_type: str = Form(...),
    db: Session = Depends(get_db),
):
    """解析上传的文本文件，文件名记录为 source_file"""
    try:
        batch_type = OrderType.parse(order_type)
    except UnknownOrderType as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    content = await file.read()
    if len(content) > settings.IMPORT_MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Uploaded file is too large")
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Uploaded file must be UTF-8 text")

    return _preview(db, text, batch_type, file.filename)


def _commit_response(result: CommitResult, message: str) -> schemas.ImportCommitResponse:
    return schemas.ImportCommitResponse(
        status=result.status,
        created=result.created,
        updated=result.updated,
        failures=[schemas.CommitFailureSchema.model_validate(f) for f in result.failures],
        message=message,
    )


@router.post("/commit", response_model=schemas.ImportCommitResponse)
def commit_import_endpoint(payload: schemas.ImportCommitRequest, db: Session = Depends(get_db)):
    """提交已确认的候选记录"""
    candidates = [c.to_candidate() for c in payload.candidates]
    result = commit_import(crud.SqlAlchemyOrderStore(db), candidates)

    try:
        result.raise_for_status()
    except CommitPartialFailure as exc:
        body = _commit_response(result, str(exc))
        return JSONResponse(status_code=207, content=body.model_dump(mode="json"))
    except CommitFailed as exc:
        body = _commit_response(result, str(exc))
        status_code = 503 if exc.__cause__ is not None else 500
        return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

    message = f"{len(result.created)} new orders imported, {len(result.updated)} updated"
    return _commit_response(result, message)
