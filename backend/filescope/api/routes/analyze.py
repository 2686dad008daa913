"""
FileScope Analyze API

Upload a file, run static analysis and return the feature report along
with the ordered progress labels emitted while it was built.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from filescope.api.dependencies import get_analyzer
from filescope.config import Settings, get_settings
from filescope.models.static_analysis import SourceMetadata, StaticAnalysisReport
from filescope.services.classifier import SYSTEM_PROMPT, build_classifier_prompt
from filescope.services.static_analysis import StaticAnalyzer
from filescope.utils.exceptions import FileTooLargeError, UnreadableInputError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyze", tags=["analyze"])


async def _run_analysis(
    file: UploadFile,
    last_modified: Optional[datetime],
    settings: Settings,
    analyzer: StaticAnalyzer,
) -> Tuple[StaticAnalysisReport, List[str]]:
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")

    try:
        content = await file.read()
    except OSError as e:
        logger.error(f"Failed to read upload {file.filename}: {e}")
        raise UnreadableInputError(f"Failed to read file: {str(e)}") from e

    if len(content) > settings.max_file_size_bytes:
        raise FileTooLargeError(
            f"File too large ({len(content) / 1024 / 1024:.1f} MB). "
            f"Limit is {settings.max_file_size_mb} MB."
        )

    source = SourceMetadata(
        name=file.filename,
        size=len(content),
        mime_type=file.content_type or "",
        last_modified=last_modified,
    )

    progress: List[str] = []
    report = await run_in_threadpool(analyzer.analyze, content, source, progress.append)

    return report, progress


@router.post("")
async def analyze_file(
    file: UploadFile = File(..., description="File to analyze"),
    last_modified: Optional[datetime] = Form(None, description="Last-modified timestamp"),
    settings: Settings = Depends(get_settings),
    analyzer: StaticAnalyzer = Depends(get_analyzer),
) -> Dict[str, Any]:
    """
    Static analysis of an uploaded file.

    Returns the progress labels in stage order and the feature report.
    """
    report, progress = await _run_analysis(file, last_modified, settings, analyzer)
    return {
        "progress": progress,
        "report": report.to_document(),
    }


@router.post("/prompt")
async def analyze_file_prompt(
    file: UploadFile = File(..., description="File to analyze"),
    last_modified: Optional[datetime] = Form(None, description="Last-modified timestamp"),
    settings: Settings = Depends(get_settings),
    analyzer: StaticAnalyzer = Depends(get_analyzer),
) -> Dict[str, Any]:
    """
    Static analysis plus the classifier system and user prompts rendered
    from the report.
    """
    report, _ = await _run_analysis(file, last_modified, settings, analyzer)
    prompt = build_classifier_prompt(
        report,
        high_entropy_threshold=settings.high_entropy_threshold,
        text_preview_chars=settings.classifier_text_preview_chars,
    )
    return {
        "report": report.to_document(),
        "system": SYSTEM_PROMPT,
        "prompt": prompt,
    }
