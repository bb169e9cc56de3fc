import logging
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import StreamingResponse
from pydantic import ValidationError

from pathfinder.schemas import (
    AcademicDetails,
    AnalysisResult,
    CareerPathPdfRequest,
    InterestsResponse,
    ProfileInput,
)

from pathfinder.core.analysis import analyze_profile
from pathfinder.core.catalog import interest_labels
from pathfinder.services.export import (
    JSON_REPORT_NAME,
    ZIP_REPORT_NAME,
    build_report_zip,
    career_path_pdf_name,
    report_json,
)
from pathfinder.services.pdf import render_career_path_pdf
from pathfinder.services.resume import to_data_uri

logger = logging.getLogger(__name__)

router = APIRouter()


def attachment(filename: str) -> dict:
    filename = filename.replace("\n", "").replace("\r", "").replace('"', "")
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get("/health")
def health():
    return {"ok": True}


@router.get("/interests", response_model=InterestsResponse)
def interests():
    return InterestsResponse(interests=interest_labels())


@router.post("/analyze", response_model=AnalysisResult)
def analyze(req: ProfileInput):
    try:
        return analyze_profile(req)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Analysis failed: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/analyze_upload", response_model=AnalysisResult)
def analyze_upload(
    resume: UploadFile = File(...),
    tenth_percentage: float = Form(...),
    twelfth_percentage: Optional[float] = Form(None),
    diploma_ug_percentage: Optional[float] = Form(None),
    interests: str = Form(""),
):
    try:
        data = resume.file.read()
        profile = ProfileInput(
            resume_data_uri=to_data_uri(resume.content_type, data),
            academic_details=AcademicDetails(
                tenth_percentage=tenth_percentage,
                twelfth_percentage=twelfth_percentage,
                diploma_ug_percentage=diploma_ug_percentage,
            ),
            interests=interests.split(","),
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    try:
        return analyze_profile(profile)
    except Exception as e:
        logger.error("Analysis failed: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/report_json")
def download_report_json(req: AnalysisResult):
    try:
        buf = report_json(req)
        return StreamingResponse(buf, media_type="application/json", headers=attachment(JSON_REPORT_NAME))
    except Exception as e:
        logger.error("JSON export failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/career_path_pdf")
def career_path_pdf(req: CareerPathPdfRequest):
    try:
        pdf_buf = render_career_path_pdf(req.career_path)
        return StreamingResponse(pdf_buf, media_type="application/pdf", headers=attachment(career_path_pdf_name(req.career_path)))
    except Exception as e:
        logger.error("PDF export failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/report_zip")
def report_zip(req: AnalysisResult):
    try:
        zip_buf = build_report_zip(req)
        return StreamingResponse(zip_buf, media_type="application/zip", headers=attachment(ZIP_REPORT_NAME))
    except Exception as e:
        logger.error("ZIP export failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
