import json
import logging
import re
import zipfile
from io import BytesIO

from pathfinder.config import REPORT_PREFIX
from pathfinder.schemas import AnalysisResult
from pathfinder.services.pdf import path_name, render_career_path_pdf

logger = logging.getLogger(__name__)

JSON_REPORT_NAME = f"{REPORT_PREFIX}_CareerAnalysisReport.json"
ZIP_REPORT_NAME = f"{REPORT_PREFIX}_CareerReports.zip"


def sanitize_file_name(name: str) -> str:
    return re.sub(r"[^a-z0-9\-]+", "_", name, flags=re.IGNORECASE)[:100]


def career_path_pdf_name(path: dict) -> str:
    return f"{REPORT_PREFIX}_{sanitize_file_name(path_name(path))}_Report.pdf"


def report_json(result: AnalysisResult) -> BytesIO:
    payload = result.model_dump(by_alias=True)
    buf = BytesIO(json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8"))
    buf.seek(0)
    return buf


def build_report_zip(result: AnalysisResult) -> BytesIO:
    """
    Every career path as its own PDF plus the full JSON report.
    A path that fails to render is listed in errors.txt instead.
    """
    zip_buf = BytesIO()
    errors = []

    with zipfile.ZipFile(zip_buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for idx, path in enumerate(result.suggested_career_paths, start=1):
            if not isinstance(path, dict):
                errors.append(f"{idx:02d} -> not a career path object")
                continue
            try:
                pdf = render_career_path_pdf(path).getvalue()
                zf.writestr(f"{idx:02d}_{sanitize_file_name(path_name(path))}.pdf", pdf)
            except Exception as e:
                logger.error("PDF render failed for path %02d: %s", idx, e)
                errors.append(f"{idx:02d} {path_name(path)} -> {str(e)}")

        zf.writestr(JSON_REPORT_NAME, report_json(result).getvalue())
        zf.writestr("errors.txt", "\n".join(errors) if errors else "OK")

    zip_buf.seek(0)
    return zip_buf
