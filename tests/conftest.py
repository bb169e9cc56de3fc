import base64
from io import BytesIO

import pytest
from reportlab.pdfgen import canvas

from pathfinder.schemas import ProfileInput


def make_pdf(text: str) -> bytes:
    buf = BytesIO()
    c = canvas.Canvas(buf)
    c.drawString(72, 720, text)
    c.save()
    return buf.getvalue()


def data_uri(mime: str, data: bytes) -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def resume_pdf() -> bytes:
    return make_pdf("Jane Doe - Python developer, built Flask APIs")


@pytest.fixture
def profile(resume_pdf) -> ProfileInput:
    return ProfileInput(
        resume_data_uri=data_uri("application/pdf", resume_pdf),
        academic_details={"tenth_percentage": 91.5, "twelfth_percentage": 88},
        interests=["Artificial Intelligence", "Web Development"],
    )


@pytest.fixture
def five_paths():
    return [
        {
            "careerPath": f"Path {i}",
            "requiredSkills": ["Python", "SQL"],
            "missingSkills": ["SQL"],
            "weakSkills": [],
            "projectSuggestions": [],
            "roadmap": [],
            "tags": ["Data Science"],
            "skillGapReport": [
                {
                    "skill": "SQL",
                    "yourLevel": "Intermediate",
                    "recommendedCourses": [{"title": "SQL Basics", "link": "https://example.com/sql"}],
                }
            ],
        }
        for i in range(1, 6)
    ]
