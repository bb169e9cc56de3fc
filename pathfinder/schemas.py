import re
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer
from pydantic.alias_generators import to_camel

DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?:;[\w.+-]+=[\w.+-]+)*;base64,(?P<data>.*)$", re.DOTALL)


class CamelModel(BaseModel):
    # wire format is camelCase, attributes stay snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =========================
# Schemas
# =========================
class AcademicDetails(CamelModel):
    tenth_percentage: float = Field(ge=0, le=100)
    twelfth_percentage: Optional[float] = Field(default=None, ge=0, le=100)
    diploma_ug_percentage: Optional[float] = Field(default=None, ge=0, le=100)


class ProfileInput(CamelModel):
    resume_data_uri: str = Field(min_length=10)
    academic_details: AcademicDetails
    interests: List[str] = Field(default_factory=list)

    @field_validator("resume_data_uri")
    @classmethod
    def check_data_uri(cls, v: str) -> str:
        if not DATA_URI_RE.match(v.strip()):
            raise ValueError("resumeDataUri must look like 'data:<mimetype>;base64,<encoded_data>'")
        return v.strip()

    @field_validator("interests")
    @classmethod
    def strip_interests(cls, v: List[str]) -> List[str]:
        return [i.strip() for i in v if i and i.strip()]


class Course(CamelModel):
    title: str
    link: str


class SkillGap(CamelModel):
    skill: str
    your_level: Literal["Beginner", "Intermediate", "Advanced"] = "Beginner"
    recommended_courses: List[Course] = Field(default_factory=list)


class ProjectSuggestion(CamelModel):
    title: str
    description: str = ""
    link: str = ""


class RoadmapStage(CamelModel):
    title: str
    steps: List[str] = Field(default_factory=list)


class CareerPath(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    career_path: str
    required_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    weak_skills: List[str] = Field(default_factory=list)
    project_suggestions: List[ProjectSuggestion] = Field(default_factory=list)
    roadmap: List[RoadmapStage] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    skill_gap_report: List[SkillGap] = Field(default_factory=list)


class ResumeInsights(CamelModel):
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)


class AnalysisResult(CamelModel):
    # model output is passed through untyped
    suggested_career_paths: List[Any] = Field(default_factory=list)
    resume_insights: Optional[ResumeInsights] = None

    @model_serializer(mode="wrap")
    def drop_missing_insights(self, handler) -> Dict[str, Any]:
        # absent insights are left out of the report, not sent as null
        data = handler(self)
        if self.resume_insights is None:
            data.pop("resumeInsights", None)
            data.pop("resume_insights", None)
        return data


class CareerPathPdfRequest(CamelModel):
    career_path: Dict[str, Any]


class InterestsResponse(BaseModel):
    interests: List[str]
