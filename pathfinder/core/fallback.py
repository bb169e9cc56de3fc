from typing import List, Sequence
from urllib.parse import quote

from pathfinder.core.catalog import lookup
from pathfinder.schemas import CareerPath, Course, ProjectSuggestion, RoadmapStage, SkillGap

YOUTUBE_SEARCH = "https://www.youtube.com/results?search_query="
COURSERA_SEARCH = "https://www.coursera.org/search?query="

MAX_GAP_SKILLS = 3

ROADMAP = [
    ("Foundations", ["Learn fundamentals", "Build mini-projects"]),
    ("Intermediate", ["Take a specialization", "Build a capstone"]),
    ("Advanced", ["Contribute to open source", "Apply for internships"]),
]

GENERALIST = CareerPath(
    career_path="Generalist Software Engineer",
    required_skills=["Problem Solving", "Git", "JavaScript/TypeScript"],
    missing_skills=["Testing"],
    weak_skills=["System Design"],
)


def encode_component(s: str) -> str:
    # same escaping as JS encodeURIComponent
    return quote(s, safe="-_.!~*'()")


def courses_for(skill: str) -> List[Course]:
    return [
        Course(title=f"{skill} Crash Course (YouTube)", link=YOUTUBE_SEARCH + encode_component(f"{skill} tutorial")),
        Course(title=f"{skill} Specialization (Coursera)", link=COURSERA_SEARCH + encode_component(skill)),
    ]


def build_career_path(name: str, required_skills: List[str], interest: str) -> CareerPath:
    gap = [
        SkillGap(skill=s, your_level="Beginner", recommended_courses=courses_for(s))
        for s in required_skills[:MAX_GAP_SKILLS]
    ]
    return CareerPath(
        career_path=name,
        required_skills=list(required_skills),
        missing_skills=list(required_skills),
        weak_skills=[g.skill for g in gap],
        project_suggestions=[
            ProjectSuggestion(
                title=f"{name} Portfolio Project",
                description="Build and deploy a production-ready project demonstrating core skills.",
                link="https://roadmap.sh",
            )
        ],
        roadmap=[RoadmapStage(title=t, steps=list(steps)) for t, steps in ROADMAP],
        tags=[interest],
        skill_gap_report=gap,
    )


def fallback_career_paths(interests: Sequence[str]) -> List[dict]:
    """
    Interest-based defaults used when the model gives us nothing.
    Catalog entries are taken in interest order; a career path already
    produced for an earlier interest is not repeated.
    """
    seen = set()
    paths: List[CareerPath] = []
    for interest in interests:
        for item in lookup(interest):
            name = item["careerPath"]
            if name in seen:
                continue
            seen.add(name)
            paths.append(build_career_path(name, item["requiredSkills"], interest))

    if not paths:
        paths = [GENERALIST]

    return [p.model_dump(by_alias=True) for p in paths]
