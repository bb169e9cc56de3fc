import logging
from typing import Callable, Optional

from pathfinder import config
from pathfinder.core.fallback import fallback_career_paths
from pathfinder.core.normalize import normalize_career_paths
from pathfinder.core.prompting import SYSTEM_PROMPT, build_analysis_prompt
from pathfinder.schemas import AnalysisResult, ProfileInput, ResumeInsights
from pathfinder.services.llm import generate_career_json, wants_resume_text
from pathfinder.services.resume import ResumeDocument, parse_data_uri, resume_text

logger = logging.getLogger(__name__)

ModelCall = Callable[[str, str, Optional[ResumeDocument]], object]

EMPTY_OUTPUT_INSIGHTS = ResumeInsights(
    pros=["Basic profile analyzed"],
    cons=["AI output empty; used fallback"],
)

UNAVAILABLE_INSIGHTS = ResumeInsights(
    pros=["Generated locally using interest-based defaults"],
    cons=["Live AI service unavailable; results may be generic"],
)


def load_resume(profile: ProfileInput) -> Optional[ResumeDocument]:
    try:
        return parse_data_uri(profile.resume_data_uri)
    except ValueError as e:
        logger.warning("Could not decode resume data URI: %s", e)
        return None


def build_prompt(profile: ProfileInput, doc: Optional[ResumeDocument]) -> str:
    if doc is None:
        return build_analysis_prompt(profile, resume_text="")
    if wants_resume_text(config.LLM_PROVIDER, doc):
        return build_analysis_prompt(profile, resume_text=resume_text(doc))
    return build_analysis_prompt(profile)


def fallback_result(profile: ProfileInput, insights: ResumeInsights) -> AnalysisResult:
    return AnalysisResult(
        suggested_career_paths=fallback_career_paths(profile.interests),
        resume_insights=insights.model_copy(deep=True),
    )


def analyze_profile(profile: ProfileInput, call_model: Optional[ModelCall] = None) -> AnalysisResult:
    """
    One best-effort model call. Whatever comes back is normalized into a list
    of career paths; if that list is empty, or the call raised, the
    interest-based fallback is returned instead. Never raises for model errors.
    """
    call_model = call_model or generate_career_json
    doc = load_resume(profile)
    prompt = build_prompt(profile, doc)

    try:
        raw = call_model(SYSTEM_PROMPT, prompt, doc)
    except Exception:
        logger.warning("AI call failed, using fallback", exc_info=True)
        return fallback_result(profile, UNAVAILABLE_INSIGHTS)

    paths = normalize_career_paths(raw)
    if not paths:
        logger.info("AI output empty after normalization, using fallback")
        return fallback_result(profile, EMPTY_OUTPUT_INSIGHTS)

    logger.info("AI returned %d career paths", len(paths))
    return AnalysisResult(suggested_career_paths=paths)
