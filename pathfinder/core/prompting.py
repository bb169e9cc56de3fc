from typing import Optional

from pathfinder.schemas import ProfileInput

SYSTEM_PROMPT = """You are a career guidance expert.
Analyze the student's profile, resume, and interests to suggest suitable career paths.

OUTPUT RULES (ALWAYS):
- Return ONLY valid JSON. No markdown, no commentary, no extra text.
- Use double quotes for all keys and strings.
- Every link MUST be a direct https URL.
"""

OUTPUT_SCHEMA = """{
  "resumeInsights": {
    "pros": ["<string>"],
    "cons": ["<string>"]
  },
  "suggestedCareerPaths": [
    {
      "careerPath": "<string>",
      "requiredSkills": ["<string>", "<string>", "<string>"],
      "missingSkills": ["<string>"],
      "weakSkills": ["<string>"],
      "projectSuggestions": [
        { "title": "<string>", "description": "<string>", "link": "https://..." }
      ],
      "roadmap": [
        { "title": "<string>", "steps": ["<string>", "<string>"] }
      ],
      "tags": ["<interestLabel>", "<interestLabel>"],
      "skillGapReport": [
        {
          "skill": "<string>",
          "yourLevel": "Beginner" | "Intermediate" | "Advanced",
          "recommendedCourses": [
            { "title": "<string>", "link": "https://..." }
          ]
        }
      ]
    }
  ]
}"""


def fmt_pct(v: Optional[float]) -> str:
    if v is None:
        return "N/A"
    return f"{v:g}"


def build_analysis_prompt(profile: ProfileInput, resume_text: Optional[str] = None) -> str:
    """
    resume_text is given when the provider cannot read the attached document;
    otherwise the prompt points at the attachment.
    """
    ad = profile.academic_details
    interests = ", ".join(profile.interests) or "None specified"

    if resume_text is None:
        resume_ref = "(attached document)"
    else:
        resume_ref = resume_text.strip() or "(resume text could not be extracted)"

    return f"""Consider the student's academic details:
10th Percentage: {fmt_pct(ad.tenth_percentage)}
12th Percentage: {fmt_pct(ad.twelfth_percentage)}
Diploma/UG Percentage: {fmt_pct(ad.diploma_ug_percentage)}

Student's Interests: {interests}

Resume content:
{resume_ref}

Based on this information, generate career paths as follows:
- For EACH selected interest domain, provide AT LEAST 2 distinct, relevant career paths.
- De-duplicate across interests; overall include 4-12 total paths if many interests overlap.
- For each career path, include a tags array listing the matching interests (e.g., ["Artificial Intelligence"]).

For each career path:
1. Identify the core required skills (as a string array under the key "requiredSkills").
2. Provide a skill gap report including the student's current level (Beginner, Intermediate, Advanced) for each relevant skill.
3. For each skill in the gap report, recommend specific courses to bridge the gap. Each course recommendation MUST include a 'title' and a 'link' (a direct URL). Prioritize courses from reputable platforms like Coursera or YouTube. Ensure the links are valid.

Return ONLY valid JSON with EXACTLY the following structure:
{OUTPUT_SCHEMA}
No extra text, only JSON.
"""
