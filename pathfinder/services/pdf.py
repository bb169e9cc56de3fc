from io import BytesIO
from typing import Any, List

from reportlab.pdfgen import canvas
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.units import inch


def as_list(v: Any) -> list:
    return v if isinstance(v, list) else []


def as_dicts(v: Any) -> List[dict]:
    return [x for x in as_list(v) if isinstance(x, dict)]


def path_name(path: dict) -> str:
    return str(path.get("careerPath") or path.get("name") or "Career Path")


def required_skills(path: dict) -> List[str]:
    skills = [str(s) for s in as_list(path.get("requiredSkills")) if s]
    if not skills:
        skills = [str(g["skill"]) for g in as_dicts(path.get("skillGapReport")) if g.get("skill")]
    return skills


def weak_skills(path: dict) -> List[str]:
    weak = [str(s) for s in as_list(path.get("weakSkills")) if s]
    if not weak:
        weak = [
            str(g["skill"])
            for g in as_dicts(path.get("skillGapReport"))
            if g.get("skill") and str(g.get("yourLevel") or "").lower() == "beginner"
        ]
    return weak


def render_career_path_pdf(path: dict) -> BytesIO:
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=LETTER)
    width, height = LETTER

    # margins
    left = 0.75 * inch
    right = 0.75 * inch
    top = 0.75 * inch
    bottom = 0.75 * inch

    # typography
    font_body = "Helvetica"
    font_bold = "Helvetica-Bold"
    body_size = 11
    header_size = 13
    title_size = 16
    leading = 14

    # layout
    y = height - top
    max_width = width - left - right
    lines_per_page = int((height - top - bottom) // leading) - 1

    def new_page():
        nonlocal y
        c.showPage()
        y = height - top

    def ensure_space(lines_needed: float = 1):
        nonlocal y
        if y - (leading * lines_needed) <= bottom:
            new_page()

    def wrap_text(text: str, font: str, size: float, avail_width: float) -> list[str]:
        words = text.split()
        if not words:
            return [""]
        lines: list[str] = []
        cur = words[0]
        for w in words[1:]:
            test = cur + " " + w
            if c.stringWidth(test, font, size) <= avail_width:
                cur = test
            else:
                lines.append(cur)
                cur = w
        lines.append(cur)
        return lines

    def draw_block(text: str, indent: float = 0, font: str = font_body, size: float = body_size):
        # a wrapped block moves to the next page as a whole when it won't fit
        nonlocal y
        wrapped = wrap_text(text, font, size, max_width - indent)
        ensure_space(min(len(wrapped), lines_per_page))
        for line in wrapped:
            ensure_space(1)
            c.setFont(font, size)
            c.drawString(left + indent, y, line)
            y -= leading

    def section(title: str):
        nonlocal y
        y -= leading * 0.3
        ensure_space(2)
        c.setFont(font_bold, header_size)
        c.drawString(left, y, title)
        y -= leading * 1.1

        # divider line
        c.setLineWidth(0.6)
        c.line(left, y + 6, width - right, y + 6)
        y -= leading * 0.3

    bullet_indent = 0.18 * inch
    sub_indent = 0.4 * inch

    # Title
    draw_block(f"{path_name(path)} - Career Report", font=font_bold, size=title_size)
    y -= leading * 0.5

    section("Required Skills")
    skills = required_skills(path)
    if not skills:
        draw_block("• N/A", bullet_indent)
    for s in skills:
        draw_block(f"• {s}", bullet_indent)

    missing = [str(s) for s in as_list(path.get("missingSkills")) if s]
    if missing:
        section("Missing Skills")
        for s in missing:
            draw_block(f"• {s}", bullet_indent)

    weak = weak_skills(path)
    if weak:
        section("Weak Skills")
        for s in weak:
            draw_block(f"• {s}", bullet_indent)

    gaps = as_dicts(path.get("skillGapReport"))
    if gaps:
        section("Recommended Courses")
        for gap in gaps:
            draw_block(f"• {gap.get('skill') or 'Skill'} ({gap.get('yourLevel') or 'N/A'})", bullet_indent)
            for course in as_dicts(gap.get("recommendedCourses")):
                draw_block(f"- {course.get('title') or 'Course'}: {course.get('link') or ''}", sub_indent)

    projects = as_dicts(path.get("projectSuggestions"))
    if projects:
        section("Project Suggestions")
        for p in projects:
            draw_block(f"• {p.get('title') or 'Project'}", bullet_indent)
            if p.get("description"):
                draw_block(str(p["description"]), sub_indent)
            if p.get("link"):
                draw_block(f"Link: {p['link']}", sub_indent)

    roadmap = as_dicts(path.get("roadmap"))
    if roadmap:
        section("Roadmap")
        for idx, stage in enumerate(roadmap, start=1):
            draw_block(f"• {stage.get('title') or f'Milestone {idx}'}", bullet_indent)
            for step in as_list(stage.get("steps")):
                draw_block(f"- {step}", sub_indent)

    c.save()
    buf.seek(0)
    return buf
