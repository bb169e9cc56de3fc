from pathfinder.core.catalog import CATALOG, interest_labels
from pathfinder.core.fallback import encode_component, fallback_career_paths


def test_no_interests_gives_generalist():
    paths = fallback_career_paths([])
    assert paths == [
        {
            "careerPath": "Generalist Software Engineer",
            "requiredSkills": ["Problem Solving", "Git", "JavaScript/TypeScript"],
            "missingSkills": ["Testing"],
            "weakSkills": ["System Design"],
            "projectSuggestions": [],
            "roadmap": [],
            "tags": [],
            "skillGapReport": [],
        }
    ]


def test_unknown_interests_give_generalist():
    paths = fallback_career_paths(["Underwater Basket Weaving", "artificial intelligence"])
    assert [p["careerPath"] for p in paths] == ["Generalist Software Engineer"]


def test_single_interest():
    paths = fallback_career_paths(["Artificial Intelligence"])
    assert [p["careerPath"] for p in paths] == ["Machine Learning Engineer", "AI Researcher"]
    for p in paths:
        assert p["tags"] == ["Artificial Intelligence"]
        assert len(p["skillGapReport"]) == 3
        for gap in p["skillGapReport"]:
            assert gap["yourLevel"] == "Beginner"
            assert len(gap["recommendedCourses"]) == 2


def test_record_contents():
    ml = fallback_career_paths(["Artificial Intelligence"])[0]
    assert ml["requiredSkills"] == ["Python", "Machine Learning", "TensorFlow", "PyTorch", "Data Structures", "Statistics"]
    assert ml["missingSkills"] == ml["requiredSkills"]
    assert ml["weakSkills"] == ["Python", "Machine Learning", "TensorFlow"]
    assert ml["projectSuggestions"] == [
        {
            "title": "Machine Learning Engineer Portfolio Project",
            "description": "Build and deploy a production-ready project demonstrating core skills.",
            "link": "https://roadmap.sh",
        }
    ]
    assert ml["roadmap"] == [
        {"title": "Foundations", "steps": ["Learn fundamentals", "Build mini-projects"]},
        {"title": "Intermediate", "steps": ["Take a specialization", "Build a capstone"]},
        {"title": "Advanced", "steps": ["Contribute to open source", "Apply for internships"]},
    ]


def test_course_links_are_search_urls():
    gap = fallback_career_paths(["Artificial Intelligence"])[0]["skillGapReport"][1]
    assert gap["skill"] == "Machine Learning"
    assert gap["recommendedCourses"] == [
        {
            "title": "Machine Learning Crash Course (YouTube)",
            "link": "https://www.youtube.com/results?search_query=Machine%20Learning%20tutorial",
        },
        {
            "title": "Machine Learning Specialization (Coursera)",
            "link": "https://www.coursera.org/search?query=Machine%20Learning",
        },
    ]


def test_encode_component_matches_js():
    assert encode_component("C# or C++") == "C%23%20or%20C%2B%2B"
    assert encode_component("AWS/Azure/GCP") == "AWS%2FAzure%2FGCP"
    assert encode_component("Node.js (v20)!*~'") == "Node.js%20(v20)!*~'"


def test_two_interests_give_four_records():
    paths = fallback_career_paths(["Artificial Intelligence", "Web Development"])
    assert [p["careerPath"] for p in paths] == [
        "Machine Learning Engineer",
        "AI Researcher",
        "Frontend Developer",
        "Full-Stack Developer",
    ]
    assert [p["tags"] for p in paths] == [["Artificial Intelligence"]] * 2 + [["Web Development"]] * 2


def test_duplicate_names_first_seen_wins(monkeypatch):
    monkeypatch.setitem(CATALOG, "Robotics", [
        {"careerPath": "Machine Learning Engineer", "requiredSkills": ["ROS"]},
        {"careerPath": "Robotics Engineer", "requiredSkills": ["ROS", "C++"]},
    ])
    paths = fallback_career_paths(["Artificial Intelligence", "Robotics"])
    names = [p["careerPath"] for p in paths]
    assert names == ["Machine Learning Engineer", "AI Researcher", "Robotics Engineer"]
    assert paths[0]["tags"] == ["Artificial Intelligence"]
    assert paths[2]["skillGapReport"][1]["skill"] == "C++"
    assert len(paths[2]["skillGapReport"]) == 2


def test_repeated_interest_is_not_duplicated():
    paths = fallback_career_paths(["Data Science", "Data Science"])
    assert len(paths) == 2


def test_every_catalog_interest_yields_two_paths():
    for label in interest_labels():
        paths = fallback_career_paths([label])
        assert len(paths) == 2
        for p in paths:
            assert 1 <= len(p["skillGapReport"]) <= 3


def test_deterministic():
    interests = list(CATALOG)
    assert fallback_career_paths(interests) == fallback_career_paths(interests)
