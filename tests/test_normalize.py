import json

from pathfinder.core.normalize import normalize_career_paths


def test_list_is_returned_verbatim():
    paths = [{"careerPath": "A"}, {"careerPath": "B"}, "odd item"]
    assert normalize_career_paths(paths) is paths


def test_suggested_career_paths_key():
    data = {"resumeInsights": {"pros": ["x"]}, "suggestedCareerPaths": [{"careerPath": "A"}], "other": [1]}
    assert normalize_career_paths(data) == [{"careerPath": "A"}]


def test_career_paths_key():
    assert normalize_career_paths({"careerPaths": [{"careerPath": "B"}], "misc": [9]}) == [{"careerPath": "B"}]


def test_suggested_key_wins_over_career_paths():
    data = {"careerPaths": [{"careerPath": "B"}], "suggestedCareerPaths": [{"careerPath": "A"}]}
    assert normalize_career_paths(data) == [{"careerPath": "A"}]


def test_empty_suggested_list_is_still_the_answer():
    assert normalize_career_paths({"suggestedCareerPaths": [], "careerPaths": [{"careerPath": "B"}]}) == []


def test_non_list_suggested_falls_through_to_flatten():
    data = {"suggestedCareerPaths": {"careerPath": "A"}, "paths": [1, 2], "more": [3]}
    assert normalize_career_paths(data) == [1, 2, 3]


def test_array_valued_fields_are_concatenated_in_key_order():
    data = {"ai": [{"careerPath": "ML"}], "note": "hi", "web": [{"careerPath": "FE"}, {"careerPath": "BE"}]}
    assert normalize_career_paths(data) == [{"careerPath": "ML"}, {"careerPath": "FE"}, {"careerPath": "BE"}]


def test_objects_without_arrays_give_empty():
    assert normalize_career_paths({}) == []
    assert normalize_career_paths({"a": 1, "b": {"c": [1]}, "d": "x"}) == []
    assert normalize_career_paths({"a": [], "b": []}) == []


def test_scalars_and_none_give_empty():
    for raw in (None, 0, 3.5, True, b"[1]"):
        assert normalize_career_paths(raw) == []


def test_json_strings_are_decoded():
    values = [
        [{"careerPath": "A"}],
        {"suggestedCareerPaths": [{"careerPath": "A"}]},
        {"careerPaths": [1]},
        {"x": [1], "y": [2]},
        {"x": 1},
        "just a string",
        42,
    ]
    for v in values:
        assert normalize_career_paths(json.dumps(v)) == normalize_career_paths(v)


def test_non_json_text_gives_empty():
    assert normalize_career_paths("Sure! Here are some careers: ...") == []
    assert normalize_career_paths("") == []
    assert normalize_career_paths('{"suggestedCareerPaths": [') == []


def test_deeply_nested_text_gives_empty():
    depth = 100000
    assert normalize_career_paths("[" * depth + "]" * depth) == []
    assert normalize_career_paths('{"a":' * depth + "1" + "}" * depth) == []
    assert normalize_career_paths("[" * depth) == []


def test_large_flat_array_is_returned_as_is():
    paths = [{"careerPath": f"Path {i}"} for i in range(100000)]
    assert normalize_career_paths(paths) is paths
    decoded = normalize_career_paths(json.dumps(paths))
    assert len(decoded) == 100000
    assert decoded[0] == {"careerPath": "Path 0"}
    assert decoded[-1] == {"careerPath": "Path 99999"}
