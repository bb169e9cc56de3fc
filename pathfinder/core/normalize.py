import json
from typing import Any, List


def normalize_career_paths(raw: Any) -> List[Any]:
    """
    The model is asked for {"suggestedCareerPaths": [...]} but does not
    always comply. Accepted shapes, first match wins:
      1) a bare list
      2) {"suggestedCareerPaths": [...]}
      3) {"careerPaths": [...]}
      4) any dict: every list-valued field, concatenated in key order
    Strings are decoded as JSON first; undecodable or too deeply nested
    text counts as no match. Anything else yields [].
    """
    data = raw
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except (ValueError, RecursionError):
            pass

    if isinstance(data, list):
        return data

    if isinstance(data, dict):
        if isinstance(data.get("suggestedCareerPaths"), list):
            return data["suggestedCareerPaths"]
        if isinstance(data.get("careerPaths"), list):
            return data["careerPaths"]

        # NOTE: this also merges unrelated arrays (e.g. stray metadata lists)
        merged: List[Any] = []
        for val in data.values():
            if isinstance(val, list):
                merged.extend(val)
        if merged:
            return merged

    return []
