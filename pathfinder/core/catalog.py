from typing import Dict, List

# interest label -> career paths offered when the model is unavailable
CATALOG: Dict[str, List[dict]] = {
    "Artificial Intelligence": [
        {"careerPath": "Machine Learning Engineer", "requiredSkills": ["Python", "Machine Learning", "TensorFlow", "PyTorch", "Data Structures", "Statistics"]},
        {"careerPath": "AI Researcher", "requiredSkills": ["Python", "Deep Learning", "NLP", "Research Methods", "Mathematics"]},
    ],
    "Web Development": [
        {"careerPath": "Frontend Developer", "requiredSkills": ["HTML", "CSS", "JavaScript", "React", "TypeScript"]},
        {"careerPath": "Full-Stack Developer", "requiredSkills": ["Node.js", "Express", "React", "Databases", "REST APIs"]},
    ],
    "UI/UX Design": [
        {"careerPath": "UI/UX Designer", "requiredSkills": ["Figma", "Wireframing", "Prototyping", "Design Systems", "User Research"]},
        {"careerPath": "Product Designer", "requiredSkills": ["Interaction Design", "Visual Design", "Usability Testing", "Figma"]},
    ],
    "Data Science": [
        {"careerPath": "Data Scientist", "requiredSkills": ["Python", "Pandas", "Machine Learning", "Statistics", "SQL"]},
        {"careerPath": "Data Analyst", "requiredSkills": ["SQL", "Excel", "Tableau/PowerBI", "Python", "Data Cleaning"]},
    ],
    "Cybersecurity": [
        {"careerPath": "Security Analyst", "requiredSkills": ["Network Security", "SIEM", "Incident Response", "Linux", "Scripting"]},
        {"careerPath": "Penetration Tester", "requiredSkills": ["Linux", "Networking", "Burp Suite", "OWASP", "Scripting"]},
    ],
    "Mobile App Development": [
        {"careerPath": "Android Developer", "requiredSkills": ["Kotlin", "Android SDK", "Jetpack", "REST APIs"]},
        {"careerPath": "Flutter Developer", "requiredSkills": ["Dart", "Flutter", "State Management", "REST APIs"]},
    ],
    "Cloud Computing": [
        {"careerPath": "Cloud Engineer", "requiredSkills": ["AWS/Azure/GCP", "Linux", "Terraform", "Networking", "Containers"]},
        {"careerPath": "DevOps Engineer", "requiredSkills": ["CI/CD", "Docker", "Kubernetes", "Monitoring", "Scripting"]},
    ],
    "Game Development": [
        {"careerPath": "Game Developer", "requiredSkills": ["Unity/Unreal", "C# or C++", "Game Physics", "3D Math"]},
        {"careerPath": "Technical Artist", "requiredSkills": ["Shaders", "3D Pipelines", "Scripting", "Rendering"]},
    ],
}


def interest_labels() -> List[str]:
    return list(CATALOG)


def lookup(interest: str) -> List[dict]:
    return CATALOG.get(interest, [])
