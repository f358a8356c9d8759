"""Skills extraction from resume text."""

import re
from typing import List, Set, Tuple

from .sections import extract_field_section


# Known technology terms, in display form. Matching is case-insensitive on
# whole tokens, so "Java" does not match inside "JavaScript".
KNOWN_SKILLS: tuple[str, ...] = (
    # Languages & runtimes
    "Python", "Java", "JavaScript", "TypeScript", "C++", "C#", "Golang",
    "Rust", "Ruby", "PHP", "Kotlin", "Swift", "Scala", "Perl", "MATLAB",
    "Bash", "PowerShell", "SQL", "HTML", "CSS", "Sass", "Node.js",
    # Frontend frameworks
    "React", "React Native", "Next.js", "Angular", "Vue", "Vue.js", "Svelte",
    "jQuery", "Redux", "Tailwind CSS", "Bootstrap",
    # Backend frameworks
    "Django", "Flask", "FastAPI", "Spring", "Spring Boot", "Express",
    "ASP.NET", ".NET", "Ruby on Rails", "Laravel", "GraphQL", "gRPC",
    # Databases
    "MySQL", "PostgreSQL", "MongoDB", "Redis", "Elasticsearch", "DynamoDB",
    "SQLite", "Oracle", "Cassandra", "Firebase",
    # Messaging
    "Kafka", "RabbitMQ", "Celery",
    # Cloud & DevOps
    "AWS", "Azure", "GCP", "Google Cloud", "Docker", "Kubernetes",
    "Terraform", "Ansible", "Jenkins", "Git", "GitHub", "GitLab", "CI/CD",
    "Linux", "Nginx", "Heroku",
    # Testing
    "Pytest", "JUnit", "Jest", "Cypress", "Selenium",
    # Data Science & ML
    "Pandas", "NumPy", "scikit-learn", "TensorFlow", "PyTorch", "Keras",
    "Machine Learning", "Deep Learning", "NLP", "Data Analysis", "Tableau",
    "Power BI", "Excel", "Spark", "Hadoop",
    # Mobile
    "Android", "iOS", "Flutter",
    # Practices & tools
    "Agile", "Scrum", "Microservices", "Figma", "Photoshop", "Jira",
)


# Skill names that are also ordinary English words only count when
# capitalised as written here.
_CASE_SENSITIVE_SKILLS = frozenset({"Excel", "Express", "Spring", "Swift"})


def _skill_regex(skill: str) -> re.Pattern:
    escaped = r"\s+".join(re.escape(part) for part in skill.split())
    flags = 0 if skill in _CASE_SENSITIVE_SKILLS else re.IGNORECASE
    return re.compile(rf"(?<![A-Za-z0-9+#.]){escaped}(?![A-Za-z0-9+#])", flags)


_SKILL_PATTERNS = tuple((skill, _skill_regex(skill)) for skill in KNOWN_SKILLS)


def find_known_skills(text: str) -> List[str]:
    """Find dictionary skills mentioned anywhere in the text.

    A match inside a longer match is dropped, so "Vue.js" does not also
    report "Vue".

    Args:
        text: Raw resume text

    Returns:
        Skill names in order of first appearance, de-duplicated
    """
    matches = [
        (match.start(), match.end(), skill)
        for skill, pattern in _SKILL_PATTERNS
        for match in pattern.finditer(text)
    ]
    matches.sort(key=lambda hit: (hit[0] - hit[1], hit[0]))

    consumed: List[Tuple[int, int]] = []
    hits = []
    for start, end, skill in matches:
        if any(start < taken_end and taken_start < end for taken_start, taken_end in consumed):
            continue
        consumed.append((start, end))
        hits.append((start, skill))
    hits.sort(key=lambda hit: hit[0])

    seen: Set[str] = set()
    result: List[str] = []
    for _, skill in hits:
        key = skill.lower()
        if key not in seen:
            seen.add(key)
            result.append(skill)
    return result


def extract_skills(text: str) -> str:
    """Extract skills from resume text.

    Uses the Skills section when present; otherwise scans the whole text for
    known skill names.

    Args:
        text: Raw resume text

    Returns:
        Section body, or comma-separated skill names, or empty string
    """
    section = extract_field_section(text, "skills")
    if section:
        return section
    return ", ".join(find_known_skills(text))
