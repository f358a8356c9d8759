"""Website and LinkedIn profile extraction from resume text."""

import re


_URL_RE = re.compile(r"(?:https?://|www\.)[^\s,;|<>()\[\]\"']+", re.IGNORECASE)
_LABELLED_SITE_RE = re.compile(
    r"(?:website|portfolio|site|blog)\s*:\s*([a-zA-Z0-9\-]+(?:\.[a-zA-Z0-9\-]+)*\.[a-zA-Z]{2,}[^\s,;|<>()]*)",
    re.IGNORECASE,
)
_LINKEDIN_URL_RE = re.compile(
    r"((?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/in/[A-Za-z0-9_\-%]+)", re.IGNORECASE
)
_LINKEDIN_LABEL_RE = re.compile(r"linkedin\s*:\s*@?([A-Za-z0-9_\-]{3,})\b", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Normalize URL to include https:// prefix."""
    url = url.strip().rstrip(".")
    if not url:
        return ""
    if not url.lower().startswith(("http://", "https://")):
        url = "https://" + url
    # Remove trailing slashes
    return url.rstrip("/")


def extract_website(text: str) -> str:
    """Extract a personal website from resume text.

    Takes the first http(s):// or www. token that is not an email address or
    a LinkedIn link, then falls back to a "Website: example.dev" label.

    Args:
        text: Raw resume text

    Returns:
        URL with an https:// prefix, or empty string
    """
    for match in _URL_RE.finditer(text):
        token = match.group(0)
        if "@" in token or "linkedin" in token.lower():
            continue
        return normalize_url(token)

    labelled = _LABELLED_SITE_RE.search(text)
    if labelled:
        token = labelled.group(1)
        if "@" not in token and "linkedin" not in token.lower():
            return normalize_url(token)

    return ""


def extract_linkedin(text: str) -> str:
    """Extract a LinkedIn profile URL from resume text.

    Args:
        text: Raw resume text

    Returns:
        Profile URL with an https:// prefix, or empty string
    """
    match = _LINKEDIN_URL_RE.search(text)
    if match:
        return normalize_url(match.group(1))

    # "LinkedIn: janedoe"
    label_match = _LINKEDIN_LABEL_RE.search(text)
    if label_match and "." not in label_match.group(1):
        return f"https://linkedin.com/in/{label_match.group(1)}"

    return ""
