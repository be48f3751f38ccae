import os
import re

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
URL_RE = re.compile(r"(https?://|www\.)\S+", re.I)
NAME_WORD_RE = re.compile(r"^[^\W\d_][\w.'\-]*$")

# A line made only of these words is a section heading, not a name
HEADING_WORDS = {
    "resume", "curriculum", "vitae", "cv", "summary", "profile", "objective",
    "education", "experience", "work", "employment", "history", "skills",
    "projects", "certifications", "contact", "references", "professional",
    "technical", "career", "personal", "information", "details", "core",
    "key", "competencies", "qualifications", "achievements", "awards",
    "languages", "interests", "publications", "about", "me", "and", "of",
}

# Only the top of a resume is searched for the candidate name
NAME_SCAN_LINES = 8


def extract_email(text: str) -> str:
    m = EMAIL_RE.search(text or '')
    return m.group(0).lower() if m else ''


def _is_heading(words) -> bool:
    return all(w.lower().strip(':&') in HEADING_WORDS for w in words)


def _looks_like_name(line: str) -> bool:
    if EMAIL_RE.search(line) or URL_RE.search(line):
        return False
    if any(ch.isdigit() for ch in line):
        return False
    words = line.split()
    if not 2 <= len(words) <= 4 or _is_heading(words):
        return False
    return all(NAME_WORD_RE.match(w) for w in words)


def name_from_filename(filename: str) -> str:
    stem = os.path.splitext(os.path.basename(filename or ''))[0]
    stem = re.sub(r"[_\-.]+", " ", stem).strip()
    return stem.title() if stem else 'Unknown'


def extract_name(text: str, fallback_filename: str = '') -> str:
    """Best-effort candidate name from the header lines of a resume."""
    lines = [ln.strip() for ln in (text or '').splitlines() if ln.strip()]
    for line in lines[:NAME_SCAN_LINES]:
        # "Jane Doe | jane@x.com" style headers
        head = re.split(r"\s*[|•,]\s*", line)[0]
        if _looks_like_name(head):
            if head.isupper():
                return head.title()
            return head
    return name_from_filename(fallback_filename)
