"""Best-effort contact field extraction from resume text.

These are first-match heuristics, not a parser. Each rule looks at the whole
text and takes the first hit in document order; nothing is scored or
cross-checked. Known misfires (a long digit run read as a phone number, an
address match that swallows the words before it) are part of the behavior
that prompts depend on, so change them deliberately or not at all.
"""

from __future__ import annotations

import re

from covergen.lib.models.models import ContactRecord

PHONE_RE = re.compile(r"(\+?[0-9]{1,3}[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}")
EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[a-zA-Z0-9-]+")
ADDRESS_RE = re.compile(r"[A-Za-z\s]+,\s[A-Z]{2}(,\s[A-Z]{2})?\s*[0-9]{5}")

LINKEDIN_PLACEHOLDER = "LinkedIn Profile"

# Checked in this order when no US-style address is found.
FALLBACK_CITIES = ("Hyderabad", "Chennai", "Bangalore", "Mumbai", "Delhi")


def extract_name(text: str) -> str | None:
    """First non-blank line, trimmed."""
    for line in text.split("\n"):
        if line.strip():
            return line.strip()
    return None


def _first_match(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    if match:
        return match.group(0).strip()
    return None


def extract_linkedin(text: str) -> str | None:
    handle = _first_match(LINKEDIN_RE, text)
    if handle:
        return "https://www." + handle
    if "linkedin" in text.lower():
        return LINKEDIN_PLACEHOLDER
    return None


def extract_address(text: str) -> str | None:
    address = _first_match(ADDRESS_RE, text)
    if address:
        return address
    for city in FALLBACK_CITIES:
        if city in text:
            return city
    return None


def extract_contact_info(text: str) -> ContactRecord:
    """Derive a ContactRecord from decoded resume text."""
    return ContactRecord(
        name=extract_name(text),
        phone=_first_match(PHONE_RE, text),
        email=_first_match(EMAIL_RE, text),
        linkedin=extract_linkedin(text),
        address=extract_address(text),
    )
