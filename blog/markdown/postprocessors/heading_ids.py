from bs4 import BeautifulSoup
from django.utils.text import slugify

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def assign_heading_ids(html: str, context: dict) -> str:
    """
    Give every heading without an id a unicode slug of its text.

    Pandoc already identifies markdown headings; this covers raw HTML
    headings passed through untouched. Duplicates get -1, -2, ... suffixes.
    """
    soup = BeautifulSoup(html, "html.parser")
    headings = soup.find_all(_HEADING_TAGS)
    missing = [heading for heading in headings if not heading.get("id")]
    if not missing:
        return html

    used = {heading["id"] for heading in headings if heading.get("id")}
    for heading in missing:
        base = slugify(heading.get_text(" ", strip=True), allow_unicode=True) or "section"
        candidate = base
        counter = 1
        while candidate in used:
            candidate = f"{base}-{counter}"
            counter += 1
        heading["id"] = candidate
        used.add(candidate)

    return str(soup)
