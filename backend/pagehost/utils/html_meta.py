import re
from typing import Dict, Optional
from bs4 import BeautifulSoup

_DESCRIPTION_RE = re.compile(r"^description$", re.I)


def extract_head_meta(html: Optional[str]) -> Dict[str, Optional[str]]:
    """
    Pull the <title> text and meta description out of stored page HTML.

    Pages are often pasted in as full documents; their own head tags are
    the next best SEO source after the explicit meta_* fields.
    """
    found: Dict[str, Optional[str]] = {"title": None, "description": None}
    if not html:
        return found

    soup = BeautifulSoup(html, "html.parser")

    if soup.title and soup.title.string:
        found["title"] = soup.title.string.strip() or None

    description = soup.find("meta", attrs={"name": _DESCRIPTION_RE})
    if description and description.get("content"):
        found["description"] = description["content"].strip() or None

    return found
