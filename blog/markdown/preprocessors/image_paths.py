"""
Preprocessor that rewrites document-relative image references.

Converts, for a post stored at ``dev/2024/01/15/example.md``:
    ![Alt](images/diagram.png)  →  ![Alt](/images/dev/2024/01/15/images/diagram.png)

Paths with fewer than four segments are left untouched.
"""

import logging
import re
from pathlib import PurePosixPath

logger = logging.getLogger(__name__)

# Only bare "images/..." targets match, so absolute /images/... paths are never rewritten twice
RELATIVE_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(images/([^)]+)\)")

# {category}/{year}/{month}/{day}
PREFIX_SEGMENTS = 4


def image_url_prefix(relative_path: str):
    """
    Return ``/images/{category}/{year}/{month}/{day}`` built from the first four
    path segments, or ``None`` when the path has fewer than four.
    """
    segments = PurePosixPath(relative_path).parts
    if len(segments) < PREFIX_SEGMENTS:
        return None
    return "/images/" + "/".join(segments[:PREFIX_SEGMENTS])


def rewrite_image_paths(text: str, context: dict) -> str:
    """
    Rewrite ``![alt](images/name)`` to an absolute site path.

    Args:
        text: Markdown text
        context: Must contain 'relative_path', the post path relative to its content root

    Returns:
        Markdown with image references rewritten
    """
    relative_path = context.get("relative_path")
    if not relative_path:
        return text

    prefix = image_url_prefix(relative_path)
    if prefix is None:
        return text

    def replace(match):
        rewritten = f"![{match.group(1)}]({prefix}/images/{match.group(2)})"
        logger.debug("Image path %s -> %s", match.group(0), rewritten)
        return rewritten

    return RELATIVE_IMAGE_RE.sub(replace, text)
