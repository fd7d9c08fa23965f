"""
Preprocessor that normalizes author-facing TOC placeholders.

Both of these become a literal ``## Table of Contents`` heading, which the
TOC list postprocessor recognizes:

    ```toc
    ```

    [toc]
"""

import re

TOC_HEADING_MARKDOWN = "## Table of Contents"

TOC_FENCE_RE = re.compile(r"```toc\s*```")
TOC_BRACKET_RE = re.compile(r"^[ \t]*\[toc\][ \t]*$", re.IGNORECASE | re.MULTILINE)


def normalize_toc_markers(text: str, context: dict) -> str:
    text = TOC_FENCE_RE.sub(TOC_HEADING_MARKDOWN, text)
    return TOC_BRACKET_RE.sub(TOC_HEADING_MARKDOWN, text)
