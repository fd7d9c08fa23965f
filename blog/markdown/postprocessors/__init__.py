# blog/markdown/postprocessors/__init__.py

from .heading_ids import assign_heading_ids
from .heading_links import wrap_heading_links
from .toc_list import insert_toc_list_default

POSTPROCESSORS = [
    insert_toc_list_default,  # Draft TOC list after the TOC heading (replaced later)
    assign_heading_ids,  # Ids for headings pandoc did not identify (raw HTML)
    wrap_heading_links,  # Wrap heading content in a self-link
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
