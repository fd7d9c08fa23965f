# blog/markdown/preprocessors/__init__.py

from .image_paths import rewrite_image_paths
from .toc_marker import normalize_toc_markers

PREPROCESSORS = [
    rewrite_image_paths,  # Needs context['relative_path']
    normalize_toc_markers,
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
