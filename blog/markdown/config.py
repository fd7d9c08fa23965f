def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    The GitHub-flavoured reader covers most of the transform chain natively:
    emoji shortcodes, GitHub-style heading identifiers and raw HTML
    passthrough. Fenced code blocks are highlighted by pandoc's built-in
    highlighter; blocks with a missing or unknown language are emitted as
    plain <pre><code>, and line numbers are off unless asked for.
    """
    return {
        "format": "gfm+emoji+gfm_auto_identifiers",
        "to": "html5",
        "extra_args": [
            # Keep pandoc from re-wrapping long lines in the HTML output
            "--wrap=none",
        ],
        # Pandoc filters can be added here (Python or Lua filters)
        "filters": [],
    }
