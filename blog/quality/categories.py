"""Content directory → frontmatter category mapping."""

CATEGORIES = {
    "dev/js": {"category": "Javascript", "tags": ["Javascript"]},
    "dev/js/tip": {"category": "Javascript", "tags": ["Javascript", "Tips"]},
    "dev/blog": {"category": "Blog", "tags": ["Blog"]},
    "dev/docker": {"category": "Docker", "tags": ["Docker"]},
    "dev/ios": {"category": "iOS", "tags": ["iOS"]},
    "dev/linux": {"category": "Linux", "tags": ["Linux"]},
    "dev/network": {"category": "Network", "tags": ["Network"]},
    "dev/algorithm": {"category": "Algorithm", "tags": ["Algorithm"]},
    "dev/architecture": {"category": "Architecture", "tags": ["Architecture"]},
    "dev/jell": {"category": "Dev", "tags": ["개발"]},
    "bicycle": {"category": "Bicycle", "tags": ["Bicycle"]},
    "chat": {"category": "Chat", "tags": ["Chat"]},
    "game": {"category": "Game", "tags": ["Game"]},
    "notice": {"category": "Notice", "tags": ["Notice"]},
}

CATEGORY_KEYS = list(CATEGORIES)

VALID_CATEGORIES = {config["category"] for config in CATEGORIES.values()}


def get_category_config(category_path: str) -> dict:
    try:
        return CATEGORIES[category_path]
    except KeyError:
        available = ", ".join(CATEGORY_KEYS)
        raise KeyError(f'Unknown category: "{category_path}". Available: {available}') from None
