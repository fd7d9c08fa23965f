"""
Django settings for the jellblog project.

There is no database: posts are markdown files on disk and are re-parsed
on every read. The ``BLOG`` dict below is the only app-specific setting.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "jellblog-insecure-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"

ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "blog",
]

DATABASES = {}

LANGUAGE_CODE = "ko-kr"
TIME_ZONE = "Asia/Seoul"
USE_I18N = True
USE_TZ = True

# Content engine
BLOG = {
    "POSTS_DIR": os.environ.get("BLOG_POSTS_DIR", str(BASE_DIR / "_posts")),
    "DRAFTS_DIR": os.environ.get("BLOG_DRAFTS_DIR", str(BASE_DIR / "_drafts")),
    # "production" hides drafts from listings and related posts
    "ENVIRONMENT": os.environ.get("BLOG_ENVIRONMENT", "development"),
    "EXCERPT_LENGTH": 160,
    "RELATED_POSTS_LIMIT": 5,
    "RELATED_POSTS_MIN_SCORE": 0.2,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "blog": {
            "handlers": ["console"],
            "level": os.environ.get("BLOG_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
