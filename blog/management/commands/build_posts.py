"""
Management command to parse every markdown post.

Prints a summary, or with --output writes all parsed posts to posts.json
for the page-rendering and feed layers to consume.
"""

import json
import logging
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from blog.conf import get_blog_settings
from blog.posts import get_all_markdown_files, get_post_by_slug, parse_markdown_file

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Parse markdown posts into HTML, excerpts and tables of contents'

    def add_arguments(self, parser):
        parser.add_argument(
            '--output',
            type=str,
            help='Directory to write posts.json into',
        )
        parser.add_argument(
            '--slug',
            type=str,
            help='Build a single post by slug',
        )
        parser.add_argument(
            '--keep-going',
            action='store_true',
            help='Skip posts that fail to parse instead of aborting',
        )

    def handle(self, *args, **options):
        config = get_blog_settings()
        slug = options.get('slug')
        output = options.get('output')
        keep_going = options.get('keep_going')

        if slug:
            post = get_post_by_slug(slug, config)
            if post is None:
                raise CommandError(f'No post found with slug: {slug}')
            posts = [post]
        else:
            posts = []
            failed = []
            for file_path, root, is_draft in get_all_markdown_files(config):
                try:
                    posts.append(parse_markdown_file(file_path, config, root=root, is_draft=is_draft))
                except Exception as e:
                    if not keep_going:
                        raise CommandError(f'Failed to parse {file_path}: {e}') from e
                    logger.error('Skipping %s: %s', file_path, e)
                    failed.append(str(file_path))

            if failed:
                self.stdout.write(self.style.WARNING(f'Skipped {len(failed)} post(s) that failed to parse'))

        drafts = sum(1 for post in posts if post.is_draft)
        with_toc = sum(1 for post in posts if post.table_of_contents)

        if output:
            output_dir = Path(output)
            output_dir.mkdir(parents=True, exist_ok=True)
            target = output_dir / 'posts.json'
            target.write_text(
                json.dumps([post.to_dict() for post in posts], ensure_ascii=False, indent=2),
                encoding='utf-8',
            )
            self.stdout.write(f'Wrote {target}')

        self.stdout.write(
            self.style.SUCCESS(
                f'Built {len(posts)} post(s) ({drafts} draft(s), {with_toc} with a table of contents)'
            )
        )
