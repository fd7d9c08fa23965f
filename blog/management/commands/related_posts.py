from django.core.management.base import BaseCommand, CommandError

from blog.conf import get_blog_settings
from blog.posts import get_all_posts
from blog.similarity import get_category_posts, get_related_posts, get_tag_posts


class Command(BaseCommand):
    help = 'List posts related to the given post'

    def add_arguments(self, parser):
        parser.add_argument('slug', type=str, help='Slug of the current post')
        parser.add_argument(
            '--mode',
            choices=['related', 'category', 'tag'],
            default='related',
            help='related: tag + category score (default), category: same category, tag: shared tags',
        )
        parser.add_argument('--limit', type=int, help='Maximum number of posts to list')
        parser.add_argument('--min-score', type=float, help='Minimum relevance score (related mode)')

    def handle(self, *args, **options):
        config = get_blog_settings()
        slug = options['slug']
        limit = options.get('limit')
        if limit is None:
            limit = config.related_posts_limit

        posts = get_all_posts(config)
        current = next((post for post in posts if post.slug == slug), None)
        if current is None:
            raise CommandError(f'No post found with slug: {slug}')

        mode = options['mode']
        if mode == 'category':
            related = get_category_posts(current, posts, limit, config=config)
        elif mode == 'tag':
            related = get_tag_posts(current, posts, limit, config=config)
        else:
            min_score = options.get('min_score')
            if min_score is None:
                min_score = config.related_posts_min_score
            related = get_related_posts(current, posts, limit, min_score, config=config)

        if not related:
            self.stdout.write(self.style.WARNING(f'No related posts for {slug}'))
            return

        for item in related:
            self.stdout.write(f'{item.score:.3f}  {item.slug}  {item.title}')
