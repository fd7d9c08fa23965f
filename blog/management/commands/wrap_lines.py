from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from blog.line_wrapper import MAX_LENGTH, wrap_content


class Command(BaseCommand):
    help = 'Wrap long prose lines of a post at Korean clause boundaries'

    def add_arguments(self, parser):
        parser.add_argument('file', type=str, help='Markdown file to wrap')
        parser.add_argument(
            '--in-place',
            action='store_true',
            help='Rewrite the file instead of printing the result',
        )
        parser.add_argument('--max-length', type=int, default=MAX_LENGTH)

    def handle(self, *args, **options):
        path = Path(options['file'])
        try:
            content = path.read_text(encoding='utf-8')
        except OSError as e:
            raise CommandError(f'Cannot read {path}: {e}') from e

        wrapped = wrap_content(content, options['max_length'])

        if options['in_place']:
            path.write_text(wrapped, encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f'Wrapped: {path}'))
        else:
            self.stdout.write(wrapped, ending='')
