"""
Management command to run the authoring quality checks.

Checks frontmatter, formal Korean tone and document structure for each
file and exits non-zero when any file has errors.
"""

from django.core.management.base import BaseCommand, CommandError

from blog.quality import validate_post


class Command(BaseCommand):
    help = 'Validate markdown posts (frontmatter, tone, structure)'

    def add_arguments(self, parser):
        parser.add_argument('files', nargs='+', type=str, help='Markdown files to validate')

    def handle(self, *args, **options):
        failures = 0

        for file in options['files']:
            self.stdout.write(f'\n--- {file} ---')
            try:
                result = validate_post(file)
            except OSError as e:
                self.stdout.write(self.style.ERROR(f'  ERROR: {e}'))
                failures += 1
                continue

            if result.passed:
                self.stdout.write(self.style.SUCCESS('  PASS: All checks passed'))
            else:
                failures += 1
                self.stdout.write(self.style.ERROR('  FAIL:'))
                for error in result.errors:
                    self.stdout.write(f'    ERROR: {error}')

            for warning in result.warnings:
                self.stdout.write(self.style.WARNING(f'    WARN:  {warning}'))

            tone = result.tone.stats
            if tone.get('total'):
                self.stdout.write(
                    f"    Tone: {tone['formal']} formal, {tone['informal']} informal, {tone['neutral']} neutral"
                )

        if failures:
            raise CommandError(f'{failures} file(s) failed validation')
