from django.core.management.base import BaseCommand

from messagefiles.loader import get_loader


class Command(BaseCommand):
    help = 'Reload locale property files into the message tables. With --check, only report whether files changed.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--check',
            action='store_true',
            help='Do not reload; exit 1 when any property file is newer than the last load.',
        )

    def handle(self, *args, **options):
        loader = get_loader()
        if options.get('check'):
            if loader.has_changed():
                self.stdout.write(self.style.WARNING('Message files changed since last load.'))
                raise SystemExit(1)
            self.stdout.write(self.style.SUCCESS('Message files are up to date.'))
            return

        report = loader.load()
        if not report.ran:
            self.stderr.write(self.style.ERROR('Message files were not loaded; check MESSAGEFILES_PATH.'))
            raise SystemExit(1)
        self.stdout.write(f'Files loaded: {report.files_loaded}')
        self.stdout.write(f'Messages loaded: {report.messages_loaded}')
        for locale in report.missing_locales:
            self.stdout.write(self.style.WARNING(f'Missing locale folder: {locale}'))
        for locale in report.skipped_locales:
            self.stdout.write(self.style.WARNING(f'Skipped locale (filesystem error): {locale}'))
        for path in report.files_failed:
            self.stdout.write(self.style.WARNING(f'Unreadable: {path}'))
        self.stdout.write(self.style.SUCCESS('Message files reloaded.'))
