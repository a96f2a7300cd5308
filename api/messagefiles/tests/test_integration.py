import os
import tempfile
from io import StringIO
from pathlib import Path

from django.apps import apps
from django.core.management import call_command
from django.test import Client, SimpleTestCase, override_settings

from messagefiles.loader import LocaleMessageLoader, get_loader, set_loader
from messagefiles.store import InMemoryMessageStore
from messagefiles.tasks import reconcile_messages


class HostAdapterTestCase(SimpleTestCase):
    """Adapters talk to the process-wide loader; swap in one bound to a private store."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / 'en').mkdir()
        self.nav = self.root / 'en' / 'nav.properties'
        self.nav.write_text('home=Home\n', encoding='utf-8')
        os.utime(self.nav, (900.0, 900.0))
        self.store = InMemoryMessageStore()
        self.clock_now = 1000.0
        self.loader = LocaleMessageLoader(store=self.store, clock=lambda: self.clock_now)
        set_loader(self.loader)
        self.settings_override = override_settings(
            MESSAGEFILES_PATH=str(self.root),
            MESSAGEFILES_DEFAULT_LOCALE='en',
            LANGUAGES=[('en', 'English')],
        )
        self.settings_override.enable()

    def tearDown(self):
        self.settings_override.disable()
        set_loader(None)
        self._tmp.cleanup()

    def touch(self, content: str, mtime: float) -> None:
        self.nav.write_text(content, encoding='utf-8')
        os.utime(self.nav, (mtime, mtime))


class AppConfigTests(HostAdapterTestCase):
    def test_ready_runs_initial_load(self):
        apps.get_app_config('messagefiles').ready()
        self.assertEqual(self.store.get('en'), {'nav.home': 'Home'})
        self.assertEqual(self.store.defaults, {'nav.home': 'Home'})
        self.assertEqual(self.loader.last_loaded, 1000.0)

    def test_get_loader_returns_installed_loader(self):
        self.assertIs(get_loader(), self.loader)


class MiddlewareTests(HostAdapterTestCase):
    @override_settings(MESSAGEFILES_WATCH=True)
    def test_request_reloads_changed_files(self):
        self.loader.load()
        self.touch('home=Start\n', 1100.0)
        self.clock_now = 1200.0
        resp = Client().get('/healthz')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.store.get('en'), {'nav.home': 'Start'})
        self.assertFalse(self.loader.has_changed())

    @override_settings(MESSAGEFILES_WATCH=False)
    def test_watch_disabled_skips_check(self):
        self.loader.load()
        self.touch('home=Start\n', 1100.0)
        Client().get('/healthz')
        self.assertEqual(self.store.get('en'), {'nav.home': 'Home'})


class ReloadCommandTests(HostAdapterTestCase):
    def test_reload_prints_report(self):
        out = StringIO()
        call_command('reload_messages', stdout=out)
        self.assertIn('Files loaded: 1', out.getvalue())
        self.assertIn('Messages loaded: 1', out.getvalue())
        self.assertEqual(self.store.get('en'), {'nav.home': 'Home'})

    def test_check_exits_non_zero_when_stale(self):
        self.loader.load()
        self.touch('home=Start\n', 1100.0)
        with self.assertRaises(SystemExit) as ctx:
            call_command('reload_messages', '--check', stdout=StringIO())
        self.assertEqual(ctx.exception.code, 1)
        self.assertEqual(self.store.get('en'), {'nav.home': 'Home'})

    def test_check_up_to_date(self):
        self.loader.load()
        out = StringIO()
        call_command('reload_messages', '--check', stdout=out)
        self.assertIn('up to date', out.getvalue())

    @override_settings(MESSAGEFILES_PATH=None)
    def test_reload_fails_without_path(self):
        with self.assertRaises(SystemExit) as ctx:
            call_command('reload_messages', stdout=StringIO(), stderr=StringIO())
        self.assertEqual(ctx.exception.code, 1)


class ReconcileTaskTests(HostAdapterTestCase):
    def test_task_reloads_only_when_changed(self):
        self.loader.load()
        self.assertEqual(reconcile_messages(), {'reloaded': False})
        self.touch('home=Start\nabout=About\n', 1100.0)
        self.clock_now = 1200.0
        result = reconcile_messages()
        self.assertTrue(result['reloaded'])
        self.assertEqual(result['messages_loaded'], 2)
        self.assertEqual(self.store.get('en'), {'nav.home': 'Start', 'nav.about': 'About'})
