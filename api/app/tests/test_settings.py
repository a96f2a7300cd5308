import os
from unittest import mock

from django.test import SimpleTestCase

from app import celery as celery_module
from app.settings import base


class LanguagesSettingTests(SimpleTestCase):
    def test_languages_carry_display_names(self):
        if 'LANGUAGES' in os.environ:
            self.skipTest('LANGUAGES overridden by environment')
        self.assertEqual(base.LANGUAGES, [('en', 'English'), ('fr', 'French'), ('de', 'German')])


class BeatScheduleTests(SimpleTestCase):
    def test_periodic_check_uses_configured_interval(self):
        sender = mock.Mock()
        with self.settings(MESSAGEFILES_CHECK_INTERVAL=45):
            celery_module.schedule_message_file_checks(sender)
        sender.add_periodic_task.assert_called_once()
        args, kwargs = sender.add_periodic_task.call_args
        self.assertEqual(args[0], 45.0)
        self.assertEqual(kwargs['name'], 'reconcile-message-files')
