import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'app.settings')

app = Celery('app')
# CELERY_* settings (broker, eager mode, beat schedule)
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()


@app.on_after_configure.connect
def schedule_message_file_checks(sender, **kwargs):
    # beat cadence comes from MESSAGEFILES_CHECK_INTERVAL
    from messagefiles.conf import DjangoSettingsSource, check_interval
    from messagefiles.tasks import reconcile_messages

    sender.add_periodic_task(
        check_interval(DjangoSettingsSource()),
        reconcile_messages.s(),
        name='reconcile-message-files',
    )
