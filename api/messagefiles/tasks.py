from celery import shared_task

from .loader import get_loader


@shared_task
def reconcile_messages():
    """Periodic change check; scheduled by beat every MESSAGEFILES_CHECK_INTERVAL seconds."""
    report = get_loader().on_change_check()
    if report is None:
        return {'reloaded': False}
    return {
        'reloaded': True,
        'files_loaded': report.files_loaded,
        'messages_loaded': report.messages_loaded,
        'files_failed': len(report.files_failed),
    }
