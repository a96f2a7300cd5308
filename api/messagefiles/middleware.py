from django.conf import settings
from django.utils.deprecation import MiddlewareMixin

from .conf import WATCH_KEY, as_bool, setting_name
from .loader import get_loader


class MessageFilesReloadMiddleware(MiddlewareMixin):
    """Re-scan locale property files before a request when any of them changed.

    Active when MESSAGEFILES_WATCH is on (defaults to DEBUG). Production
    deployments use the periodic ``reconcile_messages`` task instead.
    """

    def process_request(self, request):
        watch = getattr(settings, setting_name(WATCH_KEY), None)
        if as_bool(watch, default=settings.DEBUG):
            get_loader().on_change_check()
        return None
