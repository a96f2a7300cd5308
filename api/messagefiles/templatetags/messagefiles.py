from django import template

from ..translation import t

register = template.Library()


@register.simple_tag
def message(key, locale=None, **kwargs):
    """``{% message "nav.home" %}`` / ``{% message "greeting" locale="fr" name=user.name %}``"""
    return t(key, locale, **kwargs)
