"""App settings with defaults.

Override in the Django settings module:

    TICKETS_VIP_UPGRADE_PHRASES = ["meet and greet", "backstage pass"]
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_VIP_UPGRADE_PHRASES = ("meet and greet", "meet-and-greet")


def get_vip_upgrade_phrases() -> tuple[str, ...]:
    """Return the lower-cased phrases that upgrade a request to VIP.

    Raises:
        ImproperlyConfigured: If TICKETS_VIP_UPGRADE_PHRASES is a single string.
    """
    if not settings.configured:
        return DEFAULT_VIP_UPGRADE_PHRASES
    phrases = getattr(settings, "TICKETS_VIP_UPGRADE_PHRASES", DEFAULT_VIP_UPGRADE_PHRASES)
    if isinstance(phrases, str):
        raise ImproperlyConfigured("TICKETS_VIP_UPGRADE_PHRASES must be a list of phrases, not a string")
    return tuple(phrase.lower() for phrase in phrases)
