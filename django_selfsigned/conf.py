from typing import NamedTuple

from django.conf import settings

DEFAULT_KEY_SIZE = 2048
DEFAULT_DIGEST_ALGORITHM = "sha256"
DEFAULT_VALIDITY_DAYS = 10 * 365


class Defaults(NamedTuple):
    key_size: int = DEFAULT_KEY_SIZE
    digest_algorithm: str = DEFAULT_DIGEST_ALGORITHM
    validity_days: int = DEFAULT_VALIDITY_DAYS


def get_defaults() -> Defaults:
    """Policy defaults, overridable by the SELF_SIGNED django setting"""
    if not settings.configured:
        return Defaults()
    conf = getattr(settings, 'SELF_SIGNED', {})
    return Defaults(
        key_size=conf.get('KEY_SIZE', DEFAULT_KEY_SIZE),
        digest_algorithm=conf.get(
            'DIGEST_ALGORITHM', DEFAULT_DIGEST_ALGORITHM),
        validity_days=conf.get('VALIDITY_DAYS', DEFAULT_VALIDITY_DAYS),
    )
