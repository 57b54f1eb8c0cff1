import os

import django
from django.conf import ENVIRONMENT_VARIABLE

import pytest

from tests import empty_settings


def _signal_fixture(signal):
    signal_calls = []

    def receiver(sender, **kwargs):
        signal_calls.append(dict(kwargs, sender=sender))

    signal.connect(receiver)
    try:
        yield signal_calls
    finally:
        signal.disconnect(receiver)


@pytest.fixture(name="pre_generate_signal")
def pre_generate_signal_fixture():
    # pylint: disable=import-outside-toplevel
    from django_selfsigned.signals import pre_generate

    yield from _signal_fixture(pre_generate)


@pytest.fixture(name="certificate_generated_signal")
def certificate_generated_signal_fixture():
    # pylint: disable=import-outside-toplevel
    from django_selfsigned.signals import certificate_generated

    yield from _signal_fixture(certificate_generated)


@pytest.hookimpl(trylast=True)
def pytest_sessionstart(session):
    os.environ[ENVIRONMENT_VARIABLE] = empty_settings.__name__
    django.setup()
