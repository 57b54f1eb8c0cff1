from django.apps import AppConfig


class DjangoSelfSignedConfig(AppConfig):
    name = 'django_selfsigned'
    label = 'django_selfsigned'
    verbose_name = 'Django self-signed certificates'
