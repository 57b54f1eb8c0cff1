from django.core.management.base import BaseCommand, CommandError

from django_selfsigned import gen_cert
from django_selfsigned.exceptions import SelfSignedError
from django_selfsigned.options import (
    DIGEST_ALGORITHM_NAMES, Validity, normalize_options)


class Command(BaseCommand):
    help = "Generate RSA private key and self-signed certificate"

    def handle(self, *args, **options):
        names = options['names'] or ['localhost']
        opts = normalize_options(
            names[0] if len(names) == 1 else names, options['key_size'])
        opts.digest_algorithm = options['digest']
        if options['days']:
            opts.validity = Validity(days=options['days'])
        kwargs = {}
        for name in ('key_file', 'cert_file'):
            if options[name]:
                kwargs[name] = options[name]
        try:
            result = gen_cert.save_cert_and_key(opts, **kwargs)
        except SelfSignedError as e:
            raise CommandError(str(e)) from e
        self.stdout.write(
            f"Written {kwargs.get('key_file', 'private.key')} and "
            f"{kwargs.get('cert_file', 'selfsigned.crt')}")
        self.stdout.write(f"Fingerprint (SHA-1): {result.fingerprint}")

    def add_arguments(self, parser):
        parser.add_argument(
            "names",
            nargs="*",
            help="Common name, or several DNS names for subjectAltName. "
                 "Defaults to localhost",
        )
        self.add_base_argument(
            parser,
            "--key_size",
            type=int,
            help="RSA key size in bits",
        )
        self.add_base_argument(
            parser,
            "--digest",
            choices=DIGEST_ALGORITHM_NAMES,
            help="Certificate signature digest algorithm",
        )
        self.add_base_argument(
            parser,
            "--days",
            type=int,
            help="Number of days certificate is valid for",
        )
        self.add_base_argument(
            parser,
            "--key_file",
            help="File name to store certificate private key",
        )
        self.add_base_argument(
            parser,
            "--cert_file",
            help="File name to store created self-signed certificate",
        )
