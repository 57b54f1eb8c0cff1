import asyncio
import logging
from concurrent.futures import Executor

from django_selfsigned import crypto, signals
from django_selfsigned.builder import build_certificate_spec
from django_selfsigned.conf import get_defaults
from django_selfsigned.options import (
    GenerateOptions, KeyAndCert, normalize_options, validate_options)

logger = logging.getLogger('django_selfsigned')


async def generate(
        opts: GenerateOptions | dict | str | list[str],
        key_size_in_bits: int | None = None,
        *,
        executor: Executor | None = None) -> KeyAndCert:
    """Generate RSA key pair and self-signed certificate for it.

    ``opts`` is either a common name, a list of DNS alternative names or
    full GenerateOptions. Key generation runs in ``executor`` (loop default
    executor if not set), so many certificates can be generated at once.
    """
    options = normalize_options(opts, key_size_in_bits)
    validate_options(options)
    defaults = get_defaults()
    bits = options.key_size_in_bits or defaults.key_size
    digest = crypto.get_digest_algorithm(
        options.digest_algorithm or defaults.digest_algorithm)
    spec = build_certificate_spec(options, defaults)

    signals.pre_generate.send(GenerateOptions, options=options)
    logger.debug("Generating %s bits RSA key", bits)
    loop = asyncio.get_running_loop()
    key = await loop.run_in_executor(
        executor, crypto.generate_key_pair, bits)
    cert = crypto.sign_certificate(spec, key, digest)
    result = KeyAndCert(
        private_key=crypto.private_key_to_pem(key),
        public_key=crypto.public_key_to_pem(key),
        certificate=crypto.certificate_to_pem(cert),
        fingerprint=crypto.fingerprint(crypto.certificate_to_der(cert)),
    )
    logger.info(
        "Generated self-signed certificate CN=%s SAN=%s (%s bits, %s) %s",
        options.common_name or '',
        ','.join(n.value for n in options.subject_alt_names),
        bits, digest.name, result.fingerprint)
    signals.certificate_generated.send(
        GenerateOptions, options=options, result=result)
    return result


def generate_sync(opts, key_size_in_bits=None) -> KeyAndCert:
    return asyncio.run(generate(opts, key_size_in_bits))


def save_cert_and_key(
        opts=None,
        key_size_in_bits=None,
        key_file="private.key",
        cert_file="selfsigned.crt") -> KeyAndCert:
    # can look at generated file using openssl:
    # openssl x509 -inform pem -in selfsigned.crt -noout -text
    if opts is None:
        opts = 'localhost'
    result = generate_sync(opts, key_size_in_bits)
    with open(cert_file, "wt", encoding="utf-8") as f:
        f.write(result.certificate)
    with open(key_file, "wt", encoding="utf-8") as f:
        f.write(result.private_key)
    return result
