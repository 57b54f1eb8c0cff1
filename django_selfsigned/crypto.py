from OpenSSL import crypto
from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from django_selfsigned.builder import CertificateSpec, attributes_to_name
from django_selfsigned.exceptions import (
    EncodingError, InvalidDigestAlgorithm, KeyGenerationError)
from django_selfsigned.options import DIGEST_ALGORITHM_NAMES

# 'sha1' -> hashes.SHA1 etc.
DIGEST_ALGORITHMS = {
    name: getattr(hashes, name.upper()) for name in DIGEST_ALGORITHM_NAMES
}


def generate_key_pair(bits: int) -> crypto.PKey:
    key = crypto.PKey()
    try:
        key.generate_key(crypto.TYPE_RSA, bits)
    except (TypeError, ValueError, crypto.Error) as e:
        raise KeyGenerationError(
            f"Can not generate {bits} bits RSA key: {e}") from e
    return key


def get_digest_algorithm(name='sha256') -> hashes.HashAlgorithm:
    try:
        return DIGEST_ALGORITHMS[name]()
    except KeyError:
        raise InvalidDigestAlgorithm(name) from None


def sign_certificate(
        spec: CertificateSpec,
        key: crypto.PKey,
        digest: hashes.HashAlgorithm) -> crypto.X509:
    """Sign certificate fields with its own key, issuer is the subject"""
    private_key = key.to_cryptography_key()
    name = attributes_to_name(spec.attributes)
    try:
        builder = x509.CertificateBuilder() \
            .serial_number(int(spec.serial, 16)) \
            .not_valid_before(spec.not_before) \
            .not_valid_after(spec.not_after) \
            .subject_name(name) \
            .issuer_name(name) \
            .public_key(private_key.public_key())
        for extension in spec.extensions:
            builder = builder.add_extension(
                extension.value, critical=extension.critical)
        try:
            return crypto.X509.from_cryptography(
                builder.sign(private_key, digest))
        except UnsupportedAlgorithm:
            # cryptography refuses sha1 signatures, OpenSSL still makes them
            cert = crypto.X509.from_cryptography(
                builder.sign(private_key, hashes.SHA256()))
            cert.sign(key, digest.name)
            return cert
    except (ValueError, UnsupportedAlgorithm, crypto.Error) as e:
        raise EncodingError(str(e)) from e


def certificate_to_der(cert: crypto.X509) -> bytes:
    return crypto.dump_certificate(crypto.FILETYPE_ASN1, cert)


def certificate_to_pem(cert: crypto.X509) -> str:
    return crypto.dump_certificate(crypto.FILETYPE_PEM, cert).decode("utf-8")


def private_key_to_pem(key: crypto.PKey) -> str:
    return crypto.dump_privatekey(crypto.FILETYPE_PEM, key).decode("utf-8")


def public_key_to_pem(key: crypto.PKey) -> str:
    return crypto.dump_publickey(crypto.FILETYPE_PEM, key).decode("utf-8")


def fingerprint(der: bytes) -> str:
    """SHA-1 of DER bytes as colon separated lowercase hex octets"""
    sha1 = hashes.Hash(hashes.SHA1())
    sha1.update(der)
    return sha1.finalize().hex(':')
