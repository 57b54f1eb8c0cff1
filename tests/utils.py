from cryptography import x509
from cryptography.x509.oid import NameOID

from django_selfsigned.options import KeyAndCert


def load_cert(key_and_cert: KeyAndCert) -> x509.Certificate:
    return x509.load_pem_x509_certificate(
        key_and_cert.certificate.encode('utf-8'))


def common_names(key_and_cert: KeyAndCert) -> list[str]:
    cert = load_cert(key_and_cert)
    return [
        a.value for a in
        cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    ]


def alt_names(key_and_cert: KeyAndCert) -> list[x509.GeneralName]:
    cert = load_cert(key_and_cert)
    extension = cert.extensions.get_extension_for_class(
        x509.SubjectAlternativeName)
    return list(extension.value)


def dns_names(key_and_cert: KeyAndCert) -> list[str]:
    return [
        n.value for n in alt_names(key_and_cert)
        if isinstance(n, x509.DNSName)
    ]
