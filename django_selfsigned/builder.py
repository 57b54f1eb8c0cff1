import ipaddress
from datetime import datetime
from typing import NamedTuple

from cryptography import x509
from cryptography.x509.oid import NameOID, ObjectIdentifier

from django_selfsigned.conf import Defaults
from django_selfsigned.exceptions import EncodingError
from django_selfsigned.options import (
    GenerateOptions, Subject, SubjectAltName, SubjectAltNameType,
    resolve_validity)
from django_selfsigned.serial import random_serial_hex


class Attribute(NamedTuple):
    name: str
    value: str


class Extension(NamedTuple):
    name: str
    value: x509.ExtensionType
    critical: bool = False


class CertificateSpec(NamedTuple):
    """Everything needed to sign a certificate except the key"""
    serial: str
    not_before: datetime
    not_after: datetime
    attributes: list[Attribute]
    extensions: list[Extension]


# subject field -> attribute name, in the order they are emitted
SUBJECT_FIELDS = (
    ('common_name', 'commonName'),
    ('state', 'stateOrProvinceName'),
    ('country', 'countryName'),
    ('locality_name', 'localityName'),
    ('organization_name', 'organizationName'),
    ('organizational_unit_name', 'organizationalUnitName'),
)

ATTRIBUTE_OIDS = {
    'commonName': NameOID.COMMON_NAME,
    'stateOrProvinceName': NameOID.STATE_OR_PROVINCE_NAME,
    'countryName': NameOID.COUNTRY_NAME,
    'localityName': NameOID.LOCALITY_NAME,
    'organizationName': NameOID.ORGANIZATION_NAME,
    'organizationalUnitName': NameOID.ORGANIZATIONAL_UNIT_NAME,
}


def subject_to_attributes(subject: Subject | None) -> list[Attribute]:
    if not subject:
        return []
    attributes = []
    for field_name, attr_name in SUBJECT_FIELDS:
        value = getattr(subject, field_name)
        if value:
            attributes.append(Attribute(attr_name, value))
    return attributes


def attributes_to_name(attributes: list[Attribute]) -> x509.Name:
    try:
        return x509.Name([
            x509.NameAttribute(ATTRIBUTE_OIDS[attr.name], attr.value)
            for attr in attributes
        ])
    except ValueError as e:
        # e.g. countryName must be exactly two characters
        raise EncodingError(str(e)) from e


def _other_name(value: str) -> x509.OtherName:
    # "<dotted oid>;<hex encoded DER value>"
    type_id, _, der = value.partition(';')
    return x509.OtherName(ObjectIdentifier(type_id), bytes.fromhex(der))


def _ip_address(value: str) -> x509.IPAddress:
    if '/' in value:
        return x509.IPAddress(ipaddress.ip_network(value))
    return x509.IPAddress(ipaddress.ip_address(value))


GENERAL_NAME_FACTORIES = {
    SubjectAltNameType.OTHER_NAME: _other_name,
    SubjectAltNameType.RFC_822_NAME: x509.RFC822Name,
    SubjectAltNameType.DNS_NAME: x509.DNSName,
    SubjectAltNameType.DIRECTORY_NAME: lambda value: x509.DirectoryName(
        x509.Name.from_rfc4514_string(value)),
    SubjectAltNameType.URI: x509.UniformResourceIdentifier,
    SubjectAltNameType.IP_ADDRESS: _ip_address,
    SubjectAltNameType.REGISTERED_ID: lambda value: x509.RegisteredID(
        ObjectIdentifier(value)),
}


def to_general_name(alt_name: SubjectAltName) -> x509.GeneralName:
    factory = GENERAL_NAME_FACTORIES.get(alt_name.type)
    if factory is None:
        raise EncodingError(
            f"Unsupported subjectAltName type: {alt_name.type.name}")
    try:
        return factory(alt_name.value)
    except (ValueError, TypeError) as e:
        raise EncodingError(
            f"Can not encode {alt_name.type.name} "
            f"subjectAltName {alt_name.value!r}: {e}") from e


def build_extensions(subject_alt_names: list[SubjectAltName]):
    extensions = [
        Extension('basicConstraints', x509.BasicConstraints(
            ca=True, path_length=None)),
        Extension('keyUsage', x509.KeyUsage(
            digital_signature=True,
            content_commitment=True,  # nonRepudiation
            key_encipherment=True,
            data_encipherment=True,
            key_agreement=False,
            key_cert_sign=True,
            crl_sign=False,
            encipher_only=False,
            decipher_only=False)),
    ]
    if subject_alt_names:
        extensions.append(Extension(
            'subjectAltName', x509.SubjectAlternativeName(
                [to_general_name(n) for n in subject_alt_names])))
    return extensions


def build_certificate_spec(
        options: GenerateOptions, defaults: Defaults) -> CertificateSpec:
    not_before, not_after = resolve_validity(
        options.validity, defaults.validity_days)
    return CertificateSpec(
        serial=random_serial_hex(),
        not_before=not_before,
        not_after=not_after,
        attributes=subject_to_attributes(options.subject),
        extensions=build_extensions(options.subject_alt_names),
    )
