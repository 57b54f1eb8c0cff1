import enum
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import NamedTuple

from django_selfsigned.exceptions import (
    InvalidDigestAlgorithm, InvalidIdentity)

DIGEST_ALGORITHM_NAMES = ('sha1', 'sha256')


class SubjectAltNameType(enum.IntEnum):
    """GeneralName choices, numbered as their ASN.1 context tags"""
    OTHER_NAME = 0
    RFC_822_NAME = 1
    DNS_NAME = 2
    X400_ADDRESS = 3
    DIRECTORY_NAME = 4
    EDI_PARTY_NAME = 5
    URI = 6
    IP_ADDRESS = 7
    REGISTERED_ID = 8


@dataclass
class Subject:
    common_name: str | None = None
    state: str | None = None
    country: str | None = None
    locality_name: str | None = None
    organization_name: str | None = None
    organizational_unit_name: str | None = None


@dataclass
class SubjectAltName:
    type: SubjectAltNameType
    value: str

    def __post_init__(self):
        self.type = SubjectAltNameType(self.type)


@dataclass
class Validity:
    not_before: datetime | None = None
    days: int | None = None


@dataclass
class GenerateOptions:
    key_size_in_bits: int | None = None
    digest_algorithm: str | None = None
    validity: Validity | None = None
    subject: Subject | None = None
    subject_alt_names: list[SubjectAltName] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'GenerateOptions':
        """Build options from a plain mapping with the same field names.

        ``subject`` and ``validity`` may be given as mappings,
        ``subject_alt_names`` items as mappings or ``(type, value)`` pairs.
        """
        data = dict(data)
        subject = data.pop('subject', None)
        if isinstance(subject, dict):
            subject = Subject(**subject)
        validity = data.pop('validity', None)
        if isinstance(validity, dict):
            validity = Validity(**validity)
        alt_names = []
        for alt_name in data.pop('subject_alt_names', None) or []:
            if isinstance(alt_name, dict):
                alt_name = SubjectAltName(**alt_name)
            elif not isinstance(alt_name, SubjectAltName):
                alt_name = SubjectAltName(*alt_name)
            alt_names.append(alt_name)
        return cls(
            subject=subject, validity=validity,
            subject_alt_names=alt_names, **data)

    @property
    def common_name(self):
        return self.subject.common_name if self.subject else None


class KeyAndCert(NamedTuple):
    private_key: str
    public_key: str
    certificate: str
    fingerprint: str


def dns_names(names) -> list[SubjectAltName]:
    return [SubjectAltName(SubjectAltNameType.DNS_NAME, n) for n in names]


def normalize_options(opts, key_size_in_bits=None) -> GenerateOptions:
    """Collapse the accepted call shapes into one GenerateOptions.

    * a common name string: used as subject CN and as the only DNS alt name
    * a list of names: each one becomes a DNS alt name, no CN is set
    * a GenerateOptions (or a dict of its fields): taken as is

    ``key_size_in_bits`` only applies to the first two shapes.
    """
    if isinstance(opts, str):
        return GenerateOptions(
            key_size_in_bits=key_size_in_bits,
            subject=Subject(common_name=opts),
            subject_alt_names=dns_names([opts]))
    if isinstance(opts, (list, tuple)):
        return GenerateOptions(
            key_size_in_bits=key_size_in_bits,
            subject_alt_names=dns_names(opts))
    if isinstance(opts, GenerateOptions):
        return opts
    if isinstance(opts, dict):
        return GenerateOptions.from_dict(opts)
    raise TypeError(
        f"Expected a name, a list of names or GenerateOptions, "
        f"got {type(opts).__name__}")


def validate_options(options: GenerateOptions):
    if options.digest_algorithm is not None and \
            options.digest_algorithm not in DIGEST_ALGORITHM_NAMES:
        raise InvalidDigestAlgorithm(options.digest_algorithm)
    if not options.common_name and not options.subject_alt_names:
        raise InvalidIdentity()


def resolve_validity(validity: Validity | None, default_days: int, now=None):
    """Return (not_before, not_after) as aware UTC datetimes"""
    validity = validity or Validity()
    not_before = validity.not_before or now or datetime.now(timezone.utc)
    if not_before.tzinfo is None:
        not_before = not_before.replace(tzinfo=timezone.utc)
    days = validity.days or default_days
    return not_before, not_before + timedelta(days=days)
