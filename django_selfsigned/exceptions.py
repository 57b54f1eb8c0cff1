class SelfSignedError(Exception):
    """Base class for certificate generation errors"""


class InvalidIdentity(SelfSignedError, ValueError):
    """Neither a common name nor any subject alternative name was given"""

    def __init__(self, message=(
            "Either a commonName or subjectAltName is required")):
        super().__init__(message)


class InvalidDigestAlgorithm(SelfSignedError, ValueError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid digest algorithm: {name}")


class KeyGenerationError(SelfSignedError):
    """RSA key pair generation failed in the crypto library"""


class EncodingError(SelfSignedError):
    """Certificate fields could not be encoded"""
