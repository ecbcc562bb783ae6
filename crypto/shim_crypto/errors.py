class ShimCryptoError(Exception):
    pass

class MissingKeyError(ShimCryptoError):
    pass

class UnsupportedKeyTypeError(ShimCryptoError):
    pass

class UnsupportedCurveError(ShimCryptoError):
    pass

class MalformedKeyError(ShimCryptoError):
    """Raised when the key material lacks a required property or its public point cannot be decoded."""
    pass
