import logging
from . import utils as Utils, key, ecdsa_key, errors

logger = logging.getLogger("shim_crypto")
logger.addHandler(logging.NullHandler())

ECDSAKey = ecdsa_key.ECDSAKey

RawKeyMaterial = key.RawKeyMaterial
KeyPair = key.KeyPair
KeyUtilOptions = key.KeyUtilOptions
MISSING = key.MISSING
generateKeyPair = key.generateKeyPair
importKey = key.importKey
fromCryptoKey = key.fromCryptoKey

ShimCryptoError = errors.ShimCryptoError
MissingKeyError = errors.MissingKeyError
UnsupportedKeyTypeError = errors.UnsupportedKeyTypeError
UnsupportedCurveError = errors.UnsupportedCurveError
MalformedKeyError = errors.MalformedKeyError

__all__ = [
    "Utils",
    "ECDSAKey",
    "RawKeyMaterial",
    "KeyPair",
    "KeyUtilOptions",
    "MISSING",
    "generateKeyPair",
    "importKey",
    "fromCryptoKey",
    "ShimCryptoError",
    "MissingKeyError",
    "UnsupportedKeyTypeError",
    "UnsupportedCurveError",
    "MalformedKeyError",
]
