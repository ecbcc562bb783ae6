import logging
from typing import Any, Tuple
from cryptography.hazmat.primitives import hashes
from . import utils as Utils
from .errors import MalformedKeyError, MissingKeyError, UnsupportedKeyTypeError
from .key import MISSING, RawKeyMaterial, getProperty

logger = logging.getLogger("shim_crypto.ecdsa_key")

KEY_UTIL_ONLY = "This key implementation only supports keys generated by the shim_crypto key utility."

class ECDSAKey:
    """
    EC key backed by key utility material: an object or mapping with "type",
    "prvKeyHex" and "pubKeyHex" properties, and optionally "curveName".

    "prvKeyHex" has to be present even for public keys, where its value is None.
    The material is kept by reference and must not be changed afterwards.
    """

    def __init__(self, key: Any = None):
        if key is None:
            raise MissingKeyError("The key parameter is required by this key class implementation, whether this instance is for the public key or private key")
        keyType = getProperty(key, "type")
        if keyType != "EC":
            logger.debug(f"Rejected key material of type {keyType!r}")
            raise UnsupportedKeyTypeError(f'{KEY_UTIL_ONLY} It must have a "type" property of value "EC"')
        prvKeyHex = getProperty(key, "prvKeyHex")
        if prvKeyHex is MISSING:
            raise MalformedKeyError(f'{KEY_UTIL_ONLY} It must have a "prvKeyHex" property')
        pubKeyHex = getProperty(key, "pubKeyHex")
        if pubKeyHex is MISSING or pubKeyHex is None:
            raise MalformedKeyError(f'{KEY_UTIL_ONLY} It must have a "pubKeyHex" property')

        self._key = key
        self._pubKeyHex: str = pubKeyHex
        self._isPrivate: bool = prvKeyHex is not None

    def getKeyMaterial(self) -> Any:
        return self._key

    def isSymmetric(self) -> bool:
        return False

    def isPrivate(self) -> bool:
        return self._isPrivate

    def getPublicKey(self) -> "ECDSAKey":
        return ECDSAKey(RawKeyMaterial(
            type="EC",
            curveName=getProperty(self._key, "curveName"),
            prvKeyHex=None,
            pubKeyHex=self._pubKeyHex
        ))

    def _decodePublicPoint(self) -> Tuple[Utils.Curve, bytes]:
        curveName = getProperty(self._key, "curveName")
        return Utils.decode_point(self._pubKeyHex, curveName if curveName else None)

    def getCurveName(self) -> str:
        curve, _ = self._decodePublicPoint()
        return curve.name

    def getSKI(self) -> str:
        _, point = self._decodePublicPoint()
        hash = hashes.Hash(hashes.SHA256())
        hash.update(point)
        return hash.finalize().hex()

    def toBytes(self) -> bytes:
        # Only the public part is ever exported, also for private keys
        curve, point = self._decodePublicPoint()
        return Utils.armor(Utils.encode_public_key_info(curve, point))
