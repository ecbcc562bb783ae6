import logging
from collections.abc import Mapping
from dataclasses import dataclass
from logging import Logger
from typing import Any, Optional, Union
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from . import utils as Utils
from .errors import MalformedKeyError, UnsupportedKeyTypeError

logger = logging.getLogger("shim_crypto.key")

class _Missing:
    """Marks a property that is absent from the key material, as opposed to present with a None value."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

MISSING: Any = _Missing()

@dataclass(frozen=True)
class RawKeyMaterial:
    type: Any = MISSING
    curveName: Any = MISSING
    prvKeyHex: Any = MISSING
    pubKeyHex: Any = MISSING

@dataclass(frozen=True)
class KeyPair:
    prvKeyObj: RawKeyMaterial
    pubKeyObj: RawKeyMaterial

@dataclass
class KeyUtilOptions:
    logger: Optional[Logger] = logger
    defaultCurve: str = "secp256r1"

def getProperty(material: Any, name: str) -> Any:
    if isinstance(material, Mapping):
        return material.get(name, MISSING)
    return getattr(material, name, MISSING)

def fromCryptoKey(cryptoKey: Union[ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey]) -> RawKeyMaterial:
    if isinstance(cryptoKey, ec.EllipticCurvePrivateKey):
        publicKey = cryptoKey.public_key()
    elif isinstance(cryptoKey, ec.EllipticCurvePublicKey):
        publicKey = cryptoKey
    else:
        raise UnsupportedKeyTypeError(f"Only EC keys are supported, got {type(cryptoKey).__name__}")

    curve = Utils.get_curve(cryptoKey.curve.name)
    prvKeyHex: Optional[str] = None
    if isinstance(cryptoKey, ec.EllipticCurvePrivateKey):
        prvKeyHex = format(cryptoKey.private_numbers().private_value, f"0{2 * curve.byteLength}x")

    pubKeyHex = publicKey.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint
    ).hex()
    return RawKeyMaterial(type="EC", curveName=curve.name, prvKeyHex=prvKeyHex, pubKeyHex=pubKeyHex)

def generateKeyPair(curveName: Optional[str] = None, options: KeyUtilOptions = KeyUtilOptions()) -> KeyPair:
    curve = Utils.get_curve(curveName or options.defaultCurve)
    privateKey = ec.generate_private_key(curve.cryptoCurve())
    if options.logger is not None: options.logger.debug(f"Generated {curve.name} key pair")
    return KeyPair(fromCryptoKey(privateKey), fromCryptoKey(privateKey.public_key()))

def importKey(data: Union[str, bytes], password: Optional[bytes] = None, options: KeyUtilOptions = KeyUtilOptions()) -> RawKeyMaterial:
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        if b"PRIVATE KEY-----" in data:
            cryptoKey: Any = serialization.load_pem_private_key(data, password=password)
        else:
            cryptoKey = serialization.load_pem_public_key(data)
    except (TypeError, ValueError) as e:
        raise MalformedKeyError(f"Unable to load PEM key: {e}") from e

    material = fromCryptoKey(cryptoKey)
    if options.logger is not None: options.logger.debug(f"Imported {material.curveName} {'private' if material.prvKeyHex else 'public'} key")
    return material
