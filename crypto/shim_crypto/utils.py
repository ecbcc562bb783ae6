from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Type
from asn1crypto import keys, pem
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from .errors import MalformedKeyError, UnsupportedCurveError

@dataclass(frozen=True)
class Curve:
    name: str
    cryptoCurve: Type[ec.EllipticCurve]
    byteLength: int

    @property
    def uncompressedLength(self) -> int:
        return 1 + 2 * self.byteLength

    @property
    def compressedLength(self) -> int:
        return 1 + self.byteLength

CURVES: Dict[str, Curve] = {
    "secp256r1": Curve("secp256r1", ec.SECP256R1, 32),
    "secp384r1": Curve("secp384r1", ec.SECP384R1, 48),
    "secp521r1": Curve("secp521r1", ec.SECP521R1, 66),
}

CURVE_ALIASES: Dict[str, str] = {
    "P-256": "secp256r1",
    "prime256v1": "secp256r1",
    "P-384": "secp384r1",
    "P-521": "secp521r1",
}

def get_curve(name: str) -> Curve:
    canonical = CURVE_ALIASES.get(name, name)
    if canonical not in CURVES:
        raise UnsupportedCurveError(f"Curve {name} is not supported")
    return CURVES[canonical]

def curve_from_point(point: bytes) -> Curve:
    for curve in CURVES.values():
        if len(point) in (curve.uncompressedLength, curve.compressedLength):
            return curve
    raise MalformedKeyError(f"Cannot infer the curve of a {len(point)} byte public point")

def decode_point(pubKeyHex: str, curveName: Optional[str] = None) -> Tuple[Curve, bytes]:
    try:
        point = bytes.fromhex(pubKeyHex)
    except (TypeError, ValueError) as e:
        raise MalformedKeyError("pubKeyHex is not a hex encoded EC point") from e

    curve = get_curve(curveName) if curveName else curve_from_point(point)
    try:
        publicKey = ec.EllipticCurvePublicKey.from_encoded_point(curve.cryptoCurve(), point)
    except ValueError as e:
        raise MalformedKeyError(f"pubKeyHex is not a valid point on {curve.name}") from e

    # Compressed input is normalised to the uncompressed form
    return curve, publicKey.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint
    )

def encode_public_key_info(curve: Curve, point: bytes) -> bytes:
    info = keys.PublicKeyInfo({
        "algorithm": keys.PublicKeyAlgorithm({
            "algorithm": "ec",
            "parameters": keys.ECDomainParameters(name="named", value=curve.name)
        }),
        "public_key": keys.ECPointBitString(point),
    })
    return info.dump()

def armor(der: bytes, label: str = "PUBLIC KEY") -> bytes:
    # 64 column base64 body, every line CRLF terminated
    return pem.armor(label, der).replace(b"\n", b"\r\n")
