"""
JSON Web Token decoding and HMAC signature verification.
"""

import json
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

from .base64_codec import decode_bytes
from .exceptions import CodecError, InvalidTokenError, UnsupportedAlgorithmError

_HMAC_ALGORITHMS = {
    'HS256': hashes.SHA256,
    'HS384': hashes.SHA384,
    'HS512': hashes.SHA512,
}


@dataclass
class DecodedToken:
    """The three parts of a JWT; header and payload pretty printed."""
    header: str
    payload: str
    signature: str

    @property
    def header_data(self) -> Dict[str, Any]:
        return json.loads(self.header)

    @property
    def payload_data(self) -> Any:
        return json.loads(self.payload)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _decode_segment(segment: str, name: str) -> str:
    try:
        raw = decode_bytes(segment, url_safe=True)
        data = json.loads(raw.decode('utf-8'))
    except (CodecError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidTokenError(f'Invalid JWT {name}: {e}')
    return json.dumps(data, indent=2, ensure_ascii=False)


def split_token(token: str):
    parts = token.strip().split('.')
    if len(parts) != 3:
        raise InvalidTokenError('Invalid JWT format. Expected 3 parts (header.payload.signature).')
    return parts


def decode_jwt(token: str) -> DecodedToken:
    """Decode header and payload of a JWT without verifying it."""
    header, payload, signature = split_token(token)
    return DecodedToken(
        header=_decode_segment(header, 'header'),
        payload=_decode_segment(payload, 'payload'),
        signature=signature,
    )


def _timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def token_info(decoded: DecodedToken, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Summarize the registered claims of a decoded token."""
    header = decoded.header_data
    if not isinstance(header, dict):
        header = {}
    payload = decoded.payload_data
    if not isinstance(payload, dict):
        payload = {}
    now = now or datetime.now(timezone.utc)

    info = {
        'algorithm': header.get('alg', 'Unknown'),
        'type': header.get('typ', 'Unknown'),
        'issuer': payload.get('iss', 'Not specified'),
        'subject': payload.get('sub', 'Not specified'),
        'expiration_status': 'No expiration',
        'expiration': None,
        'issued_at': None,
    }

    expires = _timestamp(payload.get('exp'))
    if expires:
        info['expiration_status'] = 'Expired' if now > expires else 'Active'
        info['expiration'] = expires.isoformat()

    issued = _timestamp(payload.get('iat'))
    if issued:
        info['issued_at'] = issued.isoformat()

    return info


def verify_signature(token: str, secret: str) -> bool:
    """Verify an HS256/HS384/HS512 signature with a shared secret."""
    header_segment, payload_segment, signature_segment = split_token(token)
    header = json.loads(_decode_segment(header_segment, 'header'))
    algorithm = header.get('alg', '') if isinstance(header, dict) else ''

    hash_cls = _HMAC_ALGORITHMS.get(str(algorithm).upper())
    if hash_cls is None:
        raise UnsupportedAlgorithmError(f'Signature verification is not supported for algorithm: {algorithm}')

    try:
        signature = decode_bytes(signature_segment, url_safe=True)
    except CodecError:
        return False

    mac = hmac.HMAC(secret.encode('utf-8'), hash_cls())
    mac.update(f'{header_segment}.{payload_segment}'.encode('utf-8'))
    try:
        mac.verify(signature)
    except InvalidSignature:
        return False
    return True
