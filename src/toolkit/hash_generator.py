"""
Message digest generation for the hash generator tool.
"""

import hashlib
from typing import Dict, Union

from .exceptions import UnsupportedAlgorithmError

HASH_ALGORITHMS = [
    {'id': 'md5', 'name': 'MD5', 'length': 32},
    {'id': 'sha-1', 'name': 'SHA-1', 'length': 40},
    {'id': 'sha-256', 'name': 'SHA-256', 'length': 64},
    {'id': 'sha-384', 'name': 'SHA-384', 'length': 96},
    {'id': 'sha-512', 'name': 'SHA-512', 'length': 128},
]

_HASHLIB_NAMES = {
    'md5': 'md5',
    'sha-1': 'sha1',
    'sha-256': 'sha256',
    'sha-384': 'sha384',
    'sha-512': 'sha512',
}


def normalize_algorithm(algorithm: str) -> str:
    """Map 'SHA256', 'sha_256', 'SHA-256' etc. to the canonical id."""
    key = algorithm.strip().lower().replace('_', '-')
    if key.startswith('sha') and '-' not in key:
        key = f'sha-{key[3:]}'
    if key not in _HASHLIB_NAMES:
        raise UnsupportedAlgorithmError(f'Unsupported hash algorithm: {algorithm}')
    return key


def generate_hash(data: Union[str, bytes], algorithm: str = 'sha-256') -> str:
    """Return the hex digest of data (text is UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode('utf-8')
    digest = hashlib.new(_HASHLIB_NAMES[normalize_algorithm(algorithm)])
    digest.update(data)
    return digest.hexdigest()


def generate_all_hashes(data: Union[str, bytes]) -> Dict[str, str]:
    """Hex digests for every supported algorithm."""
    return {algo['id']: generate_hash(data, algo['id']) for algo in HASH_ALGORITHMS}
