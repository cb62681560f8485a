"""
Tests for JWT decoding, claim summaries and HMAC signature verification.
"""

import base64
import hashlib
import hmac
import json
import os
import sys
from datetime import datetime, timezone

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from toolkit.exceptions import InvalidTokenError, UnsupportedAlgorithmError
from toolkit.jwt_decoder import decode_jwt, split_token, token_info, verify_signature


def _segment(data):
    raw = json.dumps(data, separators=(',', ':')).encode('utf-8')
    return base64.urlsafe_b64encode(raw).decode('ascii').rstrip('=')


def make_token(payload, secret='secret', alg='HS256', digest=hashlib.sha256):
    signing_input = f"{_segment({'alg': alg, 'typ': 'JWT'})}.{_segment(payload)}"
    signature = hmac.new(secret.encode('utf-8'), signing_input.encode('utf-8'), digest).digest()
    return f"{signing_input}.{base64.urlsafe_b64encode(signature).decode('ascii').rstrip('=')}"


# Well known example token from jwt.io, signed with 'your-256-bit-secret'
JWT_IO_TOKEN = (
    'eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.'
    'eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ.'
    'SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c'
)


class TestDecode:

    def test_decode_known_token(self):
        decoded = decode_jwt(JWT_IO_TOKEN)
        assert decoded.header_data == {'alg': 'HS256', 'typ': 'JWT'}
        assert decoded.payload_data == {'sub': '1234567890', 'name': 'John Doe', 'iat': 1516239022}
        assert decoded.signature == 'SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c'

    def test_header_is_pretty_printed(self):
        assert decode_jwt(JWT_IO_TOKEN).header == '{\n  "alg": "HS256",\n  "typ": "JWT"\n}'

    def test_surrounding_whitespace(self):
        assert decode_jwt(f'  {JWT_IO_TOKEN}\n').payload_data['name'] == 'John Doe'

    @pytest.mark.parametrize('token', ['abc', 'a.b', 'a.b.c.d'])
    def test_wrong_part_count(self, token):
        with pytest.raises(InvalidTokenError, match='Expected 3 parts'):
            split_token(token)

    def test_invalid_header(self):
        with pytest.raises(InvalidTokenError, match='Invalid JWT header'):
            decode_jwt('bm90IGpzb24.e30.sig')

    def test_to_dict(self):
        assert set(decode_jwt(JWT_IO_TOKEN).to_dict()) == {'header', 'payload', 'signature'}


class TestTokenInfo:

    def test_claims(self):
        info = token_info(decode_jwt(JWT_IO_TOKEN))
        assert info['algorithm'] == 'HS256'
        assert info['type'] == 'JWT'
        assert info['subject'] == '1234567890'
        assert info['issuer'] == 'Not specified'
        assert info['expiration_status'] == 'No expiration'
        assert info['issued_at'] == '2018-01-18T01:30:22+00:00'

    def test_expired(self):
        now = datetime(2030, 1, 1, tzinfo=timezone.utc)
        info = token_info(decode_jwt(make_token({'exp': 1700000000})), now=now)
        assert info['expiration_status'] == 'Expired'
        assert info['expiration'] == '2023-11-14T22:13:20+00:00'

    def test_active(self):
        now = datetime(2020, 1, 1, tzinfo=timezone.utc)
        info = token_info(decode_jwt(make_token({'exp': 1700000000, 'iss': 'auth'})), now=now)
        assert info['expiration_status'] == 'Active'
        assert info['issuer'] == 'auth'

    def test_non_object_payload(self):
        token = f"{_segment({'alg': 'none'})}.{_segment([1, 2])}."
        assert token_info(decode_jwt(token))['subject'] == 'Not specified'


class TestVerifySignature:

    def test_known_token(self):
        assert verify_signature(JWT_IO_TOKEN, 'your-256-bit-secret') is True

    def test_wrong_secret(self):
        assert verify_signature(JWT_IO_TOKEN, 'not-the-secret') is False

    @pytest.mark.parametrize('alg,digest', [('HS384', hashlib.sha384), ('HS512', hashlib.sha512)])
    def test_other_hmac_algorithms(self, alg, digest):
        token = make_token({'sub': 'x'}, secret='k', alg=alg, digest=digest)
        assert verify_signature(token, 'k') is True

    def test_tampered_payload(self):
        header, _, signature = make_token({'admin': False}).split('.')
        forged = f"{header}.{_segment({'admin': True})}.{signature}"
        assert verify_signature(forged, 'secret') is False

    def test_unsupported_algorithm(self):
        token = make_token({'sub': 'x'}, alg='RS256')
        with pytest.raises(UnsupportedAlgorithmError):
            verify_signature(token, 'secret')
