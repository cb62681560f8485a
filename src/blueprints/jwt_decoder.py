from flask import Blueprint, request, jsonify, current_app

from toolkit.exceptions import ToolError
from toolkit.jwt_decoder import decode_jwt, token_info, verify_signature

jwt_bp = Blueprint('jwt', __name__)


@jwt_bp.route('/api/jwt/decode', methods=['POST'])
def api_jwt_decode():
    """Decode a JWT and optionally verify its HMAC signature"""
    try:
        data = request.get_json(silent=True)
        if not data or not str(data.get('token', '')).strip():
            return jsonify({'success': False, 'error': 'No JWT provided'}), 400

        token = str(data['token']).strip()
        decoded = decode_jwt(token)
        response = {
            'success': True,
            **decoded.to_dict(),
            'info': token_info(decoded),
            'verified': None
        }

        secret = data.get('secret')
        if secret:
            response['verified'] = verify_signature(token, str(secret))

        return jsonify(response)

    except ToolError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('JWT decoding failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
