from flask import Blueprint, request, jsonify, current_app

from toolkit.exceptions import ToolError
from toolkit.hash_generator import HASH_ALGORITHMS, generate_all_hashes, generate_hash, normalize_algorithm
from toolkit.lorem_ipsum import generate_lorem_ipsum
from toolkit.uuid_generator import MAX_UUID_COUNT, generate_uuids

generators_bp = Blueprint('generators', __name__)


def _flag(name, default):
    """Read a boolean query parameter."""
    value = request.args.get(name)
    if value is None:
        return default
    return value.lower() in ('1', 'true', 'yes', 'on')


@generators_bp.route('/api/uuid', methods=['GET'])
def api_uuid():
    """Generate a batch of UUIDs"""
    try:
        uuids = generate_uuids(
            version=request.args.get('version', 'v4'),
            count=request.args.get('count', 1),
            uppercase=_flag('uppercase', False),
            hyphens=_flag('hyphens', True),
            braces=_flag('braces', False),
            limit=current_app.config.get('MAX_UUID_COUNT', MAX_UUID_COUNT)
        )
        return jsonify({'success': True, 'uuids': uuids})

    except Exception as e:
        current_app.logger.exception('UUID generation failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@generators_bp.route('/api/lorem-ipsum', methods=['POST'])
def api_lorem_ipsum():
    """Generate placeholder text"""
    try:
        data = request.get_json(silent=True) or {}
        text = generate_lorem_ipsum(
            kind=data.get('type', 'paragraphs'),
            count=data.get('count', 3),
            include_html=bool(data.get('includeHtml', False))
        )
        return jsonify({'success': True, 'text': text})

    except ToolError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('Lorem ipsum generation failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@generators_bp.route('/api/hash', methods=['POST'])
def api_hash():
    """Hash text with one or all supported algorithms"""
    try:
        data = request.get_json(silent=True)
        if not data or 'text' not in data or not isinstance(data['text'], str):
            return jsonify({'success': False, 'error': 'No text provided'}), 400

        algorithm = data.get('algorithm')
        if algorithm:
            algorithm = normalize_algorithm(algorithm)
            return jsonify({
                'success': True,
                'algorithm': algorithm,
                'hash': generate_hash(data['text'], algorithm)
            })

        return jsonify({
            'success': True,
            'hashes': generate_all_hashes(data['text']),
            'algorithms': HASH_ALGORITHMS
        })

    except ToolError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('Hash generation failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
