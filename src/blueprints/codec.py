from flask import Blueprint, request, jsonify, current_app

from toolkit import base64_codec, url_codec
from toolkit.exceptions import ToolError
from toolkit.image_codec import MAX_IMAGE_BYTES, encode_image, to_data_url

codec_bp = Blueprint('codec', __name__)

MODES = ('encode', 'decode')


@codec_bp.route('/api/base64', methods=['POST'])
def api_base64():
    """Encode or decode Base64 text"""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('text'), str) or not data['text']:
            return jsonify({'success': False, 'error': 'No text provided'}), 400

        mode = data.get('mode')
        if mode not in MODES:
            return jsonify({'success': False, 'error': 'Invalid mode'}), 400

        url_safe = bool(data.get('urlSafe', False))
        if mode == 'encode':
            result = base64_codec.encode(data['text'], url_safe=url_safe,
                                         include_prefix=bool(data.get('includePrefix', False)))
        else:
            result = base64_codec.decode(data['text'], url_safe=url_safe)

        return jsonify({'success': True, 'result': result})

    except ToolError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('Base64 conversion failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@codec_bp.route('/api/url-codec', methods=['POST'])
def api_url_codec():
    """Percent-encode or decode a URL"""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('url'), str) or not data['url']:
            return jsonify({'success': False, 'error': 'No URL provided'}), 400

        mode = data.get('mode')
        if mode not in MODES:
            return jsonify({'success': False, 'error': 'Invalid mode'}), 400

        if mode == 'encode':
            result = url_codec.encode(data['url'], encode_all=bool(data.get('encodeAll', False)))
        else:
            result = url_codec.decode(data['url'])

        return jsonify({'success': True, 'result': result})

    except ToolError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('URL conversion failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@codec_bp.route('/api/base64-image', methods=['POST'])
def api_base64_image():
    """Encode an uploaded image, or turn a Base64 string into a data URL"""
    try:
        if 'file' in request.files:
            file = request.files['file']
            if file.filename == '':
                return jsonify({'success': False, 'error': 'No file selected'}), 400

            include_data_url = request.form.get('includeDataUrl', 'true').lower() != 'false'
            encoded = encode_image(
                file.read(),
                file.mimetype,
                include_data_url=include_data_url,
                max_bytes=current_app.config.get('MAX_IMAGE_BYTES', MAX_IMAGE_BYTES)
            )
            return jsonify({'success': True, 'base64': encoded, 'filename': file.filename})

        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('base64'), str) or not data['base64']:
            return jsonify({'success': False, 'error': 'No image or Base64 data provided'}), 400

        return jsonify({'success': True, 'dataUrl': to_data_url(data['base64'])})

    except ToolError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('Image conversion failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
