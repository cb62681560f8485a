from flask import Blueprint, request, jsonify, current_app

from toolkit.exceptions import ToolError
from toolkit.regex_tester import COMMON_PATTERNS, evaluate_regex, explain_pattern, measure_regex

regex_bp = Blueprint('regex', __name__)


@regex_bp.route('/api/regex/test', methods=['POST'])
def api_regex_test():
    """Match, replace and highlight a pattern against text"""
    try:
        data = request.get_json(silent=True)
        if not data or 'pattern' not in data or 'text' not in data:
            return jsonify({'success': False, 'error': 'Missing pattern or text field'}), 400
        if not all(isinstance(data.get(key, ''), str) for key in ('pattern', 'text', 'flags', 'replacement')):
            return jsonify({'success': False, 'error': 'Pattern, text, flags and replacement must be strings'}), 400

        pattern = data['pattern']
        if not pattern:
            return jsonify({'success': False, 'error': 'Pattern cannot be empty'}), 400

        result = evaluate_regex(pattern, data['text'], data.get('flags', 'g'), data.get('replacement', ''))
        status = 200 if result.is_valid else 400
        return jsonify({'success': result.is_valid, **result.to_dict()}), status

    except Exception as e:
        current_app.logger.exception('Regex test failed')
        return jsonify({'success': False, 'error': str(e)}), 500


@regex_bp.route('/api/regex/explain', methods=['POST'])
def api_regex_explain():
    """Explain regex pattern components"""
    try:
        data = request.get_json(silent=True)
        if not data or 'pattern' not in data:
            return jsonify({'success': False, 'error': 'Missing pattern field'}), 400
        if not isinstance(data['pattern'], str):
            return jsonify({'success': False, 'error': 'Pattern must be a string'}), 400

        pattern = data['pattern']
        if not pattern:
            return jsonify({'success': False, 'error': 'Pattern cannot be empty'}), 400

        return jsonify({
            'success': True,
            'pattern': pattern,
            'explanation': explain_pattern(pattern)
        })

    except Exception as e:
        current_app.logger.exception('Regex explanation failed')
        return jsonify({'success': False, 'error': str(e)}), 500


@regex_bp.route('/api/regex/performance', methods=['POST'])
def api_regex_performance():
    """Test regex with performance metrics"""
    try:
        data = request.get_json(silent=True)
        if not data or 'pattern' not in data or 'text' not in data:
            return jsonify({'success': False, 'error': 'Missing pattern or text field'}), 400
        if not all(isinstance(data.get(key, ''), str) for key in ('pattern', 'text', 'flags', 'replacement')):
            return jsonify({'success': False, 'error': 'Pattern, text, flags and replacement must be strings'}), 400

        if not data['pattern']:
            return jsonify({'success': False, 'error': 'Pattern cannot be empty'}), 400

        result = measure_regex(data['pattern'], data['text'], data.get('flags', ''))
        return jsonify({'success': True, **result})

    except ToolError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('Regex performance test failed')
        return jsonify({'success': False, 'error': str(e)}), 500


@regex_bp.route('/api/regex/patterns', methods=['GET'])
def api_regex_patterns():
    return jsonify({'success': True, 'patterns': COMMON_PATTERNS})
