from flask import Blueprint, request, jsonify, current_app

from toolkit.code_formatter import FORMATTERS, FormatterOptions
from toolkit.exceptions import ToolError
from toolkit.json_formatter import format_json, minify_json, validate_json
from toolkit.markdown_preview import render_markdown

formatter_bp = Blueprint('formatter', __name__)

MAX_INDENT = 10


def _indent(value, default=2):
    try:
        return max(0, min(int(value), MAX_INDENT))
    except (TypeError, ValueError):
        return default


@formatter_bp.route('/api/format-json', methods=['POST'])
def api_format_json():
    """Pretty print JSON"""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('json'), str) or not data['json']:
            return jsonify({'success': False, 'valid': False, 'error': 'No JSON provided'}), 400

        formatted = format_json(data['json'], _indent(data.get('spaces', 2)))
        return jsonify({'success': True, 'formatted': formatted, 'valid': True})

    except ToolError as e:
        return jsonify({'success': False, 'valid': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('JSON formatting failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@formatter_bp.route('/api/minify-json', methods=['POST'])
def api_minify_json():
    """Minify JSON"""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('json'), str) or not data['json']:
            return jsonify({'success': False, 'valid': False, 'error': 'No JSON provided'}), 400

        return jsonify({'success': True, 'minified': minify_json(data['json']), 'valid': True})

    except ToolError as e:
        return jsonify({'success': False, 'valid': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('JSON minification failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@formatter_bp.route('/api/validate-json', methods=['POST'])
def api_validate_json():
    """Validate JSON without transforming it"""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('json'), str):
            return jsonify({'success': False, 'valid': False, 'error': 'No JSON provided'}), 400

        result = validate_json(data['json'])
        return jsonify({'success': True, **result.to_dict()})

    except Exception as e:
        current_app.logger.exception('JSON validation failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@formatter_bp.route('/api/code-format', methods=['POST'])
def api_code_format():
    """Format HTML, CSS or JavaScript source"""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('code'), str) or not data['code']:
            return jsonify({'success': False, 'error': 'No code provided'}), 400

        language = str(data.get('language', 'html')).lower()
        formatter = FORMATTERS.get(language)
        if formatter is None:
            return jsonify({'success': False, 'error': f'Unsupported language: {language}'}), 400

        options = FormatterOptions(
            indent_size=_indent(data.get('indentSize', 2)),
            use_tabs=bool(data.get('useTabs', False))
        )
        return jsonify({'success': True, 'formatted': formatter(data['code'], options), 'language': language})

    except Exception as e:
        current_app.logger.exception('Code formatting failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@formatter_bp.route('/api/markdown', methods=['POST'])
def api_markdown():
    """Render Markdown to HTML"""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('markdown'), str) or not data['markdown'].strip():
            return jsonify({'success': False, 'error': 'No Markdown provided'}), 400

        return jsonify({'success': True, **render_markdown(data['markdown']).to_dict()})

    except Exception as e:
        current_app.logger.exception('Markdown rendering failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
