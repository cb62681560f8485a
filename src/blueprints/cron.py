from flask import Blueprint, request, jsonify, current_app

from toolkit.cron_parser import COMMON_EXPRESSIONS, DEFAULT_RUN_COUNT, parse_cron
from toolkit.exceptions import ToolError

cron_bp = Blueprint('cron', __name__)


@cron_bp.route('/api/cron/parse', methods=['POST'])
def api_cron_parse():
    """Validate and explain a cron expression and list its next run times"""
    try:
        data = request.get_json(silent=True)
        if not data or not str(data.get('expression', '')).strip():
            return jsonify({'success': False, 'valid': False, 'error': 'No cron expression provided'}), 400

        try:
            count = int(data.get('count', DEFAULT_RUN_COUNT))
        except (TypeError, ValueError):
            count = DEFAULT_RUN_COUNT

        info = parse_cron(
            str(data['expression']),
            include_seconds=bool(data.get('includeSeconds', False)),
            count=count
        )
        return jsonify({'success': True, **info.to_dict()})

    except ToolError as e:
        return jsonify({'success': False, 'valid': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('Cron parsing failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@cron_bp.route('/api/cron/examples', methods=['GET'])
def api_cron_examples():
    return jsonify({'success': True, 'examples': COMMON_EXPRESSIONS})
