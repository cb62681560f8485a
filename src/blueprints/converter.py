import json

from flask import Blueprint, request, jsonify, current_app

from toolkit.color_converter import convert_color
from toolkit.csv_converter import csv_to_json, json_to_csv
from toolkit.exceptions import ToolError

converter_bp = Blueprint('converter', __name__)


@converter_bp.route('/api/csv-to-json', methods=['POST'])
def api_csv_to_json():
    """Convert CSV rows to JSON objects"""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('csv'), str) or not data['csv']:
            return jsonify({'success': False, 'error': 'No CSV provided'}), 400

        records = csv_to_json(
            data['csv'],
            use_headers=bool(data.get('useHeaders', True)),
            parse_numbers=bool(data.get('parseNumbers', True)),
            parse_booleans=bool(data.get('parseBooleans', True))
        )
        return jsonify({'success': True, 'json': records})

    except Exception as e:
        current_app.logger.exception('CSV conversion failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@converter_bp.route('/api/json-to-csv', methods=['POST'])
def api_json_to_csv():
    """Convert a JSON array of objects to CSV"""
    try:
        data = request.get_json(silent=True)
        if not data or 'json' not in data:
            return jsonify({'success': False, 'error': 'No JSON provided'}), 400

        records = data['json']
        if isinstance(records, str):
            try:
                records = json.loads(records)
            except json.JSONDecodeError as e:
                return jsonify({'success': False, 'error': f'Invalid JSON: {e.msg}'}), 400
        if not isinstance(records, list):
            return jsonify({'success': False, 'error': 'JSON must be an array of objects'}), 400

        csv = json_to_csv(records, include_headers=bool(data.get('includeHeaders', True)))
        return jsonify({'success': True, 'csv': csv})

    except ToolError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception('JSON to CSV conversion failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@converter_bp.route('/api/color', methods=['POST'])
def api_color():
    """Convert a color between hex, rgb and hsl notations"""
    data = request.get_json(silent=True)
    if not data or not data.get('color'):
        return jsonify({'success': False, 'error': 'No color provided'}), 400

    result = convert_color(str(data['color']))
    if result is None:
        return jsonify({'success': False, 'error': f"Unrecognized color: {data['color']}"}), 400

    return jsonify({'success': True, **result})
