from datetime import datetime

from flask import Flask, render_template_string, request, jsonify, abort

from blueprints.codec import codec_bp
from blueprints.converter import converter_bp
from blueprints.cron import cron_bp
from blueprints.formatter import formatter_bp
from blueprints.generators import generators_bp
from blueprints.jwt_decoder import jwt_bp
from blueprints.regex import regex_bp
from config.settings import Settings
from config.template import DASHBOARD_TEMPLATE
from config.tools import ALL_TOOLS_CATEGORY, TOOLS, get_categories, get_tools_by_category, search_tools

app = Flask(__name__)

settings = Settings()

app.config['MAX_UUID_COUNT'] = settings.limit('max_uuid_count')
app.config['MAX_IMAGE_BYTES'] = settings.limit('max_image_bytes')
app.config['MAX_INPUT_CHARS'] = settings.limit('max_input_chars')
# Base64 payloads are a third larger than the image, multipart adds headers
app.config['MAX_CONTENT_LENGTH'] = max(
    app.config['MAX_INPUT_CHARS'] * 4,
    app.config['MAX_IMAGE_BYTES'] * 2
)

# Register blueprints
app.register_blueprint(formatter_bp)
app.register_blueprint(codec_bp)
app.register_blueprint(converter_bp)
app.register_blueprint(generators_bp)
app.register_blueprint(regex_bp)
app.register_blueprint(cron_bp)
app.register_blueprint(jwt_bp)


def get_enabled_tools():
    return settings.get_enabled_tools(TOOLS)


@app.before_request
def reject_oversized_body():
    # views read the body inside their own try blocks
    limit = app.config.get('MAX_CONTENT_LENGTH')
    if limit and request.content_length and request.content_length > limit:
        abort(413)


@app.errorhandler(413)
def request_too_large(e):
    return jsonify({'success': False, 'error': 'Request body too large'}), 413


@app.route('/')
def dashboard():
    tools = get_enabled_tools()
    categories = [(category, get_tools_by_category(category, tools)) for category in get_categories(tools)]
    return render_template_string(DASHBOARD_TEMPLATE, categories=categories)


@app.route('/api/tools')
def api_tools():
    """List enabled tools, optionally filtered by category and search term"""
    tools = get_enabled_tools()
    categories = get_categories(tools)

    category = request.args.get('category', '').strip()
    if category:
        tools = get_tools_by_category(category, tools)

    query = request.args.get('q', '').strip()
    if query:
        tools = search_tools(query, tools)

    return jsonify({'tools': tools, 'categories': [ALL_TOOLS_CATEGORY] + categories})


@app.route('/health')
def health():
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now().isoformat(),
        'tools_count': len(get_enabled_tools())
    })


if __name__ == '__main__':
    app.run(host='127.0.0.1', port=8000, debug=True)
