"""
Flask REST API for SimpleCalc
Exposes the expression engine and a keypad session as JSON endpoints
"""
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

import config
from evaluator import evaluate
from keypad import KEYPAD_LAYOUT, KeypadSession

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

# One calculator session per server
session = KeypadSession()


def _bad_request(message):
    return jsonify({'success': False, 'error': message}), 400


@app.route('/api')
def api_info():
    """API information page"""
    return f"""
    <html>
    <head><title>{config.APP_NAME} API</title></head>
    <body style="font-family: Arial; padding: 40px;">
        <h1>{config.APP_NAME} API Server</h1>
        <h2>Available Endpoints:</h2>
        <ul>
            <li><a href="/api/keypad">/api/keypad</a> - Keypad layout</li>
            <li>POST /api/evaluate - Evaluate an expression</li>
            <li><a href="/api/session">/api/session</a> - Current display and last calculation</li>
            <li>POST /api/press - Press a key</li>
            <li>POST /api/clear - Start a fresh calculation</li>
        </ul>
    </body>
    </html>
    """


@app.route('/api/keypad')
def get_keypad():
    """Get the keypad layout, row by row"""
    rows = [
        [{'label': button.value, 'kind': button.kind} for button in row]
        for row in KEYPAD_LAYOUT
    ]
    return jsonify({'success': True, 'data': rows})


@app.route('/api/evaluate', methods=['POST'])
def post_evaluate():
    """Evaluate an expression without touching the session"""
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return _bad_request("Request body must be a JSON object")
    expression = payload.get('expression')
    if not isinstance(expression, str):
        return _bad_request("'expression' must be a string")
    try:
        result = evaluate(expression)
        return jsonify({
            'success': True,
            'data': {
                'expression': expression,
                'result': result,
                'error': result == config.ERROR_SENTINEL
            }
        })
    except Exception as e:
        logger.exception("Evaluation endpoint failed")
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/session')
def get_session():
    """Get the current session state"""
    data = session.state()
    data['last_calculation'] = session.format_last_calculation()
    return jsonify({'success': True, 'data': data})


@app.route('/api/press', methods=['POST'])
def post_press():
    """Press a single key"""
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return _bad_request("Request body must be a JSON object")
    key = payload.get('key')
    if not isinstance(key, str):
        return _bad_request("'key' must be a string")
    try:
        session.press(key)
    except ValueError as e:
        return _bad_request(str(e))
    except Exception as e:
        logger.exception("Key press %r failed", key)
        return jsonify({'success': False, 'error': str(e)}), 500
    return jsonify({'success': True, 'data': session.state()})


@app.route('/api/clear', methods=['POST'])
def post_clear():
    """Clear the session"""
    session.clear()
    return jsonify({'success': True, 'data': session.state()})
