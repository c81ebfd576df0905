"""
Flask Application for Email Address Parsing API

Provides REST API endpoints for parsing email addresses.
"""

import logging
import os

from flask import Flask, request, jsonify
from flask_cors import CORS

from email_address import EmailValidator, try_parse_email, __version__

# Configuration
PORT = int(os.environ.get('PORT', 5000))
DEBUG = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
MAX_BATCH_SIZE = int(os.environ.get('MAX_BATCH_SIZE', 1000))

logger = logging.getLogger(__name__)

# Create Flask application
app = Flask(__name__)
CORS(app)

validator = EmailValidator()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _json_body():
    """Return the request JSON, or an error response tuple."""
    if not request.is_json:
        return None, (jsonify({'error': 'Content-Type must be application/json'}), 415)

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, (jsonify({'error': 'Invalid JSON body'}), 400)
    return data, None


@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'service': 'email-address',
        'version': __version__
    }), 200


@app.route('/parse', methods=['POST'])
def parse():
    """
    Parse an email address.

    Request Body:
        {
            "email": "user@example.com"
        }

    Returns:
        JSON response with the parse result:
        {
            "is_valid": true,
            "email": "user@example.com",
            "user": "user",
            "host": "example.com",
            "error": null,
            "code": null,
            "index": null
        }
    """
    data, error = _json_body()
    if error:
        return error

    email = data.get('email')
    if email is None:
        return jsonify({'error': 'Missing required field: email'}), 400

    return jsonify(validator.validate(email).to_dict()), 200


@app.route('/parse/batch', methods=['POST'])
def parse_batch():
    """
    Parse multiple email addresses.

    Request Body:
        {
            "emails": ["user1@example.com", "user2@example.com"]
        }

    Returns:
        JSON response with the results and counts of valid and invalid emails.
    """
    data, error = _json_body()
    if error:
        return error

    emails = data.get('emails')
    if emails is None:
        return jsonify({'error': 'Missing required field: emails'}), 400
    if not isinstance(emails, list):
        return jsonify({'error': 'emails must be an array'}), 400
    if len(emails) == 0:
        return jsonify({'error': 'emails array cannot be empty'}), 400
    if len(emails) > MAX_BATCH_SIZE:
        return jsonify({'error': f'emails array cannot hold more than {MAX_BATCH_SIZE} items'}), 400

    results = validator.validate_batch(emails)
    valid_count = sum(1 for r in results if r.is_valid)

    return jsonify({
        'results': [r.to_dict() for r in results],
        'total': len(results),
        'valid_count': valid_count,
        'invalid_count': len(results) - valid_count
    }), 200


@app.route('/try-parse', methods=['GET'])
def try_parse():
    """
    Lenient parse via GET request.

    Query Parameters:
        email: Email address to parse
    """
    email = request.args.get('email')
    if email is None:
        return jsonify({'error': 'Missing required query parameter: email'}), 400

    address = try_parse_email(email)

    return jsonify({
        'email': email,
        'is_valid': address is not None,
        'user': address.user if address else None,
        'host': str(address.host) if address else None
    }), 200


@app.errorhandler(404)
def not_found(error):
    """Handle 404 errors."""
    return jsonify({'error': 'Endpoint not found'}), 404


@app.errorhandler(405)
def method_not_allowed(error):
    """Handle 405 errors."""
    return jsonify({'error': 'Method not allowed'}), 405


@app.errorhandler(500)
def internal_error(error):
    """Handle 500 errors."""
    logger.error("Unhandled error: %s", error)
    return jsonify({'error': 'Internal server error'}), 500


if __name__ == '__main__':
    setup_logging()
    logger.info("Starting Email Address API on port %d", PORT)

    app.run(host='0.0.0.0', port=PORT, debug=DEBUG)
