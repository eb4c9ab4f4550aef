import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import Settings
from errors import QuizGenError
from routes.extract_text import extract_bp
from routes.generate_questions import generate_bp

API_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def create_app(settings=None):
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(levelname)s - [%(name)s] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["API_VERSION"] = API_VERSION
    CORS(app)

    # Register routes
    app.register_blueprint(generate_bp, url_prefix='/generate-questions')
    app.register_blueprint(extract_bp, url_prefix='/extract-text')

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({"status": "ok"})

    @app.errorhandler(QuizGenError)
    def handle_quizgen_error(e):
        if e.status_code >= 500:
            logger.error("Request failed: %s (%s)", e.message, e.details)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        return jsonify({
            "success": False,
            "error": "An error occurred while processing the request. Please try again.",
            "details": str(e),
        }), 500

    if not (settings.openrouter_api_key or settings.gemini_api_key):
        logger.warning("No AI provider key configured, questions will come from templates only")

    return app


if __name__ == '__main__':
    create_app().run()
