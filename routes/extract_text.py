# backend/routes/extract_text.py

from flask import Blueprint, current_app, jsonify, request

from extract.extractor import extract_text

extract_bp = Blueprint('extract_text', __name__)


@extract_bp.route('', methods=['GET'])
def describe():
    return jsonify({
        "message": "Text Extraction API",
        "version": current_app.config["API_VERSION"],
        "endpoints": {
            "POST /extract-text": "Extract text from uploaded file",
        },
        "supportedFormats": ["PDF", "DOCX", "TXT"],
        "maxFileSize": "10MB",
    })


@extract_bp.route('', methods=['POST'])
def upload():
    file = request.files.get('file')
    data = file.read() if file else None
    filename = file.filename if file else None
    mimetype = file.mimetype if file else None

    settings = current_app.config["SETTINGS"]
    result = extract_text(data, filename, mimetype, settings.max_upload_bytes)
    return jsonify({"success": True, **result})
