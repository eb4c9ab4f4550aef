# backend/routes/generate_questions.py

from flask import Blueprint, current_app, jsonify, request

from generate.providers import build_providers, run_cascade
from generate.request import DIFFICULTIES, QUESTION_TYPES, GenerationRequest

generate_bp = Blueprint('generate_questions', __name__)


@generate_bp.route('', methods=['GET'])
def describe():
    settings = current_app.config["SETTINGS"]
    return jsonify({
        "message": "AI Question Generator API",
        "version": current_app.config["API_VERSION"],
        "endpoints": {
            "POST /generate-questions": "Generate questions from learning material",
        },
        "supportedQuestionTypes": list(QUESTION_TYPES),
        "supportedDifficulties": list(DIFFICULTIES),
        "providers": [p.name for p in build_providers(settings)],
    })


@generate_bp.route('', methods=['POST'])
def generate_questions():
    body = request.get_json(silent=True)
    gen_request = GenerationRequest.from_json(body)

    providers = build_providers(current_app.config["SETTINGS"])
    question_set, provider = run_cascade(gen_request, providers)

    if provider.ai_powered:
        note = f"Generated using {provider.name} API with {provider.model} model"
    else:
        note = "Generated from keyword templates because no AI provider was available"

    return jsonify({
        "success": True,
        "data": question_set,
        "metadata": {
            "model": provider.model,
            "questionType": gen_request.question_type,
            "questionCount": gen_request.question_count,
            "difficulty": gen_request.difficulty,
            "materialLength": len(gen_request.material),
            "aiPowered": provider.ai_powered,
            "apiProvider": provider.name,
            "note": note,
        },
    })
