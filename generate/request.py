# backend/generate/request.py

from dataclasses import dataclass

from errors import ValidationError

QUESTION_TYPES = ("multiple-choice", "fill-blank", "true-false", "essay")
DIFFICULTIES = ("easy", "medium", "hard")

MIN_MATERIAL_LENGTH = 50
MIN_QUESTIONS = 1
MAX_QUESTIONS = 10


@dataclass(frozen=True)
class GenerationRequest:
    material: str
    question_type: str
    question_count: int
    difficulty: str = "medium"

    @classmethod
    def from_json(cls, body):
        """Validate a ``/generate-questions`` JSON body."""
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")

        material = body.get("material")
        if not isinstance(material, str) or len(material.strip()) < MIN_MATERIAL_LENGTH:
            raise ValidationError(
                "Material is too short (minimum %d characters)" % MIN_MATERIAL_LENGTH
            )

        question_type = body.get("questionType")
        if question_type not in QUESTION_TYPES:
            raise ValidationError(
                "Invalid question type. Supported types: %s" % ", ".join(QUESTION_TYPES)
            )

        count = body.get("questionCount")
        # JSON numbers like 3.0 are whole counts too
        if isinstance(count, float) and count.is_integer():
            count = int(count)
        # bool is an int subclass, reject it explicitly
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValidationError("Question count must be between 1-10")
        if count < MIN_QUESTIONS or count > MAX_QUESTIONS:
            raise ValidationError("Question count must be between 1-10")

        difficulty = body.get("difficulty") or "medium"
        if difficulty not in DIFFICULTIES:
            raise ValidationError(
                "Invalid difficulty. Supported values: %s" % ", ".join(DIFFICULTIES)
            )

        return cls(material, question_type, count, difficulty)
