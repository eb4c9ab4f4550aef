# backend/generate/prompt.py

QUESTION_TYPE_LABELS = {
    "multiple-choice": "multiple choice",
    "fill-blank": "fill in the blank",
    "true-false": "true/false",
    "essay": "essay",
}

SCHEMA_EXAMPLES = {
    "multiple-choice": """{
  "questions": [
    {
      "question": "question text",
      "options": ["option A", "option B", "option C", "option D"],
      "correctAnswer": "the correct option",
      "explanation": "short explanation"
    }
  ]
}""",
    "fill-blank": """{
  "questions": [
    {
      "question": "sentence with a blank ______ to complete",
      "correctAnswer": "the word or phrase that fills the blank",
      "explanation": "short explanation"
    }
  ]
}""",
    "true-false": """{
  "questions": [
    {
      "question": "statement to judge",
      "correctAnswer": "True",
      "explanation": "why the statement is true or false"
    }
  ]
}""",
    "essay": """{
  "questions": [
    {
      "question": "essay question that requires a long answer",
      "explanation": "hints or grading criteria"
    }
  ]
}""",
}


def question_type_label(question_type):
    return QUESTION_TYPE_LABELS.get(question_type, "general")


def build_prompt(request):
    prompt = (
        f"Based on the following learning material, create {request.question_count} "
        f"{question_type_label(request.question_type)} questions "
        f"with {request.difficulty} difficulty.\n\n"
    )
    prompt += f"Material:\n{request.material}\n\n"
    prompt += "Write the questions as valid JSON with the following structure:\n"
    prompt += SCHEMA_EXAMPLES[request.question_type]
    prompt += (
        "\n\nMake sure the output is valid JSON that can be parsed. "
        "Do not add any text outside the JSON."
    )
    return prompt
