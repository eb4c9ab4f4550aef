# backend/generate/fallback.py
#
# Template questions built from keywords of the material. Used only when no AI
# provider is configured or every provider failed.

import re

MAX_KEYWORDS = 8
DEFAULT_CONCEPT = "the main topic"

WORD_RE = re.compile(r"[^\W\d_]{4,}")
SENTENCE_SPLIT_RE = re.compile(r"[.!?]")

# English and Indonesian function words
STOP_WORDS = frozenset("""
about above after again against also among been before being below between
both could does doing down during each even every from further have having
here into just many more most much must only other over same should some
such than that their them then there these they this those through under
until very were what when where which while will with within without would
your yang dengan untuk dari pada adalah dalam tidak akan atau juga dapat
oleh sebagai karena bahwa telah sudah harus bisa lebih saat antara setelah
sebelum tersebut kepada hanya masih para serta yaitu yakni ketika secara
""".split())


def extract_keywords(material, limit=MAX_KEYWORDS):
    keywords = []
    for word in WORD_RE.findall(material.lower()):
        if word in STOP_WORDS or word in keywords:
            continue
        keywords.append(word)
        if len(keywords) == limit:
            break
    return keywords


def main_concept(material):
    first_sentence = SENTENCE_SPLIT_RE.split(material, maxsplit=1)[0]
    for word in WORD_RE.findall(first_sentence.lower()):
        if word not in STOP_WORDS:
            return word
    return DEFAULT_CONCEPT


def _multiple_choice(keyword, concept, difficulty):
    correct = f"A key concept of {concept} described in the material"
    return {
        "question": f"Which statement best describes \"{keyword}\" according to the material?",
        "options": [
            correct,
            "A term that is not related to the material",
            "An example that contradicts the material",
            "None of the above",
        ],
        "correctAnswer": correct,
        "explanation": f"\"{keyword}\" is discussed in the material as part of {concept} "
                       f"({difficulty} difficulty).",
    }


def _fill_blank(keyword, concept, difficulty):
    return {
        "question": f"Complete the sentence: one of the important terms discussed "
                    f"in relation to {concept} is ______.",
        "correctAnswer": keyword,
        "explanation": f"The material uses the term \"{keyword}\" ({difficulty} difficulty).",
    }


def _true_false(keyword, concept, difficulty):
    return {
        "question": f"True or false: the material discusses \"{keyword}\" "
                    f"in the context of {concept}.",
        "correctAnswer": "True",
        "explanation": f"\"{keyword}\" appears in the material ({difficulty} difficulty).",
    }


def _essay(keyword, concept, difficulty):
    return {
        "question": f"Explain the meaning of \"{keyword}\" and how it relates to {concept}, "
                    f"using examples from the material.",
        "explanation": f"A good answer defines \"{keyword}\", connects it to {concept} "
                       f"and supports it with examples ({difficulty} difficulty).",
    }


TEMPLATES = {
    "multiple-choice": _multiple_choice,
    "fill-blank": _fill_blank,
    "true-false": _true_false,
    "essay": _essay,
}


def generate_fallback_questions(material, question_type, question_count, difficulty="medium"):
    keywords = extract_keywords(material)
    concept = main_concept(material)
    template = TEMPLATES[question_type]

    questions = []
    for i in range(question_count):
        keyword = keywords[i] if i < len(keywords) else concept
        questions.append(template(keyword, concept, difficulty))
    return {"questions": questions}
