import json

import pytest

from errors import ResponseUnparseable, ValidationError
from generate.fallback import (
    DEFAULT_CONCEPT,
    extract_keywords,
    generate_fallback_questions,
    main_concept,
)
from generate.parser import parse_ai_response
from generate.prompt import SCHEMA_EXAMPLES, build_prompt
from generate.request import QUESTION_TYPES, GenerationRequest


def make_request(material, question_type="multiple-choice", count=3, difficulty="medium"):
    return GenerationRequest(material, question_type, count, difficulty)


# request validation

def test_request_defaults_difficulty(material):
    req = GenerationRequest.from_json(
        {"material": material, "questionType": "essay", "questionCount": 2}
    )
    assert req == GenerationRequest(material, "essay", 2, "medium")


@pytest.mark.parametrize("body", [
    None,
    [],
    {"material": "too short", "questionType": "essay", "questionCount": 2},
    {"material": " " * 80, "questionType": "essay", "questionCount": 2},
    {"questionType": "essay", "questionCount": 2},
])
def test_request_rejects_bad_material(body):
    with pytest.raises(ValidationError):
        GenerationRequest.from_json(body)


@pytest.mark.parametrize("count", [0, 11, -1, "3", 2.5, True, None])
def test_request_rejects_bad_count(material, count):
    with pytest.raises(ValidationError):
        GenerationRequest.from_json(
            {"material": material, "questionType": "essay", "questionCount": count}
        )


def test_request_rejects_unknown_type_and_difficulty(material):
    with pytest.raises(ValidationError):
        GenerationRequest.from_json(
            {"material": material, "questionType": "matching", "questionCount": 1}
        )
    with pytest.raises(ValidationError):
        GenerationRequest.from_json(
            {"material": material, "questionType": "essay", "questionCount": 1,
             "difficulty": "extreme"}
        )


# prompt

@pytest.mark.parametrize("question_type", QUESTION_TYPES)
def test_prompt_embeds_material_and_schema(material, question_type):
    prompt = build_prompt(make_request(material, question_type, 4, "hard"))
    assert material in prompt
    assert SCHEMA_EXAMPLES[question_type] in prompt
    assert "create 4 " in prompt
    assert "hard difficulty" in prompt
    assert prompt.endswith("Do not add any text outside the JSON.")


def test_prompt_is_deterministic(material):
    req = make_request(material)
    assert build_prompt(req) == build_prompt(req)


# response parser

def test_parser_reads_plain_json():
    payload = {"questions": [{"question": "Q1", "correctAnswer": "A"}]}
    assert parse_ai_response(json.dumps(payload)) == payload


def test_parser_strips_surrounding_prose():
    payload = {"questions": [{"question": "What is {x}?", "options": ["a", "b"]}]}
    reply = "Sure! Here are your questions:\n```json\n" + json.dumps(payload) + "\n```\nGood luck."
    assert parse_ai_response(reply) == payload


def test_parser_passes_wrong_shape_through():
    assert parse_ai_response('{"items": []}') == {"items": []}


@pytest.mark.parametrize("reply", [
    "no json here",
    "{ broken json ",
    "prefix { not: valid } suffix",
    "",
])
def test_parser_rejects_unparseable(reply):
    with pytest.raises(ResponseUnparseable):
        parse_ai_response(reply)


# fallback generator

def test_keywords_skip_stop_words_and_duplicates():
    text = "Photosynthesis happens with sunlight. Photosynthesis needs water and sunlight."
    assert extract_keywords(text) == ["photosynthesis", "happens", "sunlight", "needs", "water"]


def test_keywords_are_capped_at_eight():
    text = "alpha bravo charlie delta foxtrot golfs hotel india juliet kilo"
    assert extract_keywords(text) == [
        "alpha", "bravo", "charlie", "delta", "foxtrot", "golfs", "hotel", "india",
    ]


def test_keywords_ignore_digits_and_short_words():
    assert extract_keywords("abc 2024 h2o1 cat dogs") == ["dogs"]


def test_main_concept_uses_first_sentence():
    assert main_concept("The mitochondria is small. Energy flows.") == "mitochondria"
    assert main_concept("A b c. Something else here.") == DEFAULT_CONCEPT


@pytest.mark.parametrize("question_type", QUESTION_TYPES)
@pytest.mark.parametrize("count", [1, 5, 10])
def test_fallback_returns_requested_count(material, question_type, count):
    result = generate_fallback_questions(material, question_type, count)
    assert len(result["questions"]) == count
    assert all(q["question"] for q in result["questions"])


def test_fallback_pads_with_main_concept():
    material = "Gravity pulls objects. " + "a b c " * 20
    questions = generate_fallback_questions(material, "fill-blank", 4)["questions"]
    assert [q["correctAnswer"] for q in questions] == ["gravity", "pulls", "objects", "gravity"]


def test_fallback_essay_has_no_answer_fields():
    material = "x" * 60
    questions = generate_fallback_questions(material, "essay", 3)["questions"]
    assert len(questions) == 3
    for q in questions:
        assert q["question"]
        assert q["explanation"]
        assert "options" not in q
        assert "correctAnswer" not in q


def test_fallback_multiple_choice_shape(material):
    for q in generate_fallback_questions(material, "multiple-choice", 3)["questions"]:
        assert len(q["options"]) == 4
        assert q["correctAnswer"] in q["options"]


def test_fallback_true_false_answer(material):
    for q in generate_fallback_questions(material, "true-false", 2)["questions"]:
        assert q["correctAnswer"] in ("True", "False")


def test_fallback_is_deterministic(material):
    first = generate_fallback_questions(material, "multiple-choice", 7, "hard")
    second = generate_fallback_questions(material, "multiple-choice", 7, "hard")
    assert first == second


def test_request_accepts_whole_float_count(material):
    req = GenerationRequest.from_json(
        {"material": material, "questionType": "essay", "questionCount": 3.0}
    )
    assert req.question_count == 3
    assert isinstance(req.question_count, int)
