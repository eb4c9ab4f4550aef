# backend/generate/providers.py

import logging

import requests

from config import GEMINI_URL, OPENROUTER_URL
from errors import AllProvidersFailed, UpstreamProviderError
from generate.fallback import generate_fallback_questions
from generate.parser import parse_ai_response
from generate.prompt import build_prompt

logger = logging.getLogger(__name__)


def _json_or_text(response):
    try:
        return response.json()
    except ValueError:
        return {"error": response.text}


def _as_question_set(parsed, provider_name):
    if not isinstance(parsed, dict):
        raise UpstreamProviderError(f"{provider_name} returned JSON that is not an object")
    questions = parsed.get("questions")
    if not isinstance(questions, list) or not questions:
        raise UpstreamProviderError(f"{provider_name} returned no questions")
    return parsed


class OpenRouterProvider:
    name = "OpenRouter"
    ai_powered = True

    def __init__(self, settings):
        self.api_key = settings.openrouter_api_key
        self.model = settings.openrouter_model
        self.referer = settings.openrouter_referer
        self.app_title = settings.openrouter_app_title
        self.max_tokens = settings.max_tokens
        self.temperature = settings.temperature
        self.timeout = settings.request_timeout

    def attempt(self, request, prompt):
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": self.referer,
            "X-Title": self.app_title,
            "Content-Type": "application/json"
        }
        data = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature
        }

        response = requests.post(OPENROUTER_URL, headers=headers, json=data, timeout=self.timeout)
        result = _json_or_text(response)
        if not response.ok:
            raise UpstreamProviderError(f"OpenRouter API error {response.status_code}: {result}")
        if "error" in result or not result.get("choices"):
            raise UpstreamProviderError(
                f"OpenRouter API error: {result.get('error', 'no choices in response')}"
            )

        content = result["choices"][0]["message"]["content"]
        logger.info("Received response from OpenRouter: %s...", content[:200])
        return _as_question_set(parse_ai_response(content), self.name)


class GeminiProvider:
    name = "Gemini"
    ai_powered = True

    def __init__(self, settings):
        self.api_key = settings.gemini_api_key
        self.model = settings.gemini_model
        self.max_tokens = settings.max_tokens
        self.temperature = settings.temperature
        self.timeout = settings.request_timeout

    def attempt(self, request, prompt):
        url = GEMINI_URL.format(model=self.model)
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_tokens,
            },
        }

        response = requests.post(
            url,
            params={"key": self.api_key},
            headers={"Content-Type": "application/json"},
            json=payload,
            timeout=self.timeout,
        )
        result = _json_or_text(response)
        if not response.ok:
            raise UpstreamProviderError(f"Gemini API error {response.status_code}: {result}")
        if "error" in result or not result.get("candidates"):
            raise UpstreamProviderError(
                f"Gemini API error: {result.get('error', 'no candidates in response')}"
            )

        content = result["candidates"][0]["content"]["parts"][0]["text"]
        logger.info("Received response from Gemini: %s...", content[:200])
        return _as_question_set(parse_ai_response(content), self.name)


class TemplateProvider:
    name = "Template"
    model = "keyword-template"
    ai_powered = False

    def attempt(self, request, prompt):
        return generate_fallback_questions(
            request.material,
            request.question_type,
            request.question_count,
            request.difficulty,
        )


def build_providers(settings):
    """Provider chain in priority order; the template generator is always last."""
    providers = []
    if settings.openrouter_api_key:
        providers.append(OpenRouterProvider(settings))
    if settings.gemini_api_key:
        providers.append(GeminiProvider(settings))
    providers.append(TemplateProvider())
    return providers


def run_cascade(request, providers):
    """Try each provider in order and return ``(question_set, provider)``.

    Any failure is logged and the next provider is tried. Raises
    ``AllProvidersFailed`` once the chain is exhausted.
    """
    prompt = build_prompt(request)
    logger.info("Sending prompt to AI: %s...", prompt[:100])

    for provider in providers:
        try:
            logger.info("Attempting %s (%s)", provider.name, provider.model)
            question_set = provider.attempt(request, prompt)
        except Exception:
            logger.exception("%s failed, trying next provider", provider.name)
            continue
        logger.info("Questions generated by %s", provider.name)
        return question_set, provider

    raise AllProvidersFailed("Please try again later")
