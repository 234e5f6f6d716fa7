import logging
from dataclasses import dataclass
from typing import Optional

from google import genai
from google.genai import types

from config import Settings

logger = logging.getLogger("bmi_tips.tips")

FALLBACK_TIP = "Não foi possível carregar a dica da IA no momento."
MAX_TIP_WORDS = 25


class EmptyTipError(RuntimeError):
    """The provider answered without any text."""


@dataclass(frozen=True)
class TipOutcome:
    ok: bool
    text: str


def build_prompt(value: float, category: str) -> str:
    return (
        f"Para uma pessoa com IMC de {value:.1f}, classificado como '{category}', "
        "forneça uma dica de saúde curta, encorajadora e útil em português do Brasil. "
        f"Mantenha a dica com no máximo {MAX_TIP_WORDS} palavras."
    )


def make_client(settings: Settings) -> genai.Client:
    return genai.Client(api_key=settings.api_key)


def request_tip(value: float, category: str, client=None, settings: Optional[Settings] = None) -> TipOutcome:
    """
    Ask the Gemini model for a short health tip about this BMI.

    Exactly one request is made. Any failure, including a missing API key,
    is logged and turned into the fallback tip; this function does not raise.
    """
    settings = settings or Settings.from_env()
    prompt = build_prompt(value, category)

    try:
        if client is None:
            client = make_client(settings)
        response = client.models.generate_content(
            model=settings.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                thinking_config=types.ThinkingConfig(thinking_budget=0),
            ),
        )
        text = response.text
        if not text:
            raise EmptyTipError(f"model {settings.model} returned no text")
    except Exception:
        logger.exception("Tip request failed for BMI %.1f (%s)", value, category)
        return TipOutcome(ok=False, text=FALLBACK_TIP)

    logger.info("Tip received for BMI %.1f (%s)", value, category)
    return TipOutcome(ok=True, text=text)
