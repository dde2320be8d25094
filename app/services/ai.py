"""AI service: OpenAI-compatible chat completions for suggested code rewrites."""

from ..config import (
    get_ai_api_key,
    get_ai_base_url,
    get_ai_model,
    get_ai_temperature,
    get_ai_timeout,
)
from deps import Any, List, OpenAI, Optional, logging

logger = logging.getLogger(__name__)

FENCE = "```"


def build_client() -> Optional[Any]:
    """Return an OpenAI-compatible client, or None if no API key is configured."""
    key = get_ai_api_key()
    if not key:
        return None
    # One call per request: the client must not retry on its own.
    return OpenAI(
        api_key=key,
        base_url=get_ai_base_url(),
        timeout=get_ai_timeout(),
        max_retries=0,
    )


def build_prompt(code: str, language: str) -> str:
    return (
        f"You are an expert {language} developer.\n\n"
        "Your task is to review the following code snippet and return a **corrected, "
        "more idiomatic, and concise** version of the code.\n\n"
        "**Important rules:**\n"
        "1. Only return the corrected code block.\n"
        "2. The code must be enclosed in a single markdown block for the specified language.\n"
        f"3. Fix any simple bugs, improve readability, and adhere to best practices for {language}.\n\n"
        "**Code to review:**\n"
        f"{FENCE}\n{code}\n{FENCE}\n"
    )


def build_system_instruction(language: str) -> str:
    return (
        f"You are an expert {language} developer who follows instructions precisely "
        "and only returns code in a markdown block."
    )


def extract_code_block(text: str) -> str:
    """Body of the first fenced code block in ``text``, stripped. Empty if there is none.

    The opening fence may carry a language tag; an unterminated block runs to
    the end of the text.
    """
    code_lines: List[str] = []
    in_block = False
    for line in (text or "").split("\n"):
        if line.strip().startswith(FENCE):
            if in_block:
                break
            in_block = True
            continue
        if in_block:
            code_lines.append(line)
    return "\n".join(code_lines).strip()


class AIService:
    """Rewrite collaborator: proposes a corrected version of the submitted code."""

    def suggest_code(self, code: str, language: str) -> Optional[str]:
        """Return rewritten code, or None if AI is unavailable, the call fails or the reply has no code block."""
        client = build_client()
        if not client:
            return None
        try:
            r = client.chat.completions.create(
                model=get_ai_model(),
                messages=[
                    {"role": "system", "content": build_system_instruction(language)},
                    {"role": "user", "content": build_prompt(code, language)},
                ],
                temperature=get_ai_temperature(),
            )
        except Exception:
            logger.warning("AI code generation failed", exc_info=True)
            return None
        if not r.choices or not r.choices[0].message.content:
            logger.warning("AI code generation returned an empty reply")
            return None
        suggested = extract_code_block(r.choices[0].message.content)
        return suggested or None
