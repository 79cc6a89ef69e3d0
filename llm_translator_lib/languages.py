"""
Language‑code to display‑name mapping used inside translation prompts.

LLMs follow "translate from English to Japanese" far more reliably than
"translate from en to ja", so short codes are expanded before the prompt is
formatted.  Codes that are not present in the table are passed through
unchanged so unusual language tags still produce a sensible prompt.
"""

from typing import Dict, Optional

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "en-us": "English",
    "en-gb": "English",
    "ja": "Japanese",
    "zh": "Simplified Chinese",
    "zh-cn": "Simplified Chinese",
    "zh-hans": "Simplified Chinese",
    "zh-tw": "Traditional Chinese",
    "zh-hant": "Traditional Chinese",
    "ko": "Korean",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "pt-br": "Portuguese",
    "ru": "Russian",
    "ar": "Arabic",
    "th": "Thai",
    "vi": "Vietnamese",
    "id": "Indonesian",
    "nl": "Dutch",
    "pl": "Polish",
    "tr": "Turkish",
}


def fix_language(code: Optional[str]) -> Optional[str]:
    """
    Return the English display name of a language code.

    The lookup is case‑insensitive (``"ZH-CN"`` and ``"zh-cn"`` are the same
    code).  Unknown codes, including ``None``, are returned verbatim.

    Parameters
    ----------
    code : Optional[str]
        Short language code, e.g. ``"ja"`` or ``"pt-br"``.

    Returns
    -------
    Optional[str]
        Full language name, or the original ``code`` when it is not mapped.
    """
    if code is None:
        return None
    return LANGUAGE_NAMES.get(code.lower(), code)
