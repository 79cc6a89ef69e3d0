"""
Translation command‑line interface.

Reads text from an argument (or standard input), translates it through a
chat‑completion endpoint and writes the result to a file (or standard
output).  Endpoint options come from a JSON settings file, environment
variables (``LLM_TRANSLATOR_OPENAI_<KEY>``) and the command‑line overrides
below, the latter taking precedence.

---

# Quick ways to run the script

1. Text as an argument

>>> llm-translate "Hello" --source en --target ja

2. Piping data, local LM Studio server

>>> cat input.txt | llm-translate -s en -t de \
...     --endpoint http://localhost:1234/v1/chat/completions > output.txt

3. Settings from a file

>>> llm-translate "Bonjour" -s fr -t en --settings settings.json
"""

import argparse
import sys
from typing import List, Optional

from llm_translator_lib.client import LLMTranslatorClient
from llm_translator_lib.settings import SettingsContext
from llm_translator_lib.base.constants import SETTINGS_FILE
from llm_translator_lib.base.constants_base import SETTINGS_SECTION
from llm_translator_lib.exceptions import LLMTranslatorError
from llm_translator_lib.data_models.constants import (
    API_KEY_KEY,
    ENDPOINT_KEY,
    MODEL_KEY,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate text with an OpenAI-compatible chat completion API."
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to translate (defaults to STDIN).",
    )
    parser.add_argument(
        "-s",
        "--source",
        required=True,
        help="Source language code, e.g. 'en'.",
    )
    parser.add_argument(
        "-t",
        "--target",
        required=True,
        help="Destination language code, e.g. 'ja'.",
    )
    parser.add_argument(
        "--settings",
        default=SETTINGS_FILE or None,
        help="JSON settings file (default: %(default)s).",
    )
    parser.add_argument("--endpoint", help="Chat completion URL.")
    parser.add_argument("--model", help="Model identifier.")
    parser.add_argument("--api-key", dest="api_key", help="API key.")
    parser.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w", encoding="utf-8"),
        default=sys.stdout,
        help="Output file (defaults to STDOUT).",
    )
    return parser


def _prepare_context(args: argparse.Namespace) -> SettingsContext:
    if args.settings:
        context = SettingsContext.from_json_file(args.settings)
    else:
        context = SettingsContext()

    overrides = {
        ENDPOINT_KEY: args.endpoint,
        MODEL_KEY: args.model,
        API_KEY_KEY: args.api_key,
    }
    for key, value in overrides.items():
        if value is not None:
            context.override_setting(SETTINGS_SECTION, key, value)
    return context


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    text = args.text if args.text is not None else sys.stdin.read()
    if not text.strip():
        parser.error("nothing to translate")

    try:
        client = LLMTranslatorClient(context=_prepare_context(args))
        result = client.translate(
            text=text,
            source_language=args.source,
            destination_language=args.target,
        )
    except LLMTranslatorError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    args.output.write(result + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
