#!/usr/bin/env python3
"""Recipe: Ask a registered model for one menu suggestion.

Problem:
    You want the smallest end-to-end call: init, look up a model, generate.

Run:
    OPENAI_API_KEY=... python cookbook/menu-suggestion.py --theme pirate

Success check:
    - One line of menu text is printed, followed by token usage.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

import genai_openai
from genai_openai import GenerateRequest, GenerationConfig, user_text

DEFAULT_MODEL = "gpt-4o-mini"


async def main_async(theme: str, *, model_name: str) -> None:
    genai_openai.init()

    model = genai_openai.model(model_name)
    if model is None:
        raise SystemExit(f"menu-suggestion: failed to find model {model_name!r}")

    resp = await model.generate(
        GenerateRequest(
            messages=[
                user_text(f"Suggest an item for the menu of a {theme} themed restaurant")
            ],
            config=GenerationConfig(temperature=1),
        )
    )

    print(resp.text())
    print(
        f"tokens: input={resp.usage.input_tokens} "
        f"output={resp.usage.output_tokens} total={resp.usage.total_tokens}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate one menu suggestion for a themed restaurant.",
    )
    parser.add_argument("--theme", default="space", help="Restaurant theme.")
    parser.add_argument("--model", default=DEFAULT_MODEL, help="Model name.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logs.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    asyncio.run(main_async(args.theme, model_name=args.model))


if __name__ == "__main__":
    main()
