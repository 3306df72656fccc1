import asyncio
import os
import sys

# Add project root to path so we can import farmbot
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from farmbot.core.config import settings
from farmbot.llm.engine import CompletionClient
from farmbot.llm.prompts import REFUSAL_MESSAGE


async def main():
    print("--- Verifying Gemini completion path ---")
    if not settings.gemini_api_key:
        print("❌ GEMINI_API_KEY is not set")
        return

    client = CompletionClient(settings)

    for question in ("How to grow strawberries?", "What's the capital of France?"):
        print(f"\nAsking: {question!r}")
        result = await client.complete_text(question)
        status = "✅" if result.ok else "❌"
        print(f"{status} Reply ({result.model}):\n{result.text}")
        print(f"Usage: IN={result.tokens_in} OUT={result.tokens_out}")
        if result.text == REFUSAL_MESSAGE:
            print("(exact refusal)")


if __name__ == "__main__":
    asyncio.run(main())
