import asyncio
import os
import sys

# Add project root to path so we can import farmbot
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from farmbot.core.config import settings
from farmbot.integrations.messaging.whatsapp import WhatsAppProvider


async def main():
    print("--- Verifying WhatsApp Cloud API integration ---")
    test_phone = os.getenv("TEST_PHONE", "")
    if not test_phone:
        print("Please set TEST_PHONE env variable (international format, digits only).")
        return

    print(f"Attempting to send a text message to: {test_phone}")

    async with WhatsAppProvider(settings) as client:
        result = await client.send_text(test_phone, "Hello! This is an integration verification test from FarmBot 🌾")

    if result.ok:
        print(f"✅ Success! Message ID: {result.message_id}")
    else:
        print(f"❌ Failed to send message: {result.status_code} {result.error}")


if __name__ == "__main__":
    asyncio.run(main())
