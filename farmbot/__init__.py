"""FarmBot: WhatsApp agriculture assistant backed by Gemini."""

__version__ = "1.0.0"
