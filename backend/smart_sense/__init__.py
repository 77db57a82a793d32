"""SmartSense AI: Gemini-backed writing, learning, medical and translation helpers."""
