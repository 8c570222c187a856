"""Default values and constants."""

from __future__ import annotations

# Credentials
API_KEY_ENV = "OPENAI_API_KEY"

# Target source language
LANGUAGE = "Ruby"
FENCE_TAG = "ruby"

# Completion defaults
CONTEXT_BUDGET = 4097  # prompt characters + max_tokens
DEFAULT_MODE = "comment"
DEFAULT_MODEL_KEY = "davinci003"
DEFAULT_MODEL = "gpt-3.5-turbo"
MODELS = {
    "davinci003": "text-davinci-003",
    "fast": "gpt-3.5-turbo",
}

# Clipboard
CLIPBOARD_TIMEOUT = 5  # seconds

# Presentation
DELIMITER_CHAR = "~"
DELIMITER_WIDTH = 20
NO_RESPONSE = "No response!!"

