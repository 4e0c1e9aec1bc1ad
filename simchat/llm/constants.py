"""Shared constants for the chat-completion backend."""

API_KEY_ENV = "DEEPSEEK_API_KEY"
"""Environment variable holding the bearer credential."""

BASE_URL_ENV = "DEEPSEEK_BASE_URL"
"""Environment variable overriding the API base URL."""

MODEL_ENV = "DEEPSEEK_MODEL"
"""Environment variable overriding the model identifier."""

DEFAULT_LLM_BASE_URL = "https://api.deepseek.com/v1"

DEFAULT_LLM_MODEL = "deepseek-chat"

DEFAULT_LLM_TEMPERATURE = 0.2
"""Low sampling temperature keeps control directives terse and predictable."""

CONTEXT_WINDOW = 8
"""Number of trailing history entries sent along with a new prompt."""

EMPTY_REPLY = "(empty reply)"
"""Placeholder used when the backend returns no completion candidates."""

SYSTEM_PROMPT = (
    "You are controlling a traffic simulation. You may include lines like "
    "ACTION: pause or ACTION: resume. Keep replies short."
)
