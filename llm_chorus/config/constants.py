"""
Provider Wire Constants

Central location for upstream endpoints, protocol versions and fixed
payload fragments. Model names and limits live in config/settings.py.
"""

# Anthropic Messages API
ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"

# Google Generative Language API (key travels as a query parameter)
GOOGLE_GENERATE_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
)

# Groq speaks the OpenAI chat completions dialect
GROQ_CHAT_URL = "https://api.groq.com/openai/v1/chat/completions"

GOOGLE_SAFETY_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"
GOOGLE_SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)

# Upper bound on upstream text carried in DomainError.raw_detail
RAW_DETAIL_LIMIT = 200

UNAVAILABLE_PLACEHOLDER = "[{name} response unavailable]"

# Environment variable names
ANTHROPIC_API_KEY_ENV = "ANTHROPIC_API_KEY"
GOOGLE_API_KEY_ENV = "GOOGLE_API_KEY"
GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
GROQ_API_KEY_ENV = "GROQ_API_KEY"
PROVIDER_TIMEOUT_ENV = "CHORUS_PROVIDER_TIMEOUT"
SYNTHESIS_POLICY_ENV = "CHORUS_SYNTHESIS_POLICY"
DEFAULT_PROVIDERS_ENV = "CHORUS_DEFAULT_PROVIDERS"
