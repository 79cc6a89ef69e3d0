# Keys read from the settings section of the endpoint
ENDPOINT_KEY = "Endpoint"
API_KEY_KEY = "ApiKey"
MODEL_KEY = "Model"
TEMPERATURE_KEY = "Temperature"
MAX_TOKENS_KEY = "MaxTokens"
SYSTEM_PROMPT_KEY = "SystemPrompt"
DISABLE_SPAM_CHECKS_KEY = "DisableSpamChecks"
MIN_DELAY_KEY = "MinDelaySeconds"
MAX_DELAY_KEY = "MaxDelaySeconds"

SETTINGS_KEYS = [
    ENDPOINT_KEY,
    API_KEY_KEY,
    MODEL_KEY,
    TEMPERATURE_KEY,
    MAX_TOKENS_KEY,
    SYSTEM_PROMPT_KEY,
    DISABLE_SPAM_CHECKS_KEY,
    MIN_DELAY_KEY,
    MAX_DELAY_KEY,
]

# Chat-completion roles
SYSTEM_ROLE = "system"
USER_ROLE = "user"

# Chat-completion response fields
ERROR_FIELD = "error"
ERROR_MESSAGE_FIELD = "message"
CHOICES_FIELD = "choices"
MESSAGE_FIELD = "message"
CONTENT_FIELD = "content"
REASONING_FIELD = "reasoning"
