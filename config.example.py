# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets. Put the API key in .env (gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "PRIOTASK_APP_NAME": "App display name (default: priotask).",
    "PRIOTASK_LOG_LEVEL": "Console logging level (default: INFO).",
    "PRIOTASK_DATA_DIR": "Local directory for log files (default: .local/priotask).",
    # LLM / OpenRouter (advice only; tasks work without it)
    "PRIOTASK_OPENROUTER_API_KEY": "OpenRouter API key. Without it an offline advice stub is used.",
    "PRIOTASK_OPENROUTER_BASE_URL": "OpenRouter base URL (default: https://openrouter.ai/api/v1).",
    "PRIOTASK_LLM_MODELS": "Comma/space separated list of models to try in order.",
    "PRIOTASK_HTTP_REFERER": "Optional OpenRouter metadata header.",
    "PRIOTASK_APP_TITLE": "Optional OpenRouter metadata header title.",
    "PRIOTASK_LLM_CONNECT_TIMEOUT_SECONDS": "Connect timeout for advice requests (default: 5).",
    "PRIOTASK_LLM_READ_TIMEOUT_SECONDS": "Read timeout for advice requests (default: 30).",
    # Advisory
    "PRIOTASK_ADVISORY_MAX_TASKS": "Max active tasks listed in the advice prompt (default: 25).",
}
