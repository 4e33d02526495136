"""Default configuration settings for the tldr-cli package."""

from __future__ import annotations

# --- Summarization ---
# Character budget a single service call is trusted with.
DEFAULT_MAX_CHUNK_CHARS = 4096 * 3
DEFAULT_MAX_COLLAPSE_DEPTH = 10
DEFAULT_MAX_CONCURRENT_CHUNKS = 5

# --- Content fetching ---
DEFAULT_FETCH_TIMEOUT = 30.0
USER_AGENT = "Mozilla/5.0 (compatible; tldr-cli/0.1)"

# --- LLM ---
DEFAULT_OLLAMA_HOST = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "gemma3:4b"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai"
STATIC_SUMMARY = "A summary of the article"

# --- Server ---
DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8082
