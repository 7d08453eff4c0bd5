"""Simple helper to fetch a random joke from a running joke service."""

import sys
from typing import Any, Dict

import requests

from app.config import settings

DEFAULT_BASE_URL = f"http://localhost:{settings.port}"


def fetch_random_joke(base_url: str = DEFAULT_BASE_URL) -> Dict[str, Any]:
    """Call GET /jokes/random and extract the question/answer fields."""
    try:
        response = requests.get(f"{base_url.rstrip('/')}/jokes/random", timeout=5)
        response.raise_for_status()
        joke_data = response.json()
        return {
            "question": joke_data.get("question", "No question found."),
            "answer": joke_data.get("answer", "No answer found."),
        }
    except requests.RequestException as exc:
        return {"error": str(exc)}


if __name__ == "__main__":
    joke = fetch_random_joke(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_BASE_URL)
    print(joke)
