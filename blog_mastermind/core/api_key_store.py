from typing import Optional


class ApiKeyStore:
    """In-memory holder for a user-supplied OpenRouter API key.

    One instance lives on ``app.state`` for the lifetime of the process and is
    handed to route handlers through ``get_api_key_store``. Nothing is
    persisted; a restart forgets the key. Writes are unguarded, the last
    writer wins.
    """

    def __init__(self, api_key: Optional[str] = None):
        self._api_key = api_key

    def get(self) -> Optional[str]:
        return self._api_key

    def set(self, api_key: str) -> None:
        self._api_key = api_key

    def clear(self) -> None:
        self._api_key = None

    def has_key(self) -> bool:
        return bool(self._api_key)

    def preview(self) -> Optional[str]:
        """Masked form of the stored key: first 8 and last 4 characters."""
        if not self._api_key:
            return None
        return f"{self._api_key[:8]}...{self._api_key[-4:]}"
