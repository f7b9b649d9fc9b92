"""
Port (interface) for secret stores.
Infrastructure adapters (e.g. SecretsManagerAdapter) must implement this interface.
"""

from abc import ABC, abstractmethod


class ISecretStore(ABC):
    @abstractmethod
    def get_secret(self, secret_id: str) -> dict:
        """Fetch and deserialize a secret by ARN or name. Returns the key-value pairs."""
        ...

    @abstractmethod
    def load_into_env(self, secret_id: str, *, overwrite: bool = False) -> list[str]:
        """Copy the secret's pairs into os.environ and return the keys that were set."""
        ...
