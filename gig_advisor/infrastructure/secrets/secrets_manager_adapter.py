"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

When GEMINI_SECRET_ARN is set, the entry points call load_into_env() once at
startup, before Settings.from_env(), so GEMINI_API_KEY (and optionally the
LANGFUSE_* keys) can live in a JSON secret instead of the environment.
"""

import json
import logging
import os

import boto3

from gig_advisor.domain.ports.secret_store_port import ISecretStore

logger = logging.getLogger(__name__)


class SecretsManagerAdapter(ISecretStore):
    """Fetches and deserializes secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None, client=None) -> None:
        self._client = client or boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_id: str) -> dict:
        """Fetch and deserialize a JSON secret by ARN or name."""
        response = self._client.get_secret_value(SecretId=secret_id)
        return json.loads(response["SecretString"])

    def load_into_env(self, secret_id: str, *, overwrite: bool = False) -> list[str]:
        """Inject the key-value pairs of a JSON secret into os.environ.

        Variables already exported win unless *overwrite* is set, so a local
        override keeps working in development.
        """
        loaded = []
        for key, value in self.get_secret(secret_id).items():
            if overwrite or key not in os.environ:
                os.environ[key] = str(value)
                loaded.append(key)
        logger.info("Loaded %d secret value(s) into the environment", len(loaded))
        return loaded
