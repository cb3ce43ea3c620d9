# Credential lookup for the DevMind agent.
# Environment variables win; AWS Secrets Manager is consulted only when a
# secret name is configured and boto3 is installed.

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from typing import Optional

try:
    import boto3
    from botocore.exceptions import BotoCoreError, ClientError
except ImportError:  # pragma: no cover - optional dependency
    boto3 = None
    BotoCoreError = ClientError = Exception

# infrastructure.logging imports config, which imports this module
logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _fetch_secret(secret_name: str, region_name: Optional[str] = None) -> Optional[str]:
    """Retrieve a raw secret string from AWS Secrets Manager."""
    if boto3 is None:
        logger.debug(f"boto3 not installed; skipping secret lookup for {secret_name}")
        return None
    region = region_name or os.getenv("AWS_REGION", "us-east-1")
    session = boto3.session.Session()
    client = session.client(service_name="secretsmanager", region_name=region)
    try:
        response = client.get_secret_value(SecretId=secret_name)
    except (BotoCoreError, ClientError) as e:
        logger.warning(f"Could not read secret {secret_name}: {e}")
        return None
    return response.get("SecretString")


def _extract_value(secret: str, key: str) -> str:
    """Secrets stored as JSON objects are unwrapped using ``key``."""
    try:
        payload = json.loads(secret)
    except ValueError:
        return secret
    if isinstance(payload, dict) and key in payload:
        return str(payload[key])
    return secret


def get_env_or_secret(env_var: str, secret_name_env: Optional[str] = None) -> Optional[str]:
    """Get a credential from an environment variable or Secrets Manager.

    ``secret_name_env`` names the environment variable holding the secret id;
    without it no remote lookup happens.
    """
    value = os.getenv(env_var)
    if value:
        return value

    secret_name = os.getenv(secret_name_env) if secret_name_env else None
    if not secret_name:
        return None
    secret = _fetch_secret(secret_name)
    if secret is None:
        return None
    return _extract_value(secret, env_var)
