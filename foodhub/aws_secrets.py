import logging
import os

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from foodhub import config

logger = logging.getLogger(__name__)

# env var -> secret name suffix
BACKEND_SECRETS = {
    "SUPABASE_URL": "supabase-url",
    "SUPABASE_ANON_KEY": "supabase-anon-key",
    "SUPABASE_JWT_SECRET": "supabase-jwt-secret",
}


def get_secret(secret_name, region=None):
    """Get secret from AWS Secrets Manager"""
    client = boto3.client("secretsmanager", region_name=region or config.AWS_DEFAULT_REGION)
    try:
        response = client.get_secret_value(SecretId=secret_name)
        return response["SecretString"]
    except (BotoCoreError, ClientError) as e:
        logger.warning(f"[SECRETS] Could not read {secret_name}: {e}")
        return None


def setup_credentials():
    """Fill missing backend settings from AWS Secrets Manager"""
    loaded = []
    for env_name, suffix in BACKEND_SECRETS.items():
        if getattr(config, env_name):
            continue
        value = get_secret(f"{config.SECRETS_PREFIX}/{suffix}")
        if value:
            os.environ[env_name] = value
            setattr(config, env_name, value.rstrip("/") if env_name == "SUPABASE_URL" else value)
            loaded.append(env_name)
    return loaded
