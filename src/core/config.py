from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

_cached_clerk_secret: str | None = None


def _resolve_clerk_secret() -> str:
    """Fetch Clerk secret from Secrets Manager at runtime, with caching."""
    global _cached_clerk_secret
    if _cached_clerk_secret is not None:
        return _cached_clerk_secret

    # Local dev: use env var directly
    direct = environ.get("CLERK_SECRET_KEY", "")
    if direct:
        _cached_clerk_secret = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("CLERK_SECRET_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_clerk_secret = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_clerk_secret


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    database_url: str | None = None
    aurora_host: str
    aurora_port: int
    aurora_database: str
    aurora_user: str
    aurora_password: str
    aurora_secret_arn: str | None = None
    generation_model_id: str
    clerk_secret_key: str = ""
    environment: str
    log_level: str = "INFO"
    alembic_config: str = "/var/task/alembic.ini"


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config, _cached_clerk_secret
    _cached_config = None
    _cached_clerk_secret = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        database_url=environ.get("DATABASE_URL") or None,
        aurora_host=environ.get("AURORA_HOST", "localhost"),
        aurora_port=int(environ.get("AURORA_PORT", "5432")),
        aurora_database=environ.get("AURORA_DATABASE", "roster"),
        aurora_user=environ.get("AURORA_USER", "roster"),
        aurora_password=environ.get("AURORA_PASSWORD", "localdev"),
        aurora_secret_arn=environ.get("AURORA_SECRET_ARN"),
        generation_model_id=environ.get("GENERATION_MODEL_ID", "us.amazon.nova-2-lite-v1:0"),
        clerk_secret_key=_resolve_clerk_secret(),
        environment=environ.get("ENVIRONMENT", "local"),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        alembic_config=environ.get("ALEMBIC_CONFIG", "/var/task/alembic.ini"),
    )
    return _cached_config
