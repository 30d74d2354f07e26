"""Lazy-initialized clients — reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3

from core.config import get_config
from core.db import Store
from core.services.generation import BedrockTitleGenerator


@lru_cache(maxsize=1)
def get_store() -> Store:
    store = Store.from_config(get_config())
    store.connect()
    return store


@lru_cache(maxsize=1)
def get_bedrock_client() -> Any:
    config = get_config()
    return boto3.client("bedrock-runtime", region_name=config.aws_region)


def get_title_generator() -> BedrockTitleGenerator:
    return BedrockTitleGenerator(get_bedrock_client(), get_config().generation_model_id)
