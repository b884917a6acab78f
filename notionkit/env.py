import functools
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_NOTION_VERSION = "2022-06-28"
DEFAULT_NOTION_API_URL = "https://api.notion.com/v1/"


@functools.cache
def get_notion_token() -> str:
    token = os.environ.get("NOTION_TOKEN", None)

    if not token:
        raise RuntimeError("Environment variable 'NOTION_TOKEN' is not set.")

    return token


@functools.cache
def get_notion_version() -> str:
    version = os.environ.get("NOTION_VERSION", None)

    if not version:
        logger.debug(f"NOTION_VERSION is not set, using {DEFAULT_NOTION_VERSION}")
        return DEFAULT_NOTION_VERSION

    return version


@functools.cache
def get_notion_api_url() -> str:
    url = os.environ.get("NOTION_API_URL", None) or DEFAULT_NOTION_API_URL

    if not url.startswith(("https://", "http://")):
        raise RuntimeError(f"Environment variable 'NOTION_API_URL' is invalid: {url}")

    return url
