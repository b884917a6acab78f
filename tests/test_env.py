import pytest

from notionkit import env


def test_notion_token(clean_env):
    with pytest.raises(RuntimeError, match=r"'NOTION_TOKEN' is not set"):
        env.get_notion_token()

    clean_env.setenv("NOTION_TOKEN", "secret")
    env.get_notion_token.cache_clear()
    assert env.get_notion_token() == "secret"


def test_defaults(clean_env):
    assert env.get_notion_version() == env.DEFAULT_NOTION_VERSION
    assert env.get_notion_api_url() == "https://api.notion.com/v1/"


def test_overrides(clean_env):
    clean_env.setenv("NOTION_VERSION", "2021-05-13")
    clean_env.setenv("NOTION_API_URL", "http://localhost:8080/v1/")

    assert env.get_notion_version() == "2021-05-13"
    assert env.get_notion_api_url() == "http://localhost:8080/v1/"


def test_invalid_url(clean_env):
    clean_env.setenv("NOTION_API_URL", "api.notion.com")

    with pytest.raises(RuntimeError, match=r"'NOTION_API_URL' is invalid"):
        env.get_notion_api_url()
