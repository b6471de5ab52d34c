import pytest

from oil_news.config import NewsConfig


def test_defaults():
    cfg = NewsConfig.from_env({})

    assert cfg.refresh_interval == 600.0
    assert cfg.fetch_timeout == 15.0
    assert cfg.max_feed_bytes == 5 * 1024 * 1024
    assert cfg.fetch_workers == 4
    assert cfg.max_articles == 80
    assert cfg.keep_last_on_total_failure is False
    assert cfg.log_level == "INFO"
    assert "LiveOilPrices" in cfg.user_agent


def test_overrides():
    cfg = NewsConfig.from_env({
        "OIL_NEWS_REFRESH_INTERVAL": "120",
        "OIL_NEWS_FETCH_TIMEOUT": "5.5",
        "OIL_NEWS_MAX_FEED_BYTES": "1024",
        "OIL_NEWS_USER_AGENT": "bot/2.0",
        "OIL_NEWS_FETCH_WORKERS": "1",
        "OIL_NEWS_MAX_ARTICLES": "20",
        "OIL_NEWS_KEEP_LAST_ON_FAILURE": "yes",
        "OIL_NEWS_LOG_LEVEL": "debug",
    })

    assert cfg.refresh_interval == 120.0
    assert cfg.fetch_timeout == 5.5
    assert cfg.max_feed_bytes == 1024
    assert cfg.user_agent == "bot/2.0"
    assert cfg.fetch_workers == 1
    assert cfg.max_articles == 20
    assert cfg.keep_last_on_total_failure is True
    assert cfg.log_level == "DEBUG"


def test_blank_values_keep_defaults():
    cfg = NewsConfig.from_env({"OIL_NEWS_FETCH_TIMEOUT": "  ", "OIL_NEWS_USER_AGENT": ""})

    assert cfg.fetch_timeout == 15.0
    assert "LiveOilPrices" in cfg.user_agent


@pytest.mark.parametrize("env", [
    {"OIL_NEWS_FETCH_WORKERS": "many"},
    {"OIL_NEWS_KEEP_LAST_ON_FAILURE": "maybe"},
    {"OIL_NEWS_REFRESH_INTERVAL": "0"},
])
def test_invalid_values_raise(env):
    with pytest.raises(ValueError):
        NewsConfig.from_env(env)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setattr("oil_news.config.load_dotenv", lambda: False)
    monkeypatch.setenv("OIL_NEWS_MAX_ARTICLES", "10")

    assert NewsConfig.from_env().max_articles == 10
