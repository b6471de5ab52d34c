import logging
import os
from typing import List, Optional, Sequence

import discord

from oil_news import Article, NewsConfig, NewsFeedService
from oil_news.logging_config import setup_logging

logger = logging.getLogger("discord_bot")

DISCORD_MESSAGE_LIMIT = 2000
HEADLINE_COUNT = 3


def _clip(text: str) -> str:
    # Discord rejects messages over 2000 characters.
    if len(text) > DISCORD_MESSAGE_LIMIT:
        return text[: DISCORD_MESSAGE_LIMIT - 3] + "..."
    return text


def filter_by_category(articles: Sequence[Article], category: Optional[str]) -> List[Article]:
    if not category:
        return list(articles)
    wanted = category.strip().lower()
    return [a for a in articles if a.category.lower() == wanted]


def format_headlines(articles: Sequence[Article], limit: int = HEADLINE_COUNT) -> str:
    if not articles:
        return "No news available right now."
    response = f"📰 Latest {min(limit, len(articles))} headlines\n\n"
    for item in articles[:limit]:
        response += f"**{item.title}**\n"
        response += f"*{item.source} - {item.category} - {item.published_at.strftime('%Y-%m-%d %H:%M')}*\n"
        response += f"<{item.source_url}>  `{item.slug}`\n\n"
    return _clip(response)


def format_article(article: Optional[Article]) -> str:
    if article is None:
        return "Article not found."
    response = f"**{article.title}**\n"
    response += f"*{article.source} - {article.category} - {article.read_time}*\n\n"
    response += f"{article.summary}\n\n<{article.source_url}>"
    return _clip(response)


def build_client(service: NewsFeedService) -> discord.Client:
    intents = discord.Intents.default()
    intents.message_content = True  # needed to read commands

    client = discord.Client(intents=intents)

    @client.event
    async def on_ready():
        logger.info("Logged in as %s", client.user)

    @client.event
    async def on_message(message):
        # Ignore our own messages.
        if message.author == client.user:
            return

        content = message.content.strip()
        if content.startswith("!news"):
            category = content[len("!news"):].strip() or None
            articles = filter_by_category(service.get_news(), category)
            await message.channel.send(format_headlines(articles))
        elif content.startswith("!article"):
            key = content[len("!article"):].strip()
            if not key:
                await message.channel.send("Usage: !article <id|slug>")
                return
            await message.channel.send(format_article(service.get_news_by_id(key)))

    return client


def main() -> None:
    # from_env loads .env into os.environ, so DISCORD_BOT_TOKEN is visible below.
    config = NewsConfig.from_env()
    setup_logging(config.log_level)

    # Put DISCORD_BOT_TOKEN="YOUR_BOT_TOKEN" in the .env file.
    token = os.getenv("DISCORD_BOT_TOKEN")
    if not token:
        raise ValueError("DISCORD_BOT_TOKEN is not set. Check your .env file.")

    service = NewsFeedService(config=config)
    try:
        build_client(service).run(token, log_handler=None)
    finally:
        service.stop(timeout=5)


if __name__ == "__main__":
    main()
