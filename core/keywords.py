"""
Keyword tables for service and category detection.

Each table is an ordered tuple of (label, keywords) pairs. Matching walks
the table top to bottom and the first label with a keyword present wins,
so reordering entries changes results. Keywords are lower-case.
"""
from typing import Tuple

KeywordTable = Tuple[Tuple[str, Tuple[str, ...]], ...]

# Labels assigned outside the category table
INCOME_CATEGORY = "Income"
DEFAULT_CATEGORY = "Other"

SERVICE_KEYWORDS: KeywordTable = (
    ("Netflix", ("netflix",)),
    ("Spotify", ("spotify",)),
    ("PlayStation", ("playstation", "sony interactive")),
    ("Discord", ("discord",)),
    ("ChatGPT Plus", ("chatgpt", "openai")),
    ("Replit", ("replit",)),
    ("Supabase", ("supabase",)),
    ("Railway", ("railway",)),
    ("YouTube Premium", ("youtube premium", "google *youtube", "youtubepremium")),
    ("Disney+", ("disney plus", "disneyplus", "disney+")),
    ("Hulu", ("hulu",)),
    ("HBO Max", ("hbo max", "hbomax", "max.com")),
    ("Amazon Prime", ("amazon prime", "amzn prime", "prime video")),
    ("Apple", ("apple.com/bill", "itunes", "apple music", "icloud")),
    ("Xbox", ("xbox",)),
    ("Steam", ("steampowered", "steam games", "steam purchase")),
    ("Adobe", ("adobe",)),
    ("Microsoft 365", ("microsoft 365", "office 365", "msft *m365")),
    ("Google One", ("google one", "google storage")),
    ("Dropbox", ("dropbox",)),
    ("Notion", ("notion.so", "notion labs")),
    ("GitHub", ("github",)),
    ("Vercel", ("vercel",)),
    ("AWS", ("aws.amazon", "amazon web services")),
    ("DigitalOcean", ("digitalocean",)),
    ("Claude", ("anthropic", "claude.ai")),
    ("Midjourney", ("midjourney",)),
    ("Slack", ("slack",)),
    ("Zoom", ("zoom.us", "zoom video")),
    ("Coinbase", ("coinbase",)),
    ("DoorDash", ("doordash",)),
    ("Uber Eats", ("uber eats", "ubereats")),
)

CATEGORY_KEYWORDS: KeywordTable = (
    ("Streaming", (
        "netflix", "spotify", "hulu", "disney", "hbo max", "hbomax", "youtube", "prime video",
        "apple music", "paramount", "peacock", "crunchyroll", "twitch", "max.com",
    )),
    ("Food", (
        "doordash", "uber eats", "ubereats", "grubhub", "instacart", "starbucks",
        "mcdonald", "chipotle", "restaurant", "pizza", "coffee",
    )),
    ("Gaming", (
        "playstation", "sony interactive", "xbox", "steampowered", "steam games",
        "steam purchase", "nintendo", "epic games", "riot games", "blizzard",
    )),
    ("Software", (
        "adobe", "microsoft", "apple.com/bill", "itunes", "icloud", "1password",
        "jetbrains",
    )),
    ("Cloud Services", (
        "aws.amazon", "amazon web services", "digitalocean", "supabase", "railway",
        "vercel", "heroku", "netlify", "google cloud", "dropbox",
    )),
    ("Productivity", (
        "notion.so", "notion labs", "google one", "google storage", "evernote",
        "todoist", "canva.com", "grammarly",
    )),
    ("AI Tools", (
        "openai", "chatgpt", "anthropic", "claude.ai", "midjourney", "perplexity",
    )),
    ("Development", (
        "github", "replit", "gitlab", "stackoverflow", "docker",
    )),
    ("Communication", (
        "discord", "slack", "zoom.us", "zoom video", "telegram", "twilio",
    )),
    ("Crypto", (
        "coinbase", "binance", "kraken", "crypto.com",
    )),
)
