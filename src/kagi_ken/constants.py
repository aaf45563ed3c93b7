KAGI_HOST = "kagi.com"
KAGI_BASE_URL = f"https://{KAGI_HOST}"

SEARCH_URL = f"{KAGI_BASE_URL}/html/search"
SUMMARY_URL = f"{KAGI_BASE_URL}/mother/summary_labs"
SUMMARIZER_REFERER = f"{KAGI_BASE_URL}/summarizer"

SESSION_COOKIE_NAME = "kagi_session"

# Kagi's bot defenses are friendlier to a desktop browser identity.
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/133.0.0.0 Safari/537.36"
)

STREAM_CONTENT_TYPE = "application/vnd.kagi.stream"

DEFAULT_SEARCH_LIMIT = 10

# Target languages accepted by the Universal Summarizer.
SUPPORTED_LANGUAGES: tuple[str, ...] = (
    "BG",
    "CS",
    "DA",
    "DE",
    "EL",
    "EN",
    "ES",
    "ET",
    "FI",
    "FR",
    "HU",
    "ID",
    "IT",
    "JA",
    "KO",
    "LT",
    "LV",
    "NB",
    "NL",
    "PL",
    "PT",
    "RO",
    "RU",
    "SK",
    "SL",
    "SV",
    "TR",
    "UK",
    "ZH",
    "ZH-HANT",
)

DEFAULT_LANGUAGE = "EN"
