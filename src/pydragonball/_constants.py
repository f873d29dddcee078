"""Internal constants shared across the library."""

BASE_URL = "https://dragonball-api.com/api"
USER_AGENT = "pydragonball/1.0"

#: Items shown per page in every catalog view.
ITEMS_PER_PAGE = 12

#: Default request timeout in seconds.
REQUEST_TIMEOUT = 10.0

#: Loaded-flag name for the aggregate statistics load.
STATS_FLAG = "stats"
