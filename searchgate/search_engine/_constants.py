DEFAULT_INDEX_SETTINGS = {
    "number_of_shards": 1,
    "number_of_replicas": 0,
}

DEFAULT_SORT = ["_score"]

DEFAULT_ID_FIELD = "id"

# Settings that cannot be changed once the index exists.
STATIC_SETTINGS = ["number_of_shards"]

MAX_HIGHLIGHTS = 3

HIGHLIGHT_SEPARATOR = " … "

HIGHLIGHT_SUFFIX = "_highlight"
