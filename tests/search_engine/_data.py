search_response = {
    "took": 5,
    "timed_out": False,
    "hits": {
        "total": {"value": 3, "relation": "eq"},
        "max_score": 2.5,
        "hits": [
            {
                "_index": "test",
                "_id": "1",
                "_score": 2.5,
                "_source": {"id": 1, "title": "red shoes", "color": "red"},
                "highlight": {
                    "title": ["<em>red</em> shoes"],
                    "body": [
                        "one <em>red</em>",
                        "two <em>red</em>",
                        "three <em>red</em>",
                        "four <em>red</em>",
                    ],
                },
            },
            {
                "_index": "test",
                "_id": "2",
                "_type": "_doc",
                "_score": None,
                "_source": {"id": 2, "title": "blue hat", "color": "blue"},
            },
            {
                "_index": "test",
                "_id": "3",
                "_score": 0,
                "_source": {"id": 3, "title": "green scarf"},
                "highlight": {"title": []},
            },
        ],
    },
}

minimal_response = {
    "took": 5,
    "hits": {
        "total": {"value": 1, "relation": "eq"},
        "hits": [{"_source": {"id": 1}, "_score": 2.0}],
    },
}

error_response = {
    "error": "index_not_found",
    "took": 1,
    "hits": {"total": {"value": 0, "relation": "eq"}, "hits": []},
}

facets_response = {
    "took": 2,
    "hits": {"total": {"value": 10000, "relation": "gte"}, "hits": []},
    "facets": {
        "color": {
            "terms": [
                {"term": "red", "count": 5},
                {"term": "blue", "count": 3},
            ]
        },
        "size": {"terms": [{"term": 42, "count": 1}]},
    },
    "aggregations": {
        "colors": {"buckets": [{"key": "red", "doc_count": 5}]}
    },
    "suggest": {
        "title": [{"text": "rde", "options": [{"text": "red"}]}]
    },
}

documents = [
    {"id": "d1", "title": "red shoes", "color": "red", "price": 10},
    {"id": "d2", "title": "blue hat", "color": "blue", "price": 20},
    {"id": "d3", "title": "red scarf", "color": "red", "price": 30},
]

mappings = {
    "properties": {
        "id": {"type": "keyword"},
        "title": {"type": "text"},
        "color": {"type": "keyword"},
        "price": {"type": "integer"},
    }
}
