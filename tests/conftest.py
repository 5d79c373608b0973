import json

import pytest


@pytest.fixture
def context_data():
    return {
        "root": "/tmp/book",
        "config": {
            "book": {"title": "Example", "src": "src"},
            "preprocessor": {"inline-mathjax": {"command": "mdbook-inline-mathjax"}},
        },
        "renderer": "html",
        "mdbook_version": "0.4.40",
        "__non_exhaustive": None,
    }


@pytest.fixture
def book_data():
    return {
        "sections": [
            {"PartTitle": "Basics"},
            {
                "Chapter": {
                    "name": "Intro",
                    "content": "# Intro\n\nLet $x$ be real and $$x^2 \\ge 0$$.\n",
                    "number": [1],
                    "sub_items": [
                        {
                            "Chapter": {
                                "name": "Prices",
                                "content": "It costs \\$5, or $p$ in general.",
                                "number": [1, 1],
                                "sub_items": [],
                                "path": "intro/prices.md",
                                "source_path": "intro/prices.md",
                                "parent_names": ["Intro"],
                            }
                        }
                    ],
                    "path": "intro.md",
                    "source_path": "intro.md",
                    "parent_names": [],
                }
            },
            "Separator",
            {
                "Chapter": {
                    "name": "Draft",
                    "content": "",
                    "number": None,
                    "sub_items": [],
                    "path": None,
                    "source_path": None,
                    "parent_names": [],
                }
            },
        ],
        "__non_exhaustive": None,
    }


@pytest.fixture
def stdin_payload(context_data, book_data):
    return json.dumps([context_data, book_data])
