"""
queries-resources: bundled linguistic resources for query understanding.

Provides lazily built, memoized stem maps, word cluster maps and
gazetteers (optionally stemmed) for English, French, Spanish and German.
"""

__version__ = "0.1.0"

from queries_resources.config import ResourcesConfig
from queries_resources.errors import (
    ParseError,
    ResourceError,
    ResourceIOError,
    ResourceNotFoundError,
    UnknownResourceError,
)
from queries_resources.registry import (
    ResourceRegistry,
    contains,
    gazetteer,
    get_default_registry,
    set_default_registry,
    stem,
    stemmer,
    stems,
    word_clusters,
)
from queries_resources.stems import Stemmer, no_stem
from queries_resources.text import normalize, tokenize_light

__all__ = [
    'ResourcesConfig',
    'ResourceRegistry',
    'ResourceError',
    'ResourceIOError',
    'ResourceNotFoundError',
    'ParseError',
    'UnknownResourceError',
    'Stemmer',
    'no_stem',
    'normalize',
    'tokenize_light',
    'stems',
    'stemmer',
    'stem',
    'word_clusters',
    'gazetteer',
    'contains',
    'get_default_registry',
    'set_default_registry',
    '__version__',
]
