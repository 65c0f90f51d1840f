"""
Домен Corpus (D3): параллельная обработка корпуса и reduce.
"""

from .corpus_orchestrator import CorpusOrchestrator
from .factory import create_corpus_orchestrator
from .reducer import merge_stop_maps, sort_stop_map, reduce_corpus

__all__ = [
    "CorpusOrchestrator",
    "create_corpus_orchestrator",
    "merge_stop_maps",
    "sort_stop_map",
    "reduce_corpus",
]
