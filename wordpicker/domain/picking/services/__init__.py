from .adjacency_scanner import AdjacencyScanner
from .export_encoder import ExportDocument, ExportEncoder
from .tokenizer import ArticleTokenizer, normalize_word

__all__ = [
    "AdjacencyScanner",
    "ArticleTokenizer",
    "ExportDocument",
    "ExportEncoder",
    "normalize_word",
]
