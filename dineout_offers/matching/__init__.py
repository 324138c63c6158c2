from .similarity import edit_distance, similarity, score, is_fuzzy_match, word_similar

__all__ = ["edit_distance", "similarity", "score", "is_fuzzy_match", "word_similar"]
