from .generator import NGramLength, compute_ngrams, validate_length

__all__ = ["NGramLength", "compute_ngrams", "validate_length"]
