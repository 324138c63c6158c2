"""
String similarity for card-name search.

All comparisons run on normalize()d text. Two measures are exposed:
- score(): ranking signal for the dropdown (word overlap + edit similarity)
- is_fuzzy_match(): a looser yes/no predicate that also catches short,
  heavily misspelled single words ("reglia" ~ "regalia", "selct" ~ "select")
"""

from typing import List

from rapidfuzz.distance import Levenshtein

from dineout_offers.utils.normalization import normalize

SUBSTRING_SCORE = 100.0
WORD_OVERLAP_WEIGHT = 0.7
WHOLE_STRING_WEIGHT = 0.3

FUZZY_WHOLE_THRESHOLD = 0.6
FUZZY_WORD_THRESHOLD = 0.7
FUZZY_MIN_WORD_LENGTH = 3


def _words(norm: str) -> List[str]:
    return [w for w in norm.split(' ') if w]


def _ratio(a: str, b: str) -> float:
    # a and b are already normalized
    longest = max(len(a), len(b))
    if not longest:
        return 1.0
    return 1.0 - Levenshtein.distance(a, b) / longest


def edit_distance(a: str, b: str) -> int:
    """Unit-cost Levenshtein distance between the normalized forms."""
    return Levenshtein.distance(normalize(a), normalize(b))


def similarity(a: str, b: str) -> float:
    """1 - distance / longer length. 0.0 when either side is empty."""
    na, nb = normalize(a), normalize(b)
    if not na or not nb:
        return 0.0
    return _ratio(na, nb)


def score(query: str, candidate: str) -> float:
    """
    Ranking score of `candidate` for `query`.

    Returns SUBSTRING_SCORE when the candidate contains the query outright;
    otherwise 0.7 * word overlap + 0.3 * whole-string similarity, where word
    overlap is the share of query words found inside some candidate word.
    """
    q = normalize(query)
    c = normalize(candidate)
    if not q:
        return 0.0
    if q in c:
        return SUBSTRING_SCORE

    q_words = _words(q)
    c_words = _words(c)
    matching = sum(1 for qw in q_words if any(qw in cw for cw in c_words))
    overlap = matching / max(1, len(q_words))

    return overlap * WORD_OVERLAP_WEIGHT + _ratio(q, c) * WHOLE_STRING_WEIGHT


def word_similar(word: str, target: str, threshold: float = FUZZY_WORD_THRESHOLD) -> bool:
    """True when a single (normalized) word is within typo distance of target."""
    if len(word) < FUZZY_MIN_WORD_LENGTH or len(target) < FUZZY_MIN_WORD_LENGTH:
        return False
    return _ratio(word, target) >= threshold


def is_fuzzy_match(query: str, label: str) -> bool:
    """
    Loose match predicate used for boosting and filtering suggestions.

    Strategy hierarchy:
    1. Direct substring
    2. Whole-string similarity >= 0.6
    3. Any query word (3+ chars) >= 0.7 similar to any label word (3+ chars)
    """
    q = normalize(query)
    l = normalize(label)
    if not q or not l:
        return False

    if q in l:
        return True

    if _ratio(q, l) >= FUZZY_WHOLE_THRESHOLD:
        return True

    label_words = _words(l)
    for qw in _words(q):
        for lw in label_words:
            if word_similar(qw, lw):
                return True
    return False
