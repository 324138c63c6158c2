"""
Suggestion Ranker - fuzzy dropdown suggestions for a typed card name.

Pipeline per keystroke:
1. Score every catalog entry (substring / fuzzy boosts on top of score())
2. Filter weak candidates, sort, cap per section
3. Apply query intents (select-intent reordering, debit-first sections)
4. Report "no match" when both sections are empty
"""

from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from dineout_offers.matching import is_fuzzy_match, score, word_similar
from dineout_offers.models import (
    CardIdentity, CardKind, Catalogs, SuggestionGroup, SuggestionResult,
)
from dineout_offers.parsers import display_name
from dineout_offers.query.patterns import (
    DEBIT_PHRASES, DEBIT_TOKEN, SECTION_LABELS, SELECT_PHRASES, SELECT_WORD,
)
from dineout_offers.utils.logging_config import logger
from dineout_offers.utils.normalization import collation_key, normalize


class RankerOptions(BaseModel):
    """Tunable knobs of the ranker. Defaults mirror the production widget."""
    limit: int = Field(default=50, ge=1)
    substring_boost: float = 2.0
    fuzzy_boost: float = 1.5
    min_score: float = 0.3
    # Build an unresolved pseudo-card from unmatched query text so the offer
    # view can say "no offers for this card" instead of staying silent.
    synthesize_unmatched: bool = False


def has_debit_intent(query: str) -> bool:
    """True when the query asks for debit cards ("debit", "dc", "hdfc dc")."""
    q_lower = query.strip().lower()
    if any(phrase in q_lower for phrase in DEBIT_PHRASES):
        return True
    token = DEBIT_TOKEN
    return (
        q_lower == token
        or q_lower.startswith(token + ' ')
        or q_lower.endswith(' ' + token)
        or f' {token} ' in q_lower
    )


def has_select_intent(query: str) -> bool:
    """True when the query is after a "Select" card, typos included ("selct")."""
    q_norm = normalize(query)
    if any(phrase in q_norm for phrase in SELECT_PHRASES):
        return True
    return any(
        word == SELECT_WORD or word_similar(word, SELECT_WORD)
        for word in q_norm.split(' ') if word
    )


def partition_select(entries: Sequence[CardIdentity]) -> List[CardIdentity]:
    """Stable partition: entries mentioning "select" first."""
    selected = [e for e in entries if SELECT_WORD in e.normalized_key]
    others = [e for e in entries if SELECT_WORD not in e.normalized_key]
    return selected + others


class SuggestionRanker:
    """
    Ranks catalog entries against a free-text query.

    Stateless apart from its options; safe to call on every keystroke.
    """

    def __init__(self, options: Optional[RankerOptions] = None):
        self.options = options or RankerOptions()

    def _score_entry(self, query: str, q_norm: str, entry: CardIdentity) -> Tuple[float, bool, bool, float]:
        base = score(query, entry.display_name)
        contains = bool(q_norm) and q_norm in entry.normalized_key
        fuzzy = is_fuzzy_match(query, entry.display_name)

        total = base
        if contains:
            total += self.options.substring_boost
        if fuzzy:
            total += self.options.fuzzy_boost
        return total, contains, fuzzy, base

    def rank(self, query: str, entries: Sequence[CardIdentity]) -> List[CardIdentity]:
        """
        Ranked, filtered and capped entries of one catalog section.

        Sorted by boosted score descending; ties go to an exact name match,
        then to display-name collation order.
        """
        q_norm = normalize(query)
        if not q_norm:
            return []

        scored = []
        for entry in entries:
            total, contains, fuzzy, base = self._score_entry(query, q_norm, entry)
            if contains or fuzzy or base > self.options.min_score:
                exact = entry.normalized_key == q_norm
                scored.append((-total, not exact, collation_key(entry.display_name), entry))

        scored.sort(key=lambda item: item[:3])
        return [item[3] for item in scored[:self.options.limit]]

    def suggest(self, query: str, catalogs: Catalogs) -> SuggestionResult:
        """
        Build the grouped dropdown for `query`.

        Args:
            query: Raw text from the search box.
            catalogs: Current catalogs (only the selectable credit/debit
                families are searched).

        Returns:
            SuggestionResult. An empty or whitespace-only query returns no
            groups and no_match=False; any other query that matches nothing
            (punctuation only, say) is a no_match.
        """
        trimmed = (query or "").strip()
        if not trimmed:
            return SuggestionResult(query=query or "")

        credit = self.rank(trimmed, catalogs.credit)
        debit = self.rank(trimmed, catalogs.debit)
        debit_first = has_debit_intent(trimmed)

        if not credit and not debit:
            logger.debug(f"No catalog match for query '{trimmed}'")
            return SuggestionResult(
                query=query,
                debit_first=debit_first,
                no_match=True,
                synthesized=self.synthesize(trimmed) if self.options.synthesize_unmatched else None,
            )

        select_intent = has_select_intent(trimmed)
        if select_intent:
            credit = partition_select(credit)
            debit = partition_select(debit)

        sections = [(CardKind.CREDIT, credit), (CardKind.DEBIT, debit)]
        if debit_first:
            sections.reverse()

        groups = [
            SuggestionGroup(kind=kind, label=SECTION_LABELS[kind.value], entries=entries)
            for kind, entries in sections if entries
        ]
        return SuggestionResult(
            query=query,
            groups=groups,
            debit_first=debit_first,
            select_intent=select_intent,
        )

    def synthesize(self, query: str) -> Optional[CardIdentity]:
        """Unresolved pseudo-card for text that matched nothing."""
        display = display_name(query.strip())
        if not normalize(display):
            return None
        kind = CardKind.DEBIT if has_debit_intent(query) else CardKind.CREDIT
        return CardIdentity.from_display(display, kind, resolved=False)


def suggest(query: str, catalogs: Catalogs, options: Optional[RankerOptions] = None) -> SuggestionResult:
    """Convenience function for a one-off ranking."""
    return SuggestionRanker(options).suggest(query, catalogs)
