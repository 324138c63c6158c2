"""
Centralized query-intent patterns for the SuggestionRanker.
"""

# Any of these substrings in the lower-cased query signals debit intent
# ("debit card", "debit cards" are covered by "debit").
DEBIT_PHRASES = ['debit card', 'debit cards', 'debit']

# Short-hand token for debit card; must stand alone in the query
DEBIT_TOKEN = 'dc'

# Normalized phrases that signal the user is after a "Select" card
SELECT_PHRASES = ['select credit card', 'select card']

# Word matched (with typo tolerance) for select intent, and the marker
# looked for in catalog entries that get boosted
SELECT_WORD = 'select'

SECTION_LABELS = {
    'credit': 'Credit Cards',
    'debit': 'Debit Cards',
}
