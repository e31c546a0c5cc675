"""Stop words excluded from query keywords (English and Portuguese)."""

from __future__ import annotations

ENGLISH_STOP_WORDS: frozenset[str] = frozenset({
    "the", "is", "at", "which", "on", "a", "an", "and", "or", "but", "in",
    "with", "to", "for", "of", "as", "by", "this", "that", "it", "are",
    "was", "were", "been", "be", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might",
})

PORTUGUESE_STOP_WORDS: frozenset[str] = frozenset({
    "o", "a", "os", "as", "um", "uma", "uns", "umas", "de", "da", "do",
    "das", "dos", "em", "no", "na", "nos", "nas", "por", "para", "com",
    "sem", "sob", "sobre", "e", "ou", "mas", "pois", "que", "como",
    "quando", "onde", "é", "são", "foi", "era", "ser", "estar", "ter",
    "haver", "isso", "este", "esse", "aquele", "esta", "essa", "aquela",
    "seu", "sua", "seus", "suas", "meu", "minha", "meus", "minhas",
})

DEFAULT_STOP_WORDS: frozenset[str] = ENGLISH_STOP_WORDS | PORTUGUESE_STOP_WORDS
