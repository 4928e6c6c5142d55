# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""Static scripture tables and topic lookups.

All tables are immutable: tuples or read-only mappings. Random picks
from them are made by callers with an injected random.Random.
"""

from types import MappingProxyType
from typing import List, Tuple


BIBLE_VERSES = MappingProxyType({
    "creation": "In the beginning God created the heaven and the earth. (Genesis 1:1)",
    "light": "And God said, Let there be light: and there was light. (Genesis 1:3)",
    "error": "For all have sinned, and come short of the glory of God. (Romans 3:23)",
    "wisdom": "The fear of the LORD is the beginning of wisdom. (Proverbs 9:10)",
    "debug": "Prove all things; hold fast that which is good. (1 Thessalonians 5:21)",
    "loop": (
        "And let us not be weary in well doing: for in due season we shall reap, "
        "if we faint not. (Galatians 6:9)"
    ),
    "concurrency": (
        "For where two or three are gathered together in my name, "
        "there am I in the midst of them. (Matthew 18:20)"
    ),
    "promise": (
        "For I know the thoughts that I think toward you, saith the LORD, thoughts of "
        "peace, and not of evil, to give you an expected future. (Jeremiah 29:11)"
    ),
})

DIVINE_INSPIRATIONS = MappingProxyType({
    "error_handling": (
        "Try using 'confess' instead of 'catch'",
        "Remember that forgiveness is granted through proper error types",
        "Divine guidance suggests using Result<Blessing, Sin>",
    ),
    "performance": (
        "Faith can move mountains, but efficient algorithms move data faster",
        "The Lord's work is perfect; optimize your inner loops accordingly",
        "Consider divine caching for repeated operations",
    ),
    "security": (
        "Guard thy inputs as thou would guard thy soul",
        "Validation is the shield of righteousness",
        "Secure thy systems against the temptations of injection",
    ),
})

PRAYER_ANSWERS = (
    "Your prayer has been heard.",
    "The Lord works in mysterious ways.",
    "Divine intervention granted.",
    "Faith can move mountains, and optimize your code.",
    "The spirit is willing, but the syntax is weak.",
    "Ask, and it shall be given you; seek, and ye shall find; optimize, and your code shall perform.",
    "The Lord sees all variables, even those hidden in closures.",
)

MIRACLES = (
    "Water to Wine: Transformed mundane code into elegant expressions",
    "Healing the Lame: Fixed runtime errors without modifying source",
    "Walking on Water: Bypassed memory barriers with divine permission",
    "Feeding the Multitude: Optimized algorithm to handle 5000x more data",
    "Raising Lazarus: Recovered corrupted data through divine intervention",
)

CREATION_STAGES = (
    "Creation of light",
    "Separation of waters",
    "Land and vegetation",
    "Celestial bodies",
    "Sea creatures and birds",
    "Land animals and mankind",
    "Rest",
)

# Topic aliases → guidance lines
_GUIDANCE = (
    (
        ("error", "errors", "bug", "bugs", "exception"),
        (
            "In DivinePL, errors are treated as sins to be confessed, not exceptions to be caught.",
            "Use 'confess { ... }' instead of 'try { ... } catch { ... }'",
            "Remember: To err is human, to forgive divine, to handle errors properly, divine programming.",
        ),
    ),
    (
        ("loop", "loops", "iteration"),
        (
            "Loops in DivinePL should be created with divine purpose and always include a path to termination.",
            "For infinite is the kingdom of heaven, but finite should be thy loops.",
            "Consider using 'blessing' loops that process each item with reverence.",
        ),
    ),
    (
        ("function", "functions", "method", "methods"),
        (
            "Functions in DivinePL must be blessed to receive divine optimization.",
            "Use 'bless functionName() { ... }' for regular functions.",
            "Use 'miracle functionName() { ... }' for functions that perform extraordinary operations.",
            "Use 'genesis() { ... }' for program entry points.",
        ),
    ),
    (
        ("variable", "variables", "let", "const"),
        (
            "Variables in DivinePL are vessels of divine data.",
            "Use 'let' for mutable variables (as in 'Let there be light').",
            "Use 'covenant' for constants that shall not be broken.",
            "Avoid unholy variable names that invoke sin or blasphemy.",
        ),
    ),
)

_DEFAULT_GUIDANCE = (
    "The path of righteous code is illuminated through clarity and purpose.",
    "Seek to write your code as a testament to divine order and comprehension.",
    "Remember that all DivinePL code must rest on the Sabbath (unless overridden in dev mode).",
)


def search_verses(topic: str) -> List[Tuple[str, str]]:
    """
    Find verses for a topic.

    An exact key match wins outright. Otherwise every verse whose key or
    text contains the topic (case-insensitive) is returned in table order.
    """
    needle = topic.lower()
    if needle in BIBLE_VERSES:
        return [(needle, BIBLE_VERSES[needle])]
    return [
        (key, verse)
        for key, verse in BIBLE_VERSES.items()
        if needle in key or needle in verse.lower()
    ]


def programming_guidance(topic: str) -> Tuple[str, ...]:
    """Return the programming guidance lines for a topic."""
    needle = topic.lower()
    for aliases, lines in _GUIDANCE:
        if needle in aliases:
            return lines
    return _DEFAULT_GUIDANCE
