# src/heuristics/lexicon.py — v1
"""Fixed word and phrase lists used by the signal extractors.

All entries are lowercase. Editing a list changes scores for every
document, so treat changes here as behavioral changes.
"""

from __future__ import annotations

# Matched as case-insensitive substrings of the full text.
FORMULAIC_PHRASES: tuple[str, ...] = (
    "in today's world",
    "in today's fast-paced",
    "it's important to note",
    "it is important to note",
    "in conclusion",
    "delve into",
    "dive into",
    "let's dive in",
    "let's explore",
    "game changer",
    "game-changer",
    "at the end of the day",
    "leverage",
    "navigate the complexities",
    "in this article",
    "here's the thing",
    "without further ado",
    "it's worth noting",
    "that being said",
    "having said that",
    "comprehensive guide",
    "revolutionize",
    "cutting-edge",
    "seamlessly",
    "furthermore",
    "moreover",
    "in the realm of",
    "paradigm shift",
    "holistic approach",
    "synergy",
    "thought leader",
    "value proposition",
    "best practices",
    "circle back",
    "unpack this",
    "at its core",
    "it goes without saying",
    "in light of",
    "studies have shown",
    "experts agree",
    "all things considered",
    "to some extent",
    "it can be argued",
    "plays a crucial role",
    "a testament to",
)

# Matched as whole words (tokens split on non-alphanumeric characters).
AI_VOCABULARY: frozenset[str] = frozenset(
    {
        "plethora",
        "delve",
        "delves",
        "leverage",
        "unleash",
        "unlock",
        "harness",
        "revolutionize",
        "paradigm",
        "synergy",
        "holistic",
        "nuanced",
        "robust",
        "transformative",
        "supercharge",
        "tapestry",
        "bustling",
        "myriad",
        "pivotal",
        "comprehensive",
        "framework",
        "trajectory",
        "spectrum",
        "facet",
        "confluence",
        "remarkable",
        "meticulous",
        "seamless",
        "navigate",
        "elevate",
        "foster",
        "intricate",
        "underscore",
        "embark",
        "realm",
        "additionally",
        "subsequently",
        "crucial",
    }
)

# Slang is matched as whole words, contractions as substrings.
INFORMAL_SLANG: frozenset[str] = frozenset(
    {
        "lol",
        "lmao",
        "lmfao",
        "rofl",
        "tbh",
        "ngl",
        "smh",
        "fr",
        "imo",
        "imho",
        "idk",
        "omg",
        "btw",
        "af",
        "bruh",
        "fml",
        "irl",
        "ikr",
        "nvm",
        "ya",
        "yall",
        "haha",
        "hahaha",
    }
)

CASUAL_CONTRACTIONS: tuple[str, ...] = (
    "gonna",
    "wanna",
    "gotta",
    "kinda",
    "sorta",
    "dunno",
    "lemme",
    "gimme",
    "ain't",
    "y'all",
    "cuz",
)

REPEATED_PUNCTUATION: tuple[str, ...] = ("!!", "??", "...")

# Call-to-action and motivational-post templates, matched as substrings.
PROMOTIONAL_PATTERNS: tuple[str, ...] = (
    "link in bio",
    "link in comments",
    "comment below",
    "drop a comment",
    "let me know in the comments",
    "follow for more",
    "like and share",
    "repost if",
    "agree?",
    "thoughts?",
    "what do you think?",
    "here's what i learned",
    "here are my top",
    "lessons i learned",
    "i'm thrilled to announce",
    "i'm excited to share",
    "i'm humbled",
    "excited to announce",
    "unpopular opinion",
    "the secret to",
    "stop scrolling",
    "don't miss out",
    "sign up today",
    "dm me",
    "game-changing",
    "your journey",
    "level up",
)
