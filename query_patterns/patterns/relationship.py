"""Graph relationship and similarity patterns."""

from query_patterns.data_models import Pattern

RELATIONSHIP_PATTERNS: list[Pattern] = [
    Pattern(
        id="related_to",
        category="relationship",
        examples=["topics related to quantum computing", "things connected to Project X"],
        pattern=r"^(.+?) (?:related|connected|linked) to (.+)$",
        template={"like": "${1}", "connected": {"to": "${2}"}},
        confidence=0.86,
        frequency="high",
    ),
    Pattern(
        id="relationship_between",
        category="relationship",
        examples=["relationship between Alice and Bob", "connection between sleep and memory"],
        pattern=r"^(?:relationship|connection|link) between (.+?) and (.+)$",
        template={"connected": {"from": "${1}", "to": "${2}"}, "select": ["path"]},
        confidence=0.87,
    ),
    Pattern(
        id="path_from_to",
        category="relationship",
        examples=["path from Alice to the CEO", "how is Bob connected to Carol"],
        pattern=r"^(?:path from (.+?) to (.+)|how is (.+?) connected to (.+?)\??)$",
        template={"connected": {"from": "${1}${3}", "to": "${2}${4}"}, "select": ["path"]},
        confidence=0.85,
    ),
    Pattern(
        id="belongs_to",
        category="relationship",
        examples=["documents that belong to the finance team", "files belonging to Alice"],
        pattern=r"^(.+?) (?:that belong to|belonging to|owned by) (.+)$",
        template={"like": "${1}", "connected": {"to": "${2}", "via": "belongsTo"}},
        confidence=0.86,
    ),
    Pattern(
        id="part_of",
        category="relationship",
        examples=["modules part of the core package", "components in the checkout flow"],
        pattern=r"^(.+?) (?:part of|in) the (.+?) (package|flow|system|module|service)$",
        template={"like": "${1}", "connected": {"to": "${2} ${3}", "via": "partOf"}},
        confidence=0.8,
    ),
    Pattern(
        id="caused_by",
        category="relationship",
        examples=["errors caused by the deploy", "what caused the outage"],
        pattern=r"^(?:(.+?) caused by (.+)|what caused (?:the )?(.+))$",
        template={"like": "${1}${3}", "connected": {"from": "${2}", "via": "causes"}},
        confidence=0.82,
    ),
    Pattern(
        id="influenced_by",
        category="relationship",
        examples=["artists influenced by Picasso", "languages inspired by Lisp"],
        pattern=r"^(.+?) (?:influenced|inspired) by (.+)$",
        template={"like": "${1}", "connected": {"from": "${2}", "via": "influences"}},
        confidence=0.84,
    ),
    Pattern(
        id="used_by",
        category="relationship",
        examples=["libraries used by Netflix", "tools used by data scientists"],
        pattern=r"^(.+?) used by (.+)$",
        template={"like": "${1}", "connected": {"from": "${2}", "via": "uses"}},
        confidence=0.84,
    ),
    Pattern(
        id="mentions_of",
        category="relationship",
        examples=["mentions of Acme Corp", "references to GDPR"],
        pattern=r"^(?:mentions of|references to) (.+)$",
        template={"connected": {"to": "${1}", "via": "mentions"}},
        confidence=0.83,
    ),
]

SIMILARITY_PATTERNS: list[Pattern] = [
    Pattern(
        id="similar_to",
        category="similarity",
        examples=["movies similar to Inception", "products like the iPhone"],
        pattern=r"^(.+?) (?:similar to|like|resembling) (?:the )?(.+)$",
        template={"like": "${2}", "where": {"type": "${1}"}, "similar": "true"},
        confidence=0.88,
        frequency="very_high",
    ),
    Pattern(
        id="more_like_this",
        category="similarity",
        examples=["more like this article", "more like Stranger Things"],
        pattern=r"^more (?:like|similar to) (?:this )?(.+)$",
        template={"like": "${1}", "similar": "true"},
        confidence=0.86,
    ),
    Pattern(
        id="alternatives_to",
        category="similarity",
        examples=["open source alternatives to Photoshop", "substitutes for butter"],
        pattern=r"^(?:(.+?) )?(?:alternatives? to|substitutes? for|replacements? for) (.+)$",
        template={"like": "${2}", "where": {"qualifier": "${1}"}, "exclude": "${2}"},
        confidence=0.86,
        frequency="high",
    ),
    Pattern(
        id="duplicates_of",
        category="similarity",
        examples=["duplicates of this ticket", "near duplicates of invoice 42"],
        pattern=r"^(?:near )?duplicates? of (?:this )?(.+)$",
        template={"like": "${1}", "similar": "true", "threshold": 0.95},
        confidence=0.84,
    ),
    Pattern(
        id="same_as",
        category="similarity",
        examples=["same author as Dune", "same genre as The Matrix"],
        pattern=r"^same (\w+) as (.+)$",
        template={"where": {"${1}": {"sameAs": "${2}"}}},
        confidence=0.83,
    ),
]
