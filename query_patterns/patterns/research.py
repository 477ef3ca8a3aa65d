"""Research and academic literature patterns."""

from query_patterns.data_models import Pattern

RESEARCH_PATTERNS: list[Pattern] = [
    Pattern(
        id="research_on",
        category="research",
        examples=["research on AI safety", "research on climate change"],
        pattern=r"^research (?:on|about|into|regarding) (.+)$",
        template={"like": "${1}", "where": {"type": "research"}},
        confidence=0.92,
        frequency="very_high",
    ),
    Pattern(
        id="papers_about",
        category="research",
        examples=["papers about climate change", "papers on reinforcement learning"],
        pattern=r"^(?:papers?|articles?) (?:about|on|regarding) (.+)$",
        template={"like": "${1}", "where": {"type": "paper"}},
        confidence=0.9,
        frequency="very_high",
    ),
    Pattern(
        id="studies_on",
        category="research",
        examples=["studies on COVID", "studies about sleep deprivation"],
        pattern=r"^stud(?:y|ies) (?:on|about|of) (.+)$",
        template={"like": "${1}", "where": {"type": "study"}},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="research_by_author",
        category="research",
        examples=["research by Geoffrey Hinton", "work by Yann LeCun"],
        pattern=r"^(?:research|work|publications?) by (.+)$",
        template={
            "like": "research",
            "connected": {"from": "${1}", "via": "authored"},
        },
        confidence=0.88,
        frequency="high",
    ),
    Pattern(
        id="papers_by_author_on",
        category="research",
        examples=["papers by Hinton on deep learning"],
        pattern=r"^papers? by (.+?) (?:on|about) (.+)$",
        template={
            "like": "${2}",
            "where": {"type": "paper"},
            "connected": {"from": "${1}", "via": "authored"},
        },
        confidence=0.89,
    ),
    Pattern(
        id="research_published_in_year",
        category="research",
        examples=["research published in 2023", "papers published in 2019"],
        pattern=r"^(?:research|papers?|studies) published in (\d{4})$",
        template={"where": {"type": "research", "year": "${1}"}},
        confidence=0.91,
        frequency="high",
    ),
    Pattern(
        id="research_since_year",
        category="research",
        examples=["research on transformers since 2020"],
        pattern=r"^research (?:on|about) (.+) since (\d{4})$",
        template={
            "like": "${1}",
            "where": {"type": "research", "year": {"greaterThanOrEqual": "${2}"}},
        },
        confidence=0.88,
    ),
    Pattern(
        id="most_cited_papers",
        category="research",
        examples=["most cited papers about artificial intelligence safety"],
        pattern=r"^most cited (?:papers?|articles?|work) (?:about|on|in) (.+)$",
        template={
            "like": "${1}",
            "where": {"type": "paper"},
            "orderBy": "citations",
            "order": "desc",
        },
        confidence=0.9,
        frequency="medium",
    ),
    Pattern(
        id="literature_review",
        category="research",
        examples=["literature review of graph neural networks"],
        pattern=r"^(?:literature|systematic) review (?:of|on) (.+)$",
        template={"like": "${1}", "where": {"type": "review"}},
        confidence=0.86,
    ),
    Pattern(
        id="survey_of",
        category="research",
        examples=["survey of large language models", "overview of vector databases"],
        pattern=r"^(?:survey|overview|state of the art) (?:of|on|in) (.+)$",
        template={"like": "${1}", "where": {"type": "survey"}},
        confidence=0.85,
    ),
    Pattern(
        id="findings_about",
        category="research",
        examples=["findings about intermittent fasting", "results on protein folding"],
        pattern=r"^(?:findings|results|evidence) (?:about|on|for) (.+)$",
        template={"like": "${1}", "where": {"type": "finding"}},
        confidence=0.82,
    ),
    Pattern(
        id="experiments_with",
        category="research",
        examples=["experiments with CRISPR", "experiments using quantum annealing"],
        pattern=r"^experiments? (?:with|using|on) (.+)$",
        template={"like": "${1}", "where": {"type": "experiment"}},
        confidence=0.83,
    ),
    Pattern(
        id="datasets_for",
        category="research",
        examples=["datasets for sentiment analysis", "data sets about traffic"],
        pattern=r"^(?:datasets?|data sets?) (?:for|about|on) (.+)$",
        template={"like": "${1}", "where": {"type": "dataset"}},
        confidence=0.87,
        frequency="high",
    ),
    Pattern(
        id="academic_thesis",
        category="academic",
        examples=["thesis on distributed systems", "dissertations about poetry"],
        pattern=r"^(?:thesis|theses|dissertations?) (?:on|about) (.+)$",
        template={"like": "${1}", "where": {"type": "thesis"}},
        confidence=0.87,
    ),
    Pattern(
        id="academic_journal",
        category="academic",
        examples=["articles in Nature", "papers in the Journal of Finance"],
        pattern=r"^(?:articles?|papers?) (?:in|from) (?:the )?(.+)$",
        template={"where": {"type": "paper", "venue": "${1}"}},
        confidence=0.8,
    ),
    Pattern(
        id="academic_conference",
        category="academic",
        examples=["NeurIPS 2023 papers", "ICML 2021 papers"],
        pattern=r"^(\w+) (\d{4}) papers$",
        template={"where": {"type": "paper", "venue": "${1}", "year": "${2}"}},
        confidence=0.86,
    ),
    Pattern(
        id="academic_citations_of",
        category="academic",
        examples=["papers citing Attention Is All You Need"],
        pattern=r"^papers? (?:citing|that cite) (.+)$",
        template={"connected": {"to": "${1}", "via": "cites"}, "where": {"type": "paper"}},
        confidence=0.88,
    ),
    Pattern(
        id="academic_cited_by",
        category="academic",
        examples=["references of the BERT paper", "works cited by this review"],
        pattern=r"^(?:references of|works cited by) (.+)$",
        template={"connected": {"from": "${1}", "via": "cites"}},
        confidence=0.84,
    ),
    Pattern(
        id="academic_peer_reviewed",
        category="academic",
        examples=["peer reviewed studies on vaccines"],
        pattern=r"^peer[- ]reviewed (?:studies|papers|articles|research) (?:on|about) (.+)$",
        template={"like": "${1}", "where": {"type": "paper", "peerReviewed": "true"}},
        confidence=0.88,
    ),
    Pattern(
        id="academic_courses",
        category="academic",
        examples=["courses on linear algebra", "lectures about compilers"],
        pattern=r"^(?:courses?|lectures?|classes) (?:on|about|in) (.+)$",
        template={"like": "${1}", "where": {"type": "course"}},
        confidence=0.84,
    ),
    Pattern(
        id="academic_preprints",
        category="academic",
        examples=["arxiv preprints on diffusion models"],
        pattern=r"^(?:arxiv )?preprints? (?:on|about) (.+)$",
        template={"like": "${1}", "where": {"type": "preprint"}},
        confidence=0.85,
    ),
]
