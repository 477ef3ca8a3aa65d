"""Question-form patterns: definitions, how-to and explanations."""

from query_patterns.data_models import Pattern

QUESTION_PATTERNS: list[Pattern] = [
    Pattern(
        id="what_is",
        category="question",
        examples=["what is a vector database", "what are embeddings?"],
        pattern=r"^what (?:is|are) (?:an? |the )?(.+?)\??$",
        template={"like": "${1}", "intent": "definition"},
        confidence=0.88,
        frequency="very_high",
    ),
    Pattern(
        id="define_x",
        category="question",
        examples=["define entropy", "definition of recursion"],
        pattern=r"^(?:define|definition of|meaning of) (.+)$",
        template={"like": "${1}", "intent": "definition"},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="how_to",
        category="howto",
        examples=["how to deploy a flask app", "how do I reset my password"],
        pattern=r"^how (?:to|do i|can i|do you) (.+?)\??$",
        template={"like": "${1}", "where": {"type": "guide"}, "intent": "howto"},
        confidence=0.89,
        frequency="very_high",
    ),
    Pattern(
        id="tutorial_for",
        category="howto",
        examples=["tutorial for kubernetes", "guides on writing unit tests"],
        pattern=r"^(?:tutorials?|guides?|walkthroughs?) (?:for|on|about) (.+)$",
        template={"like": "${1}", "where": {"type": "tutorial"}},
        confidence=0.88,
        frequency="high",
    ),
    Pattern(
        id="examples_of",
        category="howto",
        examples=["examples of recursion in python", "sample code for oauth"],
        pattern=r"^(?:examples? of|sample code for|code samples for) (.+)$",
        template={"like": "${1}", "where": {"type": "example"}},
        confidence=0.86,
    ),
    Pattern(
        id="why_does",
        category="question",
        examples=["why does the sky look blue", "why is my build slow?"],
        pattern=r"^why (?:does|do|is|are|did) (.+?)\??$",
        template={"like": "${1}", "intent": "explanation"},
        confidence=0.84,
        frequency="high",
    ),
    Pattern(
        id="explain_x",
        category="question",
        examples=["explain gradient descent", "explain how DNS works"],
        pattern=r"^explain (?:how )?(.+)$",
        template={"like": "${1}", "intent": "explanation"},
        confidence=0.87,
    ),
    Pattern(
        id="when_did",
        category="question",
        examples=["when did the Berlin wall fall", "when was Python released?"],
        pattern=r"^when (?:did|was|were|is|will) (.+?)\??$",
        template={"like": "${1}", "select": ["date"], "intent": "temporal_fact"},
        confidence=0.85,
    ),
    Pattern(
        id="which_x_has",
        category="question",
        examples=["which team has the most bugs", "which city has the best pizza?"],
        pattern=r"^which (\w+) (?:has|have) (?:the )?(most|least|best|worst|highest|lowest) (.+?)\??$",
        template={
            "where": {"type": "${1}"},
            "orderBy": "${3}",
            "rank": "${2}",
            "limit": 1,
        },
        confidence=0.86,
    ),
    Pattern(
        id="is_there",
        category="question",
        examples=["is there a library for PDF parsing", "are there any cafes open now?"],
        pattern=r"^(?:is there|are there)(?: any| an?)? (.+?)\??$",
        template={"like": "${1}", "intent": "existence", "limit": 1},
        confidence=0.82,
    ),
    Pattern(
        id="can_i",
        category="question",
        examples=["can I use sqlite in production", "can you cache embeddings?"],
        pattern=r"^can (?:i|you|we) (.+?)\??$",
        template={"like": "${1}", "intent": "feasibility"},
        confidence=0.8,
    ),
    Pattern(
        id="tell_me_about",
        category="question",
        examples=["tell me about the Roman empire", "information about solar panels"],
        pattern=r"^(?:tell me about|information about|info on|learn about) (.+)$",
        template={"like": "${1}"},
        confidence=0.84,
        frequency="high",
    ),
    Pattern(
        id="troubleshoot",
        category="howto",
        examples=["fix connection refused error", "troubleshoot slow queries"],
        pattern=r"^(?:fix|troubleshoot|debug|resolve) (.+)$",
        template={"like": "${1}", "where": {"type": "solution"}, "intent": "troubleshoot"},
        confidence=0.85,
    ),
    Pattern(
        id="show_me",
        category="navigation",
        examples=["show me all invoices", "list all customers"],
        pattern=r"^(?:show me|list|display|get)(?: all| the)? (.+)$",
        template={"like": "${1}", "intent": "list"},
        confidence=0.83,
        frequency="very_high",
    ),
]
