"""People, expertise and organization patterns."""

from query_patterns.data_models import Pattern

PEOPLE_PATTERNS: list[Pattern] = [
    Pattern(
        id="who_is",
        category="people",
        examples=["who is Alice", "who is the CTO"],
        pattern=r"^who (?:is|was) (.+?)\??$",
        template={"like": "${1}", "where": {"type": "person"}},
        confidence=0.9,
        frequency="very_high",
    ),
    Pattern(
        id="people_who",
        category="people",
        examples=[
            "find people who work with machine learning",
            "people who know Rust",
        ],
        pattern=r"^(?:find |show )?people who (.+)$",
        template={"like": "${1}", "where": {"type": "person"}},
        confidence=0.87,
        frequency="high",
    ),
    Pattern(
        id="experts_in",
        category="people",
        examples=["experts in javascript", "specialists on kidney disease"],
        pattern=r"^(?:experts?|specialists?|authorities) (?:in|on) (.+)$",
        template={
            "like": "${1}",
            "where": {"type": "person"},
            "boost": "expertise",
        },
        confidence=0.89,
        frequency="high",
    ),
    Pattern(
        id="people_role_at",
        category="people",
        examples=["engineers at Google", "researchers at MIT"],
        pattern=r"^(\w+?)s? (?:at|from) (.+)$",
        template={
            "where": {"type": "person", "role": "${1}"},
            "connected": {"to": "${2}", "via": "memberOf"},
        },
        confidence=0.78,
    ),
    Pattern(
        id="people_works_with",
        category="people",
        examples=["who works with Bob", "colleagues of Charlie"],
        pattern=r"^(?:who works with|colleagues of|coworkers of) (.+)$",
        template={
            "where": {"type": "person"},
            "connected": {"to": "${1}", "via": "worksWith"},
        },
        confidence=0.86,
    ),
    Pattern(
        id="people_reports_to",
        category="people",
        examples=["who reports to the CEO", "direct reports of Dana"],
        pattern=r"^(?:who reports to|direct reports of) (.+)$",
        template={
            "where": {"type": "person"},
            "connected": {"to": "${1}", "via": "reportsTo"},
        },
        confidence=0.87,
    ),
    Pattern(
        id="people_manager_of",
        category="people",
        examples=["manager of Alice", "who manages the platform team"],
        pattern=r"^(?:manager of|who manages) (.+)$",
        template={
            "where": {"type": "person"},
            "connected": {"from": "${1}", "via": "reportsTo"},
        },
        confidence=0.86,
    ),
    Pattern(
        id="people_with_skill",
        category="people",
        examples=["developers with React experience", "people with Python skills"],
        pattern=r"^(\w+) with (.+?) (?:experience|skills?|background)$",
        template={
            "like": "${2}",
            "where": {"type": "person", "role": "${1}"},
        },
        confidence=0.84,
    ),
    Pattern(
        id="people_authors_of",
        category="people",
        examples=["authors of the Rust book", "who wrote Dune"],
        pattern=r"^(?:authors? of|who wrote) (.+)$",
        template={
            "where": {"type": "person"},
            "connected": {"to": "${1}", "via": "authored"},
        },
        confidence=0.88,
    ),
    Pattern(
        id="people_contact",
        category="people",
        examples=["contact info for Bob Smith", "email of Alice Johnson"],
        pattern=r"^(?:contact (?:info|information|details) for|email (?:of|for)) (.+)$",
        template={
            "like": "${1}",
            "where": {"type": "person"},
            "select": ["email", "phone"],
        },
        confidence=0.85,
    ),
    Pattern(
        id="people_in_location",
        category="people",
        examples=["people in Berlin", "team members based in London"],
        pattern=r"^(?:people|team members|employees|staff) (?:in|based in|located in) (.+)$",
        template={"where": {"type": "person", "location": "${1}"}},
        confidence=0.83,
    ),
    Pattern(
        id="people_team_members",
        category="people",
        examples=["members of the engineering team", "who is on the data team"],
        pattern=r"^(?:members of|who is on) (?:the )?(.+?) team$",
        template={
            "where": {"type": "person"},
            "connected": {"to": "${1}", "via": "memberOf"},
        },
        confidence=0.86,
    ),
    Pattern(
        id="people_founders",
        category="people",
        examples=["founders of Stripe", "who founded OpenAI"],
        pattern=r"^(?:founders? of|who founded) (.+)$",
        template={
            "where": {"type": "person"},
            "connected": {"to": "${1}", "via": "founded"},
        },
        confidence=0.88,
    ),
    Pattern(
        id="people_mentors",
        category="people",
        examples=["mentors for junior developers", "advisors for startups"],
        pattern=r"^(?:mentors?|advisors?|coaches) for (.+)$",
        template={"like": "${1}", "where": {"type": "person", "role": "mentor"}},
        confidence=0.8,
    ),
]

ORGANIZATION_PATTERNS: list[Pattern] = [
    Pattern(
        id="companies_in_industry",
        category="organizations",
        examples=["companies in technology", "companies in the healthcare industry"],
        pattern=r"^(?:companies|businesses|firms) in (?:the )?(.+?)(?: industry| sector)?$",
        template={"where": {"type": "organization", "industry": "${1}"}},
        confidence=0.87,
        frequency="high",
    ),
    Pattern(
        id="organizations_working_on",
        category="organizations",
        examples=["research labs working on AI safety", "startups working on fusion"],
        pattern=r"^(.+?) working on (.+)$",
        template={
            "like": "${2}",
            "where": {"type": "organization", "kind": "${1}"},
        },
        confidence=0.82,
    ),
    Pattern(
        id="organizations_headquartered_in",
        category="organizations",
        examples=["companies headquartered in Seattle", "startups based in Berlin"],
        pattern=r"^(?:companies|startups|organizations|firms) (?:headquartered|based) in (.+)$",
        template={"where": {"type": "organization", "location": "${1}"}},
        confidence=0.88,
    ),
    Pattern(
        id="organizations_competitors",
        category="organizations",
        examples=["competitors of Slack", "alternatives to Jira"],
        pattern=r"^(?:competitors of|rivals of|alternatives to) (.+)$",
        template={
            "like": "${1}",
            "connected": {"to": "${1}", "via": "competesWith"},
        },
        confidence=0.85,
        frequency="high",
    ),
    Pattern(
        id="organizations_subsidiaries",
        category="organizations",
        examples=["subsidiaries of Alphabet", "companies owned by Meta"],
        pattern=r"^(?:subsidiaries of|companies owned by|brands owned by) (.+)$",
        template={
            "where": {"type": "organization"},
            "connected": {"from": "${1}", "via": "owns"},
        },
        confidence=0.87,
    ),
    Pattern(
        id="organizations_funded_by",
        category="organizations",
        examples=["startups funded by Sequoia", "companies backed by Y Combinator"],
        pattern=r"^(?:startups|companies) (?:funded|backed) by (.+)$",
        template={
            "where": {"type": "organization"},
            "connected": {"from": "${1}", "via": "invested"},
        },
        confidence=0.86,
    ),
    Pattern(
        id="organizations_size",
        category="organizations",
        examples=["companies with more than 500 employees"],
        pattern=r"^companies with (?:more than|over) (\d+) employees$",
        template={
            "where": {"type": "organization", "employees": {"greaterThan": "${1}"}},
        },
        confidence=0.88,
    ),
]
