"""Patterns tied to a subject domain.

These carry a ``domain`` so callers can restrict matching to the verticals
they actually serve.
"""

from query_patterns.data_models import Pattern

DOMAIN_PATTERNS: list[Pattern] = [
    # medical
    Pattern(
        id="medical_symptoms",
        category="domain_specific",
        domain="medical",
        examples=["symptoms of diabetes", "signs of a concussion"],
        pattern=r"^(?:symptoms|signs|warning signs) of (?:an? )?(.+)$",
        template={"like": "${1}", "where": {"type": "condition"}, "select": ["symptoms"]},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="medical_treatment",
        category="domain_specific",
        domain="medical",
        examples=["treatment for migraine", "treatments of type 2 diabetes"],
        pattern=r"^(?:treatments?|therapy|therapies|cures?) (?:for|of) (.+)$",
        template={"like": "${1}", "where": {"type": "treatment"}},
        confidence=0.89,
    ),
    Pattern(
        id="medical_side_effects",
        category="domain_specific",
        domain="medical",
        examples=["side effects of ibuprofen", "adverse effects of statins"],
        pattern=r"^(?:side|adverse) effects of (.+)$",
        template={"where": {"type": "drug", "name": "${1}"}, "select": ["sideEffects"]},
        confidence=0.91,
    ),
    Pattern(
        id="medical_clinical_trials",
        category="domain_specific",
        domain="medical",
        examples=["clinical trials for alzheimers", "clinical studies on long covid"],
        pattern=r"^clinical (?:trials?|studies) (?:for|on|about) (.+)$",
        template={"like": "${1}", "where": {"type": "clinical_trial"}},
        confidence=0.88,
    ),
    # programming
    Pattern(
        id="code_error_message",
        category="domain_specific",
        domain="programming",
        examples=["TypeError: undefined is not a function", "ImportError: no module named yaml"],
        pattern=r"^(\w+(?:Error|Exception)): (.+)$",
        template={"where": {"type": "issue", "errorType": "${1}"}, "like": "${2}"},
        confidence=0.93,
        frequency="high",
    ),
    Pattern(
        id="code_in_language",
        category="domain_specific",
        domain="programming",
        examples=["quicksort in python", "http server in rust"],
        pattern=r"^(.+?) in (python|javascript|typescript|java|rust|go|golang|c\+\+|c#|ruby|kotlin|swift)$",
        template={"like": "${1}", "where": {"type": "code", "language": "${2}"}},
        confidence=0.9,
        frequency="very_high",
    ),
    Pattern(
        id="code_library_for",
        category="domain_specific",
        domain="programming",
        examples=["library for parsing yaml", "packages for data validation"],
        pattern=r"^(?:libraries|library|packages?|modules?|frameworks?) for (.+)$",
        template={"like": "${1}", "where": {"type": "library"}},
        confidence=0.87,
    ),
    Pattern(
        id="code_api_docs",
        category="domain_specific",
        domain="programming",
        examples=["api docs for stripe", "documentation for fastapi"],
        pattern=r"^(?:api )?(?:docs|documentation|reference) for (.+)$",
        template={"like": "${1}", "where": {"type": "documentation"}},
        confidence=0.88,
    ),
    Pattern(
        id="code_function_usage",
        category="domain_specific",
        domain="programming",
        examples=["usage of Array.prototype.map", "usage of numpy.where"],
        pattern=r"^(?:usage of|how to use) ([\w.]+(?:\(\))?)$",
        template={"where": {"type": "code", "symbol": "${1}"}, "intent": "usage"},
        confidence=0.85,
    ),
    # legal
    Pattern(
        id="legal_case_law",
        category="domain_specific",
        domain="legal",
        examples=["case law on fair use", "precedents for wrongful termination"],
        pattern=r"^(?:case law|precedents?|rulings?) (?:on|for|about) (.+)$",
        template={"like": "${1}", "where": {"type": "case"}},
        confidence=0.88,
    ),
    Pattern(
        id="legal_versus_case",
        category="domain_specific",
        domain="legal",
        examples=["Roe v. Wade", "Brown v. Board of Education"],
        pattern=r"^([A-Z][\w.]*(?: [A-Z][\w.]*)*) v\. (.+)$",
        template={"where": {"type": "case", "parties": ["${1}", "${2}"]}},
        confidence=0.9,
    ),
    Pattern(
        id="legal_regulations",
        category="domain_specific",
        domain="legal",
        examples=["regulations on drones", "laws about data privacy in california"],
        pattern=r"^(?:regulations?|laws?|rules|statutes) (?:on|about|for|regarding) (.+?)(?: in (.+))?$",
        template={"like": "${1}", "where": {"type": "regulation", "jurisdiction": "${2}"}},
        confidence=0.86,
    ),
    # finance
    Pattern(
        id="finance_stock_price",
        category="domain_specific",
        domain="finance",
        examples=["stock price of AAPL", "share price for Siemens"],
        pattern=r"^(?:stock|share) price (?:of|for) (.+)$",
        template={"where": {"type": "security", "symbol": "${1}"}, "select": ["price"]},
        confidence=0.91,
        frequency="high",
    ),
    Pattern(
        id="finance_earnings",
        category="domain_specific",
        domain="finance",
        examples=["earnings report for Microsoft", "quarterly results of Nvidia"],
        pattern=r"^(?:earnings(?: reports?)?|quarterly results|annual reports?) (?:for|of) (.+)$",
        template={"where": {"type": "filing", "company": "${1}"}, "orderBy": "date"},
        confidence=0.88,
    ),
    Pattern(
        id="finance_transactions",
        category="domain_specific",
        domain="finance",
        examples=["transactions over 500 euros", "payments above 1000"],
        pattern=r"^(?:transactions|payments|expenses|charges) (?:over|above|more than) (\d+(?:\.\d+)?)(?: \w+)?$",
        template={"where": {"type": "transaction", "amount": {"greaterThan": "${1}"}}},
        confidence=0.87,
    ),
    # education
    Pattern(
        id="education_courses",
        category="domain_specific",
        domain="education",
        examples=["courses on machine learning", "online classes for spanish"],
        pattern=r"^(?:online )?(?:courses?|classes|lectures|moocs?) (?:on|for|about|in) (.+)$",
        template={"like": "${1}", "where": {"type": "course"}},
        confidence=0.89,
        frequency="high",
    ),
    Pattern(
        id="education_syllabus",
        category="domain_specific",
        domain="education",
        examples=["syllabus for CS101", "curriculum of the biology program"],
        pattern=r"^(?:syllabus|curriculum|course outline) (?:for|of) (?:the )?(.+)$",
        template={"like": "${1}", "where": {"type": "syllabus"}},
        confidence=0.85,
    ),
    # science
    Pattern(
        id="science_datasets",
        category="domain_specific",
        domain="science",
        examples=["datasets on air quality", "open data about ocean temperature"],
        pattern=r"^(?:datasets?|open data|data sets?) (?:on|about|for) (.+)$",
        template={"like": "${1}", "where": {"type": "dataset"}},
        confidence=0.88,
    ),
    Pattern(
        id="science_experiments",
        category="domain_specific",
        domain="science",
        examples=["experiments on quantum entanglement", "experiments with CRISPR"],
        pattern=r"^experiments? (?:on|with|about|involving) (.+)$",
        template={"like": "${1}", "where": {"type": "experiment"}},
        confidence=0.85,
    ),
    Pattern(
        id="science_formula",
        category="domain_specific",
        domain="science",
        examples=["formula for kinetic energy", "equation of a circle"],
        pattern=r"^(?:formula|equation) (?:for|of) (?:an? |the )?(.+)$",
        template={"like": "${1}", "where": {"type": "formula"}},
        confidence=0.87,
    ),
    # real estate
    Pattern(
        id="real_estate_listings",
        category="domain_specific",
        domain="real_estate",
        examples=["apartments for rent in Lisbon", "houses for sale in Austin"],
        pattern=r"^(apartments?|houses?|homes?|condos?|flats?|studios?) for (rent|sale) in (.+)$",
        template={"where": {"type": "${1}", "listing": "${2}", "location": "${3}"}},
        confidence=0.92,
        frequency="high",
    ),
    Pattern(
        id="real_estate_bedrooms",
        category="domain_specific",
        domain="real_estate",
        examples=["3 bedroom apartments", "2 bed houses in Leeds"],
        pattern=r"^(\d+) (?:bedroom|bed|br) (\w+?)(?: in (.+))?$",
        template={"where": {"type": "${2}", "bedrooms": "${1}", "location": "${3}"}},
        confidence=0.88,
    ),
    # travel
    Pattern(
        id="travel_flights",
        category="domain_specific",
        domain="travel",
        examples=["flights from Berlin to Rome", "flights from NYC to London"],
        pattern=r"^(?:cheap )?flights from (.+?) to (.+)$",
        template={"where": {"type": "flight", "origin": "${1}", "destination": "${2}"}},
        confidence=0.93,
        frequency="high",
    ),
    Pattern(
        id="travel_hotels_in",
        category="domain_specific",
        domain="travel",
        examples=["hotels in Kyoto", "hostels near Barcelona"],
        pattern=r"^(hotels?|hostels?|motels?|resorts?|b&bs?) (?:in|near|around) (.+)$",
        template={"where": {"type": "${1}", "location": {"near": "${2}"}}},
        confidence=0.91,
        frequency="high",
    ),
    # ecommerce
    Pattern(
        id="ecommerce_order_status",
        category="domain_specific",
        domain="ecommerce",
        examples=["status of order 12345", "track order #98765"],
        pattern=r"^(?:status of|track|where is) (?:my )?order #?(\w+)$",
        template={"where": {"type": "order", "id": "${1}"}, "select": ["status"]},
        confidence=0.92,
    ),
    # sports
    Pattern(
        id="sports_scores",
        category="domain_specific",
        domain="sports",
        examples=["score of the Lakers game", "results of the Champions League final"],
        pattern=r"^(?:scores?|results?) (?:of|for) (?:the )?(.+)$",
        template={"like": "${1}", "where": {"type": "match"}, "select": ["score"]},
        confidence=0.86,
    ),
    Pattern(
        id="sports_player_stats",
        category="domain_specific",
        domain="sports",
        examples=["stats for Lionel Messi", "statistics of Serena Williams"],
        pattern=r"^(?:stats|statistics|career stats) (?:for|of) (.+)$",
        template={"where": {"type": "athlete", "name": "${1}"}, "select": ["statistics"]},
        confidence=0.87,
    ),
]
