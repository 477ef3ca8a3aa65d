"""Comparison, ranking and superlative patterns."""

from query_patterns.data_models import Pattern

COMPARISON_PATTERNS: list[Pattern] = [
    Pattern(
        id="compare_x_and_y",
        category="comparison",
        examples=["compare GPT-4 and BERT", "compare Python with Go"],
        pattern=r"^compare (.+?) (?:and|with|to|against) (.+)$",
        template={"like": ["${1}", "${2}"], "where": {"type": "comparison"}},
        confidence=0.92,
        frequency="very_high",
    ),
    Pattern(
        id="difference_between",
        category="comparison",
        examples=["difference between TCP and UDP", "differences between cats and dogs"],
        pattern=r"^(?:what is the )?differences? between (.+?) and (.+?)\??$",
        template={"like": ["${1}", "${2}"], "where": {"type": "comparison"}},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="better_than",
        category="comparison",
        examples=["is postgres better than mysql", "is rust faster than c++"],
        pattern=r"^is (.+?) (better|faster|cheaper|safer|easier) than (.+?)\??$",
        template={
            "like": ["${1}", "${3}"],
            "where": {"type": "comparison", "criterion": "${2}"},
        },
        confidence=0.87,
    ),
    Pattern(
        id="similarities_between",
        category="comparison",
        examples=["similarities between Spanish and Italian"],
        pattern=r"^(?:similarities|commonalities) between (.+?) and (.+)$",
        template={"like": ["${1}", "${2}"], "where": {"type": "comparison"}},
        confidence=0.85,
    ),
    Pattern(
        id="pros_and_cons",
        category="comparison",
        examples=["pros and cons of microservices", "advantages and disadvantages of solar"],
        pattern=r"^(?:pros and cons|advantages and disadvantages|tradeoffs) of (.+)$",
        template={"like": "${1}", "where": {"type": "evaluation"}},
        confidence=0.86,
    ),
]

RANKING_PATTERNS: list[Pattern] = [
    Pattern(
        id="best_x",
        category="ranking",
        examples=["best performing model", "best restaurants"],
        pattern=r"^(?:the )?best (.+)$",
        template={"like": "${1}", "orderBy": "score", "order": "desc", "limit": 10},
        confidence=0.88,
        frequency="very_high",
    ),
    Pattern(
        id="top_n",
        category="ranking",
        examples=["top 10 universities", "top 5 movies of 2022"],
        pattern=r"^top (\d+) (.+)$",
        template={"like": "${2}", "orderBy": "score", "order": "desc", "limit": "${1}"},
        confidence=0.91,
        frequency="very_high",
    ),
    Pattern(
        id="largest_x",
        category="ranking",
        examples=["largest models", "biggest cities in Europe"],
        pattern=r"^(?:the )?(?:largest|biggest) (.+)$",
        template={"like": "${1}", "orderBy": "size", "order": "desc"},
        confidence=0.87,
        frequency="high",
    ),
    Pattern(
        id="smallest_x",
        category="ranking",
        examples=["smallest models", "tiniest houses"],
        pattern=r"^(?:the )?(?:smallest|tiniest) (.+)$",
        template={"like": "${1}", "orderBy": "size", "order": "asc"},
        confidence=0.86,
    ),
    Pattern(
        id="most_popular",
        category="ranking",
        examples=["most popular frameworks", "trending repositories"],
        pattern=r"^(?:most popular|trending|hottest) (.+)$",
        template={"like": "${1}", "boost": "popular", "order": "desc"},
        confidence=0.87,
        frequency="high",
    ),
    Pattern(
        id="highest_rated",
        category="ranking",
        examples=["highest rated laptops", "top rated podcasts"],
        pattern=r"^(?:highest|top|best) rated (.+)$",
        template={"like": "${1}", "orderBy": "rating", "order": "desc"},
        confidence=0.89,
        frequency="high",
    ),
    Pattern(
        id="lowest_rated",
        category="ranking",
        examples=["lowest rated hotels", "worst reviewed apps"],
        pattern=r"^(?:lowest rated|worst rated|worst reviewed) (.+)$",
        template={"like": "${1}", "orderBy": "rating", "order": "asc"},
        confidence=0.84,
    ),
    Pattern(
        id="cheapest_x",
        category="ranking",
        examples=["cheapest flights to Tokyo", "least expensive laptops"],
        pattern=r"^(?:the )?(?:cheapest|least expensive|lowest priced) (.+)$",
        template={"like": "${1}", "orderBy": "price", "order": "asc"},
        confidence=0.88,
        frequency="high",
    ),
    Pattern(
        id="most_expensive",
        category="ranking",
        examples=["most expensive cars", "priciest hotels in Paris"],
        pattern=r"^(?:the )?(?:most expensive|priciest) (.+)$",
        template={"like": "${1}", "orderBy": "price", "order": "desc"},
        confidence=0.86,
    ),
    Pattern(
        id="fastest_x",
        category="ranking",
        examples=["fastest databases", "quickest routes to the airport"],
        pattern=r"^(?:the )?(?:fastest|quickest) (.+)$",
        template={"like": "${1}", "orderBy": "speed", "order": "desc"},
        confidence=0.85,
    ),
    Pattern(
        id="ranked_by",
        category="ranking",
        examples=["universities ranked by reputation", "products sorted by price"],
        pattern=r"^(.+?) (?:ranked|sorted|ordered) by (\w+)$",
        template={"like": "${1}", "orderBy": "${2}", "order": "desc"},
        confidence=0.88,
    ),
    Pattern(
        id="sorted_ascending",
        category="ranking",
        examples=["products sorted by price ascending", "users ordered by age asc"],
        pattern=r"^(.+?) (?:sorted|ordered) by (\w+) (?:ascending|asc)$",
        template={"like": "${1}", "orderBy": "${2}", "order": "asc"},
        confidence=0.89,
    ),
    Pattern(
        id="most_x_by_metric",
        category="ranking",
        examples=["most downloaded packages", "most starred repositories"],
        pattern=r"^most (downloaded|starred|viewed|liked|shared|commented) (.+)$",
        template={"like": "${2}", "orderBy": "${1}", "order": "desc"},
        confidence=0.87,
    ),
]
