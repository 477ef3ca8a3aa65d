"""Counting, statistics and grouping patterns."""

from query_patterns.data_models import Pattern

AGGREGATION_PATTERNS: list[Pattern] = [
    Pattern(
        id="count_items",
        category="aggregation",
        examples=["count datasets", "count all users"],
        pattern=r"^count (?:all |the )?(.+)$",
        template={"where": {"type": "${1}"}, "aggregate": "count"},
        confidence=0.92,
        frequency="very_high",
    ),
    Pattern(
        id="how_many",
        category="aggregation",
        examples=["how many ML datasets", "how many users are there"],
        pattern=r"^how many (.+?)(?: are there| do we have| exist)?\??$",
        template={"like": "${1}", "aggregate": "count"},
        confidence=0.91,
        frequency="very_high",
    ),
    Pattern(
        id="number_of",
        category="aggregation",
        examples=["number of web datasets", "total number of orders"],
        pattern=r"^(?:the |total )?number of (.+)$",
        template={"like": "${1}", "aggregate": "count"},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="average_of",
        category="aggregation",
        examples=["average salary of engineers", "mean price of laptops"],
        pattern=r"^(?:average|mean|avg) (\w+) (?:of|for) (.+)$",
        template={
            "like": "${2}",
            "aggregate": "avg",
            "field": "${1}",
        },
        confidence=0.89,
        frequency="high",
    ),
    Pattern(
        id="sum_of",
        category="aggregation",
        examples=["total revenue for 2023", "sum of sales in March"],
        pattern=r"^(?:total|sum of) (\w+) (?:for|in|of) (.+)$",
        template={
            "like": "${2}",
            "aggregate": "sum",
            "field": "${1}",
        },
        confidence=0.87,
    ),
    Pattern(
        id="max_of",
        category="aggregation",
        examples=["maximum price of products", "highest score in the test"],
        pattern=r"^(?:maximum|max|highest) (\w+) (?:of|in|for) (?:the )?(.+)$",
        template={"like": "${2}", "aggregate": "max", "field": "${1}"},
        confidence=0.86,
    ),
    Pattern(
        id="min_of",
        category="aggregation",
        examples=["minimum price of products", "lowest temperature in January"],
        pattern=r"^(?:minimum|min|lowest) (\w+) (?:of|in|for) (?:the )?(.+)$",
        template={"like": "${2}", "aggregate": "min", "field": "${1}"},
        confidence=0.86,
    ),
    Pattern(
        id="group_by",
        category="aggregation",
        examples=["users grouped by country", "orders by status"],
        pattern=r"^(.+?) (?:grouped by|by) (country|status|category|type|year|month|region|department)$",
        template={"like": "${1}", "aggregate": "group", "groupBy": "${2}"},
        confidence=0.84,
    ),
    Pattern(
        id="count_per",
        category="aggregation",
        examples=["papers per year", "employees per department"],
        pattern=r"^(.+?) (?:per|for each) (\w+)$",
        template={"like": "${1}", "aggregate": "count", "groupBy": "${2}"},
        confidence=0.83,
    ),
    Pattern(
        id="distribution_of",
        category="aggregation",
        examples=["distribution of ages", "breakdown of expenses by category"],
        pattern=r"^(?:distribution|breakdown) of (.+?)(?: by (\w+))?$",
        template={"like": "${1}", "aggregate": "histogram", "groupBy": "${2}"},
        confidence=0.82,
    ),
    Pattern(
        id="percentage_of",
        category="aggregation",
        examples=["percentage of users who churned", "share of mobile traffic"],
        pattern=r"^(?:percentage|percent|proportion|share) of (.+)$",
        template={"like": "${1}", "aggregate": "ratio"},
        confidence=0.8,
    ),
    Pattern(
        id="statistics_about",
        category="aggregation",
        examples=["statistics about customer churn", "stats on page views"],
        pattern=r"^(?:statistics|stats|metrics) (?:about|on|for) (.+)$",
        template={"like": "${1}", "aggregate": "summary"},
        confidence=0.82,
    ),
    Pattern(
        id="unique_values",
        category="aggregation",
        examples=["unique categories", "distinct countries of customers"],
        pattern=r"^(?:unique|distinct) (\w+)(?: of (.+))?$",
        template={"like": "${2}", "aggregate": "distinct", "field": "${1}"},
        confidence=0.81,
    ),
    Pattern(
        id="count_with_condition",
        category="aggregation",
        examples=["how many papers mention transformers"],
        pattern=r"^how many (\w+) (?:mention|contain|include|reference) (.+)$",
        template={
            "like": "${2}",
            "where": {"type": "${1}"},
            "aggregate": "count",
        },
        confidence=0.87,
    ),
]
