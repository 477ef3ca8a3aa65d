"""Time-relative and date-range patterns."""

from query_patterns.data_models import Pattern

TEMPORAL_PATTERNS: list[Pattern] = [
    Pattern(
        id="recent_x",
        category="temporal",
        examples=["recent studies", "recent changes to the API"],
        pattern=r"^recent (.+)$",
        template={"like": "${1}", "boost": "recent"},
        confidence=0.9,
        frequency="very_high",
    ),
    Pattern(
        id="latest_x",
        category="temporal",
        examples=["latest papers", "newest releases of python"],
        pattern=r"^(?:the )?(?:latest|newest) (.+)$",
        template={"like": "${1}", "boost": "recent", "orderBy": "createdAt", "order": "desc"},
        confidence=0.9,
        frequency="very_high",
    ),
    Pattern(
        id="oldest_x",
        category="temporal",
        examples=["oldest records", "earliest versions of unix"],
        pattern=r"^(?:the )?(?:oldest|earliest|first) (.+)$",
        template={"like": "${1}", "orderBy": "createdAt", "order": "asc"},
        confidence=0.85,
    ),
    Pattern(
        id="from_last_period",
        category="temporal",
        examples=["commits from last week", "emails from last month"],
        pattern=r"^(.+?) from (?:the )?last (day|week|month|quarter|year)$",
        template={"like": "${1}", "where": {"createdAt": {"within": "last_${2}"}}},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="in_the_last_n",
        category="temporal",
        examples=["orders in the last 30 days", "posts in the past 2 weeks"],
        pattern=r"^(.+?) (?:in|over|during) the (?:last|past) (\d+) (days?|weeks?|months?|years?)$",
        template={
            "like": "${1}",
            "where": {"createdAt": {"within": {"amount": "${2}", "unit": "${3}"}}},
        },
        confidence=0.91,
        frequency="high",
    ),
    Pattern(
        id="since_year",
        category="temporal",
        examples=["movies since 2015", "research since 2020"],
        pattern=r"^(.+?) since (\d{4})$",
        template={"like": "${1}", "where": {"year": {"greaterThanOrEqual": "${2}"}}},
        confidence=0.88,
        frequency="high",
    ),
    Pattern(
        id="before_year",
        category="temporal",
        examples=["cars made before 1990", "papers before 2000"],
        pattern=r"^(.+?) (?:made |published |released |built )?before (\d{4})$",
        template={"like": "${1}", "where": {"year": {"lessThan": "${2}"}}},
        confidence=0.87,
    ),
    Pattern(
        id="after_year",
        category="temporal",
        examples=["phones released after 2018", "songs after 1999"],
        pattern=r"^(.+?) (?:made |published |released |built )?after (\d{4})$",
        template={"like": "${1}", "where": {"year": {"greaterThan": "${2}"}}},
        confidence=0.87,
    ),
    Pattern(
        id="between_years",
        category="temporal",
        examples=["papers between 2010 and 2015", "albums from 1970 to 1979"],
        pattern=r"^(.+?) (?:between|from) (\d{4}) (?:and|to) (\d{4})$",
        template={"like": "${1}", "where": {"year": {"between": ["${2}", "${3}"]}}},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="in_year",
        category="temporal",
        examples=["events in 2021", "movies in 1994"],
        pattern=r"^(.+?) in (\d{4})$",
        template={"like": "${1}", "where": {"year": "${2}"}},
        confidence=0.86,
        frequency="high",
    ),
    Pattern(
        id="in_month_year",
        category="temporal",
        examples=["meetings in March 2024", "sales in december 2022"],
        pattern=r"^(.+?) in (january|february|march|april|may|june|july|august|september|october|november|december) (\d{4})$",
        template={"like": "${1}", "where": {"month": "${2}", "year": "${3}"}},
        confidence=0.89,
    ),
    Pattern(
        id="today",
        category="temporal",
        examples=["meetings today", "today's news"],
        pattern=r"^(?:(.+?) today|today'?s (.+))$",
        template={"like": "${1}${2}", "where": {"date": "today"}},
        confidence=0.88,
    ),
    Pattern(
        id="yesterday",
        category="temporal",
        examples=["tickets closed yesterday", "yesterday's orders"],
        pattern=r"^(?:(.+?) yesterday|yesterday'?s (.+))$",
        template={"like": "${1}${2}", "where": {"date": "yesterday"}},
        confidence=0.87,
    ),
    Pattern(
        id="this_period",
        category="temporal",
        examples=["deployments this week", "expenses this month"],
        pattern=r"^(.+?) this (week|month|quarter|year)$",
        template={"like": "${1}", "where": {"createdAt": {"within": "this_${2}"}}},
        confidence=0.88,
        frequency="high",
    ),
    Pattern(
        id="upcoming_x",
        category="temporal",
        examples=["upcoming conferences", "future releases"],
        pattern=r"^(?:upcoming|future|scheduled) (.+)$",
        template={"like": "${1}", "where": {"date": {"after": "now"}}},
        confidence=0.86,
    ),
    Pattern(
        id="next_period",
        category="temporal",
        examples=["events next week", "deadlines next month"],
        pattern=r"^(.+?) next (week|month|quarter|year)$",
        template={"like": "${1}", "where": {"date": {"within": "next_${2}"}}},
        confidence=0.87,
    ),
    Pattern(
        id="updated_since",
        category="temporal",
        examples=["documents updated since Monday", "files modified since yesterday"],
        pattern=r"^(.+?) (?:updated|modified|changed) since (.+)$",
        template={"like": "${1}", "where": {"updatedAt": {"after": "${2}"}}},
        confidence=0.85,
    ),
    Pattern(
        id="n_ago",
        category="temporal",
        examples=["posts from 3 days ago", "logs from 2 hours ago"],
        pattern=r"^(.+?) from (\d+) (minutes?|hours?|days?|weeks?|months?|years?) ago$",
        template={
            "like": "${1}",
            "where": {"createdAt": {"around": {"amount": "${2}", "unit": "${3}"}}},
        },
        confidence=0.86,
    ),
    Pattern(
        id="decade",
        category="temporal",
        examples=["music from the 80s", "fashion of the 1990s"],
        pattern=r"^(.+?) (?:from|of|in) the (\d{2,4})s$",
        template={"like": "${1}", "where": {"decade": "${2}"}},
        confidence=0.84,
    ),
]
