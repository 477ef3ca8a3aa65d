"""Attribute filters, negation and status patterns."""

from query_patterns.data_models import Pattern

FILTER_PATTERNS: list[Pattern] = [
    Pattern(
        id="filter_with_attribute",
        category="filter",
        examples=["find test data with high values", "laptops with 32GB RAM"],
        pattern=r"^(?:find |show )?(.+?) with (.+)$",
        template={"like": "${1}", "where": {"has": "${2}"}},
        confidence=0.78,
        frequency="very_high",
    ),
    Pattern(
        id="filter_greater_than",
        category="filter",
        examples=["products with price greater than 100", "papers with citations over 500"],
        pattern=r"^(.+?) with (\w+) (?:greater than|more than|over|above) (\d+(?:\.\d+)?)$",
        template={"like": "${1}", "where": {"${2}": {"greaterThan": "${3}"}}},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="filter_less_than",
        category="filter",
        examples=["products with price less than 50", "houses with age under 10"],
        pattern=r"^(.+?) with (\w+) (?:less than|fewer than|under|below) (\d+(?:\.\d+)?)$",
        template={"like": "${1}", "where": {"${2}": {"lessThan": "${3}"}}},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="filter_between_values",
        category="filter",
        examples=["laptops with price between 500 and 1000"],
        pattern=r"^(.+?) with (\w+) between (\d+(?:\.\d+)?) and (\d+(?:\.\d+)?)$",
        template={"like": "${1}", "where": {"${2}": {"between": ["${3}", "${4}"]}}},
        confidence=0.91,
    ),
    Pattern(
        id="filter_price_under",
        category="filter",
        examples=["headphones under $100", "shoes under 50 dollars"],
        pattern=r"^(.+?) (?:under|below|less than) \$?(\d+(?:\.\d+)?)(?: dollars| usd)?$",
        template={"like": "${1}", "where": {"price": {"lessThan": "${2}"}}},
        confidence=0.89,
        frequency="high",
    ),
    Pattern(
        id="filter_price_over",
        category="filter",
        examples=["watches over $1000", "cars above 20000 dollars"],
        pattern=r"^(.+?) (?:over|above|more than) \$(\d+(?:\.\d+)?)$|^(.+?) (?:over|above|more than) (\d+(?:\.\d+)?) (?:dollars|usd)$",
        template={"like": "${1}${3}", "where": {"price": {"greaterThan": "${2}${4}"}}},
        confidence=0.87,
    ),
    Pattern(
        id="filter_type_is",
        category="filter",
        examples=["items where type is document", "records where status is pending"],
        pattern=r"^(.+?) where (\w+) (?:is|equals|=) (.+)$",
        template={"like": "${1}", "where": {"${2}": "${3}"}},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="filter_tagged",
        category="filter",
        examples=["notes tagged urgent", "photos tagged with vacation"],
        pattern=r"^(.+?) tagged (?:with |as )?(.+)$",
        template={"like": "${1}", "where": {"tags": {"contains": "${2}"}}},
        confidence=0.88,
    ),
    Pattern(
        id="filter_containing",
        category="filter",
        examples=["documents containing the word budget", "emails mentioning the merger"],
        pattern=r"^(.+?) (?:containing|mentioning|that mention|that contain)(?: the word)? (.+)$",
        template={"like": "${2}", "where": {"type": "${1}"}, "match": "text"},
        confidence=0.86,
    ),
    Pattern(
        id="filter_only_type",
        category="filter",
        examples=["only pdfs", "only images about cats"],
        pattern=r"^only (\w+?)s?(?: about (.+))?$",
        template={"like": "${2}", "where": {"type": "${1}"}},
        confidence=0.83,
    ),
    Pattern(
        id="filter_created_by",
        category="filter",
        examples=["files created by Alice", "documents uploaded by Bob"],
        pattern=r"^(.+?) (?:created|uploaded|written|added) by (.+)$",
        template={"like": "${1}", "connected": {"from": "${2}", "via": "created"}},
        confidence=0.87,
        frequency="high",
    ),
    Pattern(
        id="filter_language",
        category="filter",
        examples=["articles in Spanish", "books written in French"],
        pattern=r"^(.+?) (?:written )?in (english|spanish|french|german|italian|portuguese|chinese|japanese|korean|russian|arabic|hindi)$",
        template={"like": "${1}", "where": {"language": "${2}"}},
        confidence=0.88,
    ),
]

NEGATION_PATTERNS: list[Pattern] = [
    Pattern(
        id="negation_without",
        category="negation",
        examples=["recipes without gluten", "cars without leather seats"],
        pattern=r"^(.+?) without (.+)$",
        template={"like": "${1}", "where": {"not": {"has": "${2}"}}},
        confidence=0.86,
        frequency="high",
    ),
    Pattern(
        id="negation_except",
        category="negation",
        examples=["all projects except archived ones", "users except admins"],
        pattern=r"^(?:all )?(.+?) (?:except|excluding|other than|but not) (.+?)(?: ones)?$",
        template={"like": "${1}", "exclude": "${2}"},
        confidence=0.84,
    ),
    Pattern(
        id="negation_not",
        category="negation",
        examples=["tasks not assigned", "orders not shipped"],
        pattern=r"^(.+?) (?:that are )?not (\w+)$",
        template={"like": "${1}", "where": {"not": {"status": "${2}"}}},
        confidence=0.8,
    ),
    Pattern(
        id="negation_no",
        category="negation",
        examples=["customers with no orders", "repos with no tests"],
        pattern=r"^(.+?) with (?:no|zero) (.+)$",
        template={"like": "${1}", "where": {"${2}": {"count": 0}}},
        confidence=0.84,
    ),
]

STATUS_PATTERNS: list[Pattern] = [
    Pattern(
        id="status_pending",
        category="status",
        examples=["pending approvals", "open tickets"],
        pattern=r"^(pending|open|closed|resolved|draft|published|approved|rejected) (.+)$",
        template={"like": "${2}", "where": {"status": "${1}"}},
        confidence=0.87,
        frequency="high",
    ),
    Pattern(
        id="status_of",
        category="status",
        examples=["status of the migration", "progress on the Q3 roadmap"],
        pattern=r"^(?:status|progress) (?:of|on) (?:the |my )?(.+)$",
        template={"like": "${1}", "select": ["status", "progress"]},
        confidence=0.85,
    ),
    Pattern(
        id="status_failed",
        category="status",
        examples=["failed builds", "broken deployments"],
        pattern=r"^(failed|failing|broken|crashed|errored) (.+)$",
        template={"like": "${2}", "where": {"status": "failed"}},
        confidence=0.86,
    ),
    Pattern(
        id="status_unread",
        category="status",
        examples=["unread messages", "unanswered questions"],
        pattern=r"^(unread|unanswered|unresolved|unassigned|unreviewed) (.+)$",
        template={"like": "${2}", "where": {"status": "${1}"}},
        confidence=0.86,
    ),
    Pattern(
        id="status_favorites",
        category="status",
        examples=["my favorite recipes", "starred documents"],
        pattern=r"^(?:my )?(?:favorite|favourite|starred|bookmarked|saved) (.+)$",
        template={"like": "${1}", "where": {"favorite": "true"}},
        confidence=0.84,
    ),
    Pattern(
        id="status_mine",
        category="status",
        examples=["my tasks", "my open pull requests"],
        pattern=r"^my (.+)$",
        template={"like": "${1}", "connected": {"to": "current_user", "via": "ownedBy"}},
        confidence=0.82,
        frequency="very_high",
    ),
]
