"""Shopping, pricing and product-comparison patterns."""

from query_patterns.data_models import Pattern

COMMERCIAL_PATTERNS: list[Pattern] = [
    Pattern(
        id="commercial_compare",
        category="commercial",
        examples=["tensorflow vs pytorch", "iphone versus pixel", "aws compared to azure"],
        pattern=r"(.+) (vs|versus|compared to|vs\.) (.+)",
        template={"like": ["${1}", "${3}"], "where": {"type": "comparison"}},
        confidence=0.92,
        frequency="very_high",
    ),
    Pattern(
        id="commercial_buy",
        category="commercial",
        examples=["buy running shoes", "where to buy a standing desk"],
        pattern=r"^(?:where to )?(?:buy|purchase|order) (?:an? )?(.+)$",
        template={"like": "${1}", "where": {"type": "product"}, "intent": "purchase"},
        confidence=0.88,
        frequency="high",
    ),
    Pattern(
        id="commercial_price_of",
        category="commercial",
        examples=["price of a Tesla Model 3", "how much does a MacBook cost"],
        pattern=r"^(?:price of (?:an? |the )?(.+)|how much (?:does|do|is) (?:an? |the )?(.+?)(?: cost)?\??)$",
        template={"like": "${1}${2}", "select": ["price"]},
        confidence=0.88,
        frequency="high",
    ),
    Pattern(
        id="commercial_deals",
        category="commercial",
        examples=["deals on headphones", "discounts for students"],
        pattern=r"^(?:deals|discounts|sales|offers|coupons) (?:on|for) (.+)$",
        template={"like": "${1}", "where": {"onSale": "true"}, "boost": "discount"},
        confidence=0.86,
    ),
    Pattern(
        id="commercial_reviews",
        category="commercial",
        examples=["reviews of the Sony WH-1000XM5", "ratings for Hotel Adlon"],
        pattern=r"^(?:reviews?|ratings?) (?:of|for) (?:the )?(.+)$",
        template={"like": "${1}", "where": {"type": "review"}},
        confidence=0.87,
        frequency="high",
    ),
    Pattern(
        id="commercial_in_stock",
        category="commercial",
        examples=["graphics cards in stock", "ps5 available now"],
        pattern=r"^(.+?) (?:in stock|available now|available)$",
        template={"like": "${1}", "where": {"inStock": "true"}},
        confidence=0.85,
    ),
    Pattern(
        id="commercial_brand",
        category="commercial",
        examples=["Nike shoes", "Samsung monitors"],
        pattern=r"^(nike|adidas|apple|samsung|sony|lg|dell|hp|lenovo|asus|bose|canon|nikon) (.+)$",
        template={"like": "${2}", "where": {"brand": "${1}"}},
        confidence=0.84,
    ),
    Pattern(
        id="commercial_free",
        category="commercial",
        examples=["free photo editors", "free online courses"],
        pattern=r"^free (.+)$",
        template={"like": "${1}", "where": {"price": 0}},
        confidence=0.85,
        frequency="high",
    ),
    Pattern(
        id="commercial_shipping",
        category="commercial",
        examples=["laptops with free shipping", "books that ship to Canada"],
        pattern=r"^(.+?) (?:with free shipping|that ships? to (.+))$",
        template={"like": "${1}", "where": {"shipping": {"destination": "${2}"}}},
        confidence=0.82,
    ),
    Pattern(
        id="commercial_gift_ideas",
        category="commercial",
        examples=["gift ideas for dad", "gifts for a 10 year old"],
        pattern=r"^gift(?:s| ideas) for (?:an? |my )?(.+)$",
        template={"like": "${1}", "where": {"type": "product"}, "intent": "gift"},
        confidence=0.83,
    ),
    Pattern(
        id="commercial_subscription",
        category="commercial",
        examples=["subscription plans for Spotify", "pricing plans of Notion"],
        pattern=r"^(?:subscription|pricing) plans (?:for|of) (.+)$",
        template={"like": "${1}", "where": {"type": "plan"}, "select": ["price"]},
        confidence=0.82,
    ),
    Pattern(
        id="commercial_worth_it",
        category="commercial",
        examples=["is the Kindle worth it", "is ChatGPT Plus worth buying?"],
        pattern=r"^is (?:the )?(.+?) worth (?:it|buying|the money)\??$",
        template={"like": "${1}", "where": {"type": "review"}, "intent": "evaluation"},
        confidence=0.83,
    ),
]
