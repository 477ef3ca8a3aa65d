"""Geographic and proximity patterns."""

from query_patterns.data_models import Pattern

LOCATION_PATTERNS: list[Pattern] = [
    Pattern(
        id="near_location",
        category="location",
        examples=["coffee shops near Union Square", "hotels close to the airport"],
        pattern=r"^(.+?) (?:near|close to|around|nearby) (.+)$",
        template={"like": "${1}", "where": {"near": "${2}"}},
        confidence=0.88,
        frequency="very_high",
    ),
    Pattern(
        id="in_location",
        category="location",
        examples=["restaurants in Paris", "jobs in San Francisco"],
        pattern=r"^(.+?) in ([A-Za-z][A-Za-z .'-]+)$",
        template={"like": "${1}", "where": {"location": "${2}"}},
        confidence=0.8,
        frequency="very_high",
    ),
    Pattern(
        id="within_distance",
        category="location",
        examples=["gyms within 5 km of downtown", "schools within 2 miles of home"],
        pattern=r"^(.+?) within (\d+(?:\.\d+)?) ?(km|kilometers|miles|mi|m) (?:of|from) (.+)$",
        template={
            "like": "${1}",
            "where": {"near": "${4}", "distance": {"max": "${2}", "unit": "${3}"}},
        },
        confidence=0.9,
    ),
    Pattern(
        id="from_country",
        category="location",
        examples=["wines from Italy", "artists from Brazil"],
        pattern=r"^(.+?) from ([A-Z][a-z]+(?: [A-Z][a-z]+)*)$",
        template={"like": "${1}", "where": {"origin": "${2}"}},
        confidence=0.78,
    ),
    Pattern(
        id="located_in",
        category="location",
        examples=["offices located in Tokyo", "warehouses situated in Ohio"],
        pattern=r"^(.+?) (?:located|situated|based) in (.+)$",
        template={"like": "${1}", "where": {"location": "${2}"}},
        confidence=0.87,
    ),
    Pattern(
        id="where_is",
        category="location",
        examples=["where is the Louvre", "where is our Berlin office"],
        pattern=r"^where (?:is|are) (?:the |our )?(.+?)\??$",
        template={"like": "${1}", "select": ["location"]},
        confidence=0.85,
        frequency="high",
    ),
    Pattern(
        id="directions_to",
        category="location",
        examples=["directions to the nearest hospital", "how to get to Central Park"],
        pattern=r"^(?:directions to|how to get to|route to) (?:the )?(.+)$",
        template={"like": "${1}", "where": {"type": "place"}, "intent": "navigate"},
        confidence=0.84,
    ),
    Pattern(
        id="region_scope",
        category="location",
        examples=["startups in northern Europe", "weather in southern California"],
        pattern=r"^(.+?) in (north|south|east|west|northern|southern|eastern|western|central) (.+)$",
        template={"like": "${1}", "where": {"location": "${3}", "region": "${2}"}},
        confidence=0.83,
    ),
    Pattern(
        id="local_x",
        category="location",
        examples=["local events", "local news"],
        pattern=r"^local (.+)$",
        template={"like": "${1}", "where": {"near": "user_location"}},
        confidence=0.8,
    ),
    Pattern(
        id="countries_with",
        category="location",
        examples=["countries with the highest GDP", "cities with the best public transport"],
        pattern=r"^(countries|cities|states|regions) with (?:the )?(.+)$",
        template={"like": "${2}", "where": {"type": "${1}"}},
        confidence=0.82,
    ),
]
