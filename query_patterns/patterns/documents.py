"""Document, media and event lookups."""

from query_patterns.data_models import Pattern

DOCUMENT_PATTERNS: list[Pattern] = [
    Pattern(
        id="documents_about",
        category="documents",
        examples=["documents about the merger", "files related to onboarding"],
        pattern=r"^(?:documents?|files?|docs) (?:about|on|related to|regarding) (.+)$",
        template={"like": "${1}", "where": {"type": "document"}},
        confidence=0.88,
        frequency="high",
    ),
    Pattern(
        id="documents_by_format",
        category="documents",
        examples=["pdf reports on climate", "spreadsheets about revenue"],
        pattern=r"^(pdfs?|spreadsheets?|slides|presentations?|word documents?) (?:reports? )?(?:about|on|for) (.+)$",
        template={"like": "${2}", "where": {"type": "document", "format": "${1}"}},
        confidence=0.85,
    ),
    Pattern(
        id="documents_mentioning",
        category="documents",
        examples=["documents mentioning GDPR", "emails that mention the budget"],
        pattern=r"^(documents?|files?|emails?|notes?|messages?) (?:mentioning|that mentions?|which mentions?|containing) (?:the )?(.+)$",
        template={"where": {"type": "${1}", "content": {"contains": "${2}"}}},
        confidence=0.86,
    ),
    Pattern(
        id="documents_shared_with",
        category="documents",
        examples=["files shared with Maria", "documents shared by the legal team"],
        pattern=r"^(?:files?|documents?|docs) shared (with|by) (?:the )?(.+)$",
        template={"where": {"type": "document", "sharing": {"${1}": "${2}"}}},
        confidence=0.84,
    ),
    Pattern(
        id="meeting_notes",
        category="documents",
        examples=["meeting notes from Monday", "notes from the design review"],
        pattern=r"^(?:meeting )?notes (?:from|of|for) (?:the )?(.+)$",
        template={"like": "${1}", "where": {"type": "note"}},
        confidence=0.85,
    ),
    Pattern(
        id="media_images_of",
        category="media",
        examples=["images of mountains", "photos of the eiffel tower"],
        pattern=r"^(?:images?|photos?|pictures?|pics) (?:of|showing|with) (?:the )?(.+)$",
        template={"like": "${1}", "where": {"type": "image"}},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="media_videos_about",
        category="media",
        examples=["videos about cooking pasta", "video tutorials on blender"],
        pattern=r"^videos? (?:tutorials? )?(?:about|on|of|showing) (.+)$",
        template={"like": "${1}", "where": {"type": "video"}},
        confidence=0.89,
        frequency="high",
    ),
    Pattern(
        id="media_podcasts",
        category="media",
        examples=["podcasts about startups", "podcast episodes on history"],
        pattern=r"^podcasts?(?: episodes?)? (?:about|on) (.+)$",
        template={"like": "${1}", "where": {"type": "podcast"}},
        confidence=0.87,
    ),
    Pattern(
        id="media_songs_by",
        category="media",
        examples=["songs by Radiohead", "albums by Miles Davis"],
        pattern=r"^(songs?|albums?|tracks?|music) by (.+)$",
        template={"where": {"type": "${1}", "artist": "${2}"}},
        confidence=0.88,
    ),
    Pattern(
        id="media_books_by",
        category="media",
        examples=["books by Ursula K. Le Guin", "novels written by Tolstoy"],
        pattern=r"^(?:books?|novels?) (?:written )?by (.+)$",
        template={"where": {"type": "book", "author": "${1}"}},
        confidence=0.89,
        frequency="high",
    ),
    Pattern(
        id="events_upcoming",
        category="events",
        examples=["upcoming conferences on AI", "upcoming events in Berlin"],
        pattern=r"^upcoming (events?|conferences?|meetups?|concerts?|workshops?)(?: (?:on|about|in) (.+))?$",
        template={
            "like": "${2}",
            "where": {"type": "${1}", "date": {"greaterThan": "now"}},
            "orderBy": "date",
        },
        confidence=0.87,
    ),
    Pattern(
        id="events_on_date",
        category="events",
        examples=["events on March 3rd", "concerts on saturday"],
        pattern=r"^(events?|concerts?|meetings?|shows?) on (.+)$",
        template={"where": {"type": "${1}", "date": "${2}"}},
        confidence=0.84,
    ),
    Pattern(
        id="events_near",
        category="events",
        examples=["concerts near me", "meetups near downtown"],
        pattern=r"^(events?|concerts?|meetups?|festivals?|shows?) near (.+)$",
        template={"where": {"type": "${1}", "location": {"near": "${2}"}}},
        confidence=0.85,
    ),
    Pattern(
        id="events_schedule",
        category="events",
        examples=["schedule for PyCon", "agenda of the board meeting"],
        pattern=r"^(?:schedule|agenda|program|timetable) (?:for|of) (?:the )?(.+)$",
        template={"like": "${1}", "where": {"type": "event"}, "select": ["schedule"]},
        confidence=0.83,
    ),
]
