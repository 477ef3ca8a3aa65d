"""Project and repository patterns."""

from query_patterns.data_models import Pattern

PROJECT_PATTERNS: list[Pattern] = [
    Pattern(
        id="projects_using",
        category="projects",
        examples=["projects using react", "projects built with Django"],
        pattern=r"^projects? (?:using|built with|based on) (.+)$",
        template={"where": {"type": "project", "technologies": {"contains": "${1}"}}},
        confidence=0.89,
        frequency="high",
    ),
    Pattern(
        id="active_projects",
        category="projects",
        examples=["active projects", "ongoing projects"],
        pattern=r"^(active|ongoing|current|archived|completed) projects$",
        template={"where": {"type": "project", "status": "${1}"}},
        confidence=0.9,
        frequency="high",
    ),
    Pattern(
        id="projects_about",
        category="projects",
        examples=["projects about computer vision", "projects on renewable energy"],
        pattern=r"^projects? (?:about|on|related to) (.+)$",
        template={"like": "${1}", "where": {"type": "project"}},
        confidence=0.86,
    ),
    Pattern(
        id="projects_owned_by",
        category="projects",
        examples=["projects owned by Alice", "projects led by the platform team"],
        pattern=r"^projects? (?:owned|led|managed) by (.+)$",
        template={
            "where": {"type": "project"},
            "connected": {"from": "${1}", "via": "owns"},
        },
        confidence=0.87,
    ),
    Pattern(
        id="projects_contributors",
        category="projects",
        examples=["contributors to kubernetes", "who contributed to numpy"],
        pattern=r"^(?:contributors to|who contributed to) (.+)$",
        template={
            "where": {"type": "person"},
            "connected": {"to": "${1}", "via": "contributesTo"},
        },
        confidence=0.86,
    ),
    Pattern(
        id="projects_repositories",
        category="projects",
        examples=["repositories for machine learning", "repos about rust"],
        pattern=r"^(?:repositories|repos|repo) (?:for|about|on) (.+)$",
        template={"like": "${1}", "where": {"type": "repository"}},
        confidence=0.85,
    ),
    Pattern(
        id="projects_deadline",
        category="projects",
        examples=["projects due this week", "projects due next month"],
        pattern=r"^projects? due (this|next) (week|month|quarter)$",
        template={"where": {"type": "project", "deadline": "${1}_${2}"}},
        confidence=0.84,
    ),
    Pattern(
        id="projects_overdue",
        category="projects",
        examples=["overdue projects", "delayed projects"],
        pattern=r"^(?:overdue|late|delayed) projects$",
        template={"where": {"type": "project", "status": "overdue"}},
        confidence=0.86,
    ),
    Pattern(
        id="projects_tasks_assigned",
        category="projects",
        examples=["tasks assigned to Bob", "issues assigned to me"],
        pattern=r"^(?:tasks|issues|tickets) assigned to (.+)$",
        template={
            "where": {"type": "task"},
            "connected": {"to": "${1}", "via": "assignedTo"},
        },
        confidence=0.88,
        frequency="high",
    ),
    Pattern(
        id="projects_open_issues",
        category="projects",
        examples=["open issues in the api project", "open bugs in frontend"],
        pattern=r"^open (?:issues|bugs|tickets) in (?:the )?(.+?)(?: project)?$",
        template={
            "where": {"type": "issue", "status": "open"},
            "connected": {"to": "${1}", "via": "partOf"},
        },
        confidence=0.86,
    ),
    Pattern(
        id="projects_milestones",
        category="projects",
        examples=["milestones for the website redesign"],
        pattern=r"^milestones (?:for|of) (?:the )?(.+)$",
        template={
            "where": {"type": "milestone"},
            "connected": {"to": "${1}", "via": "partOf"},
        },
        confidence=0.84,
    ),
    Pattern(
        id="projects_dependencies",
        category="projects",
        examples=["dependencies of the billing service", "what does pandas depend on"],
        pattern=r"^(?:dependencies of (?:the )?(.+)|what does (.+) depend on)$",
        template={"connected": {"from": "${1}${2}", "via": "dependsOn"}},
        confidence=0.83,
    ),
    Pattern(
        id="projects_dependents",
        category="projects",
        examples=["what depends on openssl", "projects that depend on lodash"],
        pattern=r"^(?:what|projects that|services that) depends? on (.+)$",
        template={"connected": {"to": "${1}", "via": "dependsOn"}},
        confidence=0.83,
    ),
    Pattern(
        id="projects_budget",
        category="projects",
        examples=["projects with budget over 100000"],
        pattern=r"^projects with (?:a )?budget (?:over|above|greater than) (\d+)$",
        template={"where": {"type": "project", "budget": {"greaterThan": "${1}"}}},
        confidence=0.85,
    ),
]
