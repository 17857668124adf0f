"""Crew status code → long-form description shown to customers."""

CREW_STATUS_DETAILS: dict[str, str] = {
    "NOT_ASSIGNED": (
        "A crew hasn't been assigned to the outage yet. We're working around the clock "
        "to get power restored but we don't have updates at this point. If the status was "
        "previously assigned but changed back to not-assigned, the crew may have been called "
        "away to address an immediate safety issue or emergency, other work took longer than "
        "anticipated, or additional damage was found and we had to shift resources."
    ),
    "ASSIGNED": (
        "A crew has been assigned to the area and your outage is on their list to tackle "
        "when they can."
    ),
    "ENROUTE": "A crew is on their way to investigate your outage.",
    "ONSITE": (
        "A crew is working to investigate the cause of the outage and determine the required "
        "repairs and we'll have an estimated time of restoration (ETR) soon."
    ),
    "SUSPENDED": (
        "The initial crew that arrived and assessed the problem needed different equipment. "
        "This usually means heavy equipment or materials like new poles, or additional "
        "personnel to tackle the problem and it's not currently assigned to a specific crew."
    ),
}


def get_crew_status_detail(crew_status) -> str | None:
    """Exact, case-sensitive lookup; None for unknown, empty or non-string codes."""
    if not isinstance(crew_status, str):
        return None
    return CREW_STATUS_DETAILS.get(crew_status)
