"""Reply and context templates.

Every template may embed ``[get:path]`` markers; they are filled from the
composed knowledge by ``resolver.resolve_template`` right before use, so
overlay edits show up without touching these strings.
"""
from typing import Dict

TOPIC_CONTEXTS: Dict[str, str] = {
    "dates": """Event Dates: [get:event.dates]
Day 1: [get:program.day1.title]
Day 2: [get:program.day2.title]
Duration: [get:event.duration] of intensive business networking and cultural celebration""",

    "location": """Venue: [get:event.location]
Main Hall: [get:event.venue.mainHall]
Beach Club: [get:event.venue.beachClub]
Club Berlin: [get:event.venue.clubBerlin]
Capacity: [get:event.venue.capacity]""",

    "venue": """Venue: [get:event.location]
Main Hall: [get:event.venue.mainHall]
Capacity: [get:event.venue.capacity]
Exhibition: [get:event.attendance.exhibitionSpaces]""",

    "pricing": """Ticket Prices:
- Day 1: Standard [get:tickets.day1.standard], Student [get:tickets.day1.student]
- Day 2: Standard [get:tickets.day2.standard], Student [get:tickets.day2.student]
- 2-Day Pass: Standard [get:tickets.twoDay.standard], Student [get:tickets.twoDay.student]
- VIP Package: [get:tickets.vip]
- Techno Night: [get:tickets.technoNight]

Total Revenue Target: [get:financials.revenue.total]""",

    "sponsorship": """Sponsorship Tiers:
- Title Sponsor: [get:sponsorship.titleSponsor.price] ([get:sponsorship.titleSponsor.units])
- Platinum: [get:sponsorship.platinumSponsors.price] ([get:sponsorship.platinumSponsors.units])
- Gold: [get:sponsorship.goldSponsors.price] ([get:sponsorship.goldSponsors.units])
- Silver: [get:sponsorship.silverSponsors.price] ([get:sponsorship.silverSponsors.units])
- Bronze: [get:sponsorship.bronzeSponsors.price] ([get:sponsorship.bronzeSponsors.units])

ROI: [get:market.businessPipeline]
Sponsorship revenue: [get:financials.revenue.breakdown.sponsorship.amount] ([get:financials.revenue.breakdown.sponsorship.percentage] of total)""",

    "roi": """Business pipeline: [get:market.businessPipeline]
Title sponsor ROI: [get:roiCalculations.titleSponsor.roiMultiplier] on [get:roiCalculations.titleSponsor.investment]
Bronze sponsor ROI: [get:roiCalculations.bronzeSponsor.roiMultiplier] on [get:roiCalculations.bronzeSponsor.investment]
Matchmaking success rate: [get:aiMatchmakingDetails.successRate]""",

    "program": """Day 1 ([get:program.day1.title]) highlights:
[get:program.day1.highlights]

Day 2 ([get:program.day2.title]) highlights:
[get:program.day2.highlights]""",

    "technology": """AI-Powered Features:
- [get:technology.paguyubanConnect.name]: [get:technology.paguyubanConnect.budget] investment in AI matchmaking
- [get:technology.smartStaff.name]: [get:technology.smartStaff.budget] volunteer management system
- Hybrid streaming: [get:technology.hybrid.streaming]
- Interactive: [get:technology.hybrid.interactive]""",

    "tech": """Matchmaking algorithm: [get:aiMatchmakingDetails.algorithm]
Success rate: [get:aiMatchmakingDetails.successRate]
Process: [get:aiMatchmakingDetails.process]""",

    "artists": """Day 1 artists: [get:artists.day1]
Day 2 artists: [get:artists.day2]""",

    "business": """Market Opportunity:
- Bilateral Trade: [get:market.bilateralTrade.total]
- Expected: [get:event.attendance.businessAttendees] business professionals
- [get:event.attendance.exhibitionSpaces]
- Business pipeline: [get:market.businessPipeline]""",

    "contact": """Email: [get:contact.email]
Phone: [get:contact.phone]
Website: [get:contact.website]""",

    "general": """[get:event.name]
Dates: [get:event.dates]
Location: [get:event.location]
Attendance: [get:event.attendance.total]
Vision: Bringing Indonesian entrepreneurship, culture and technology onto the European stage""",
}

SMART_RESPONSES: Dict[str, Dict[str, str]] = {
    "dates": {
        "en": "[get:event.name] takes place on [get:event.dates] at [get:event.location]. "
              "Day 1 focuses on [get:program.day1.title] with opening ceremony, B2B matchmaking, cultural "
              "workshops, and evening concerts. Day 2 covers [get:program.day2.title] with startup "
              "showcases, creative summits, and the grand finale.",
        "id": "[get:event.name] berlangsung pada [get:event.dates] di [get:event.location]. "
              "Hari 1: [get:program.day1.title]. Hari 2: [get:program.day2.title].",
        "de": "Die [get:event.name] findet am [get:event.dates] in der [get:event.location] statt. "
              "Tag 1: [get:program.day1.title]. Tag 2: [get:program.day2.title].",
    },
    "sponsorship": {
        "en": "We offer five sponsorship tiers from [get:sponsorship.bronzeSponsors.price] (Bronze) to "
              "[get:sponsorship.titleSponsor.price] (Title Sponsor). Title sponsors receive naming rights, "
              "priority AI matchmaking, VIP passes, and speaking opportunities. Partners can expect "
              "[get:market.businessPipeline] in business pipeline. Each tier includes AI matchmaking and "
              "brand visibility ([get:market.impressions]).",
        "id": "Kami menawarkan lima tingkat sponsorship dari [get:sponsorship.bronzeSponsors.price] (Bronze) "
              "hingga [get:sponsorship.titleSponsor.price] (Title Sponsor). Pipeline bisnis yang diharapkan: "
              "[get:market.businessPipeline].",
        "de": "Wir bieten fünf Sponsoring-Stufen von [get:sponsorship.bronzeSponsors.price] (Bronze) bis "
              "[get:sponsorship.titleSponsor.price] (Title Sponsor). Erwartete Business-Pipeline: "
              "[get:market.businessPipeline].",
    },
}

CONTACT_APOLOGY: Dict[str, str] = {
    "ucup": "I apologize for the technical issue. Please contact us at [get:contact.email] or call "
            "[get:contact.phone] for immediate assistance with [get:event.name].",
    "rima": "Apologies for the inconvenience. For immediate information about [get:event.name], please "
            "reach out to [get:contact.email]. Our team will assist you promptly.",
}

FOLLOW_UP = "Schedule a call to discuss partnership opportunities: [get:contact.phone]"

SUGGESTED_QUESTIONS: Dict[str, list] = {
    "general": [
        "What are the sponsorship opportunities?",
        "When is Paguyuban Messe 2026?",
        "How can I register for the event?",
        "What is the expected ROI for sponsors?",
    ],
    "sponsorship": [
        "What benefits does the Title Sponsor receive?",
        "How many AI-facilitated matches are included?",
        "Can we customize our sponsorship package?",
        "What is the payment schedule?",
    ],
    "program": [
        "Which artists are performing?",
        "What cultural workshops are available?",
        "What are the business summit topics?",
        "Is there a startup showcase?",
    ],
    "technology": [
        "How does the AI matchmaking work?",
        "Can we access the platform after the event?",
        "What hybrid features are available?",
        "Is there an event app?",
    ],
}
