"""Baseline event knowledge, the lowest-precedence layer.

Overlays from the database and the docs directory are merged on top of this
tree at read time. Do not mutate it; build a merged copy instead.
"""
from typing import Any, Dict

STATIC_KNOWLEDGE: Dict[str, Any] = {
    "event": {
        "name": "Paguyuban Messe 2026 - Level-Up Indonesia",
        "dates": "August 7-8, 2026",
        "days": ["August 7", "August 8"],
        "duration": "2 days",
        "location": "Arena Berlin (Halle CE, Beach Club, and Club)",
        "venue": {
            "mainHall": "6,500m² for exhibitions, stage, dining",
            "beachClub": "Waterfront VVIP networking area",
            "clubBerlin": "Evening entertainment space",
            "capacity": "1,800 seated, additional standing areas",
        },
        "attendance": {
            "offline": "1,800 participants at Arena Berlin",
            "online": "4,000-5,000 hybrid viewers",
            "total": "5,800-6,800 over two days",
            "businessAttendees": "1,440-1,680 (~60% onsite)",
            "exhibitionSpaces": "25-30 booths",
        },
    },
    "financials": {
        "revenue": {
            "total": "€1,018,660",
            "breakdown": {
                "sponsorship": {"amount": "€790,000", "percentage": "77.6%"},
                "ticketSales": {"amount": "€104,660", "percentage": "10.3%"},
                "exhibitorFees": {"amount": "€66,000", "percentage": "6.5%"},
                "additional": {"amount": "€58,000", "percentage": "5.7%"},
            },
        },
        "costs": {
            "total": "€953,474",
            "breakdown": {
                "venue": {"amount": "€235,920", "percentage": "24.7%"},
                "marketing": {"amount": "€168,000", "percentage": "17.6%"},
                "staffing": {"amount": "€158,000", "percentage": "16.6%"},
                "entertainment": {"amount": "€156,654", "percentage": "16.4%"},
                "operations": {"amount": "€132,000", "percentage": "13.8%"},
                "technology": {"amount": "€66,900", "percentage": "7.0%"},
                "speakers": {"amount": "€36,000", "percentage": "3.8%"},
            },
        },
        "netProfit": "€65,186",
        "breakEven": "Already achieved with current projections",
    },
    "sponsorship": {
        "titleSponsor": {
            "price": "€120,000",
            "units": "1 available",
            "benefits": [
                "Naming rights (Paguyuban Messe 2026 presented by [Sponsor])",
                "Largest logo on all materials, website, and app",
                "Dedicated opening keynote mention",
                "Exclusive on-site branding in Main Hall and Beach Club",
                "Priority AI matchmaking (up to 50 facilitated introductions)",
                "Speaking slot in flagship summit",
                "Full attendee database access (GDPR-compliant)",
                "20 VIP passes",
                "Exclusive dinner with organizers and speakers",
                "White-label use of PaguyubanConnect for one future event",
            ],
        },
        "platinumSponsors": {
            "price": "€60,000",
            "units": "3 available",
            "benefits": [
                "Prominent logo on marketing materials",
                "On-site branding in exhibition areas and Club Berlin",
                "Sponsor a summit session",
                "30 AI-facilitated introductions",
                "Panel participation opportunity",
                "Co-branded booth in expo hall",
                "15 VIP passes",
                "VVIP networking access",
            ],
        },
        "goldSponsors": {
            "price": "€40,000",
            "units": "4 available",
            "benefits": [
                "Logo on select materials and website",
                "On-site signage in high-traffic areas",
                "20 AI matches",
                "Speaking slot or demo opportunity",
                "Shared booth space",
                "10 VIP passes",
            ],
        },
        "silverSponsors": {
            "price": "€25,000",
            "units": "6 available",
            "benefits": [
                "Logo in event app and website",
                "On-site poster placement",
                "10 AI introductions",
                "Exhibit table option",
                "5 VIP passes",
            ],
        },
        "bronzeSponsors": {
            "price": "€15,000",
            "units": "8 available",
            "benefits": [
                "Logo on website and thank-you slide",
                "5 AI matches",
                "General networking access",
                "3 VIP passes",
            ],
        },
    },
    "tickets": {
        "day1": {"standard": "€45 (400 tickets)", "student": "€32 (200 tickets, 30% discount)"},
        "day2": {"standard": "€40 (280 tickets)", "student": "€28 (120 tickets)"},
        "twoDay": {"standard": "€70 (400 tickets)", "student": "€49 (200 tickets)"},
        "vip": "€120 (100 packages)",
        "technoNight": "€20 per night (800 total capacity)",
    },
    "market": {
        "bilateralTrade": {
            "total": "€8.2 billion (2024)",
            "germanImports": "€4.43 billion from Indonesia",
            "germanExports": "€3.75 billion to Indonesia",
        },
        "targetAudience": {
            "diaspora": "~20,000 Indonesian diaspora in Germany",
            "residents": "15,829 Indonesian citizens",
            "students": "5,730 Indonesian students",
        },
        "impressions": "Target: 5-8 million impressions",
        "businessPipeline": "€200,000-€650,000 expected over 12-18 months",
    },
    "strategicSectors": [
        {
            "name": "Green Technology & Renewable Energy",
            "focus": "Solar panels, wind turbines, energy storage",
            "opportunity": "Indonesia's carbon neutrality commitment by 2060",
        },
        {
            "name": "Digital Economy & Fintech",
            "focus": "Digital payments, blockchain, e-commerce",
            "opportunity": "Indonesia's 150+ million digital users",
        },
        {
            "name": "Manufacturing & Industry 4.0",
            "focus": "Smart factories, IoT solutions, quality systems",
            "opportunity": "4.5% annual manufacturing growth",
        },
        {
            "name": "Food Technology & Sustainable Agriculture",
            "focus": "Processing technology, cold chain, organic certification",
            "opportunity": "Agricultural modernization needs",
        },
        {
            "name": "Healthcare & Medical Technology",
            "focus": "Diagnostic equipment, telemedicine, hospital management",
            "opportunity": "Healthcare infrastructure development",
        },
        {
            "name": "Education Technology & Vocational Training",
            "focus": "Online learning, vocational programs, certification",
            "opportunity": "Skills development priorities",
        },
    ],
    "program": {
        "day1": {
            "title": "Culture & Business (August 7)",
            "highlights": [
                "Opening Ceremony with Indonesian Ambassador (09:00-10:30)",
                "B2B Matchmaking & Exhibition (10:30-18:00)",
                "Cultural Workshops: Batik, Sagu, Cakalele, Tifa (11:30-15:30)",
                "Business Summits (13:00-17:00)",
                "Investment Talkshow (17:30-18:30)",
                "The Panturas Concert (19:00-20:00)",
                "Tulus Concert (20:30-22:00)",
                "Techno Night at Club Berlin (23:00-07:00)",
            ],
        },
        "day2": {
            "title": "Innovation & Creative Economy (August 8)",
            "highlights": [
                "Continued Exhibition & Startup Showcase (08:00-18:00)",
                "Mascot Contest with €1,000 prize (11:30-13:30)",
                "Creative Economy Summits (13:30-16:30)",
                "VVIP Waterfront Lounge (15:00-20:00)",
                "Leadership Talk on AI & Innovation (17:00-18:00)",
                "Efek Rumah Kaca Concert (18:30-20:00)",
                "Dewa 19 Grand Finale (20:30-22:30)",
                "Techno Night Day 2 (23:00-07:00)",
            ],
        },
    },
    "technology": {
        "paguyubanConnect": {
            "name": "PaguyubanConnect AI Platform",
            "budget": "€20,000",
            "features": [
                "AI-powered B2B matchmaking",
                "Profile creation with business interests",
                "Calendar integration",
                "In-app messaging",
                "QR code for quick connections",
                "Post-event follow-up tools",
                "Analytics dashboard",
            ],
        },
        "smartStaff": {
            "name": "SmartStaff Volunteer System",
            "budget": "€10,000",
            "features": [
                "Volunteer scheduling and management",
                "Real-time communication",
                "Performance tracking",
                "Offline mode capability",
            ],
        },
        "hybrid": {
            "streaming": "YouTube Live for 5,000 concurrent viewers",
            "interactive": "Polls, Q&A, virtual networking rooms",
        },
    },
    "artists": {
        "day1": [
            {"name": "The Panturas", "genre": "Indonesian indie rock", "fee": "€15,000"},
            {"name": "Tulus", "genre": "Premier vocalist", "fee": "€45,000"},
        ],
        "day2": [
            {"name": "Efek Rumah Kaca", "genre": "Alternative rock", "fee": "€20,000"},
            {"name": "Dewa 19", "genre": "Indonesian rock legends", "fee": "€55,000"},
        ],
    },
    "contact": {
        "email": "nusantaraexpoofficial@gmail.com",
        "phone": "+49 1573 9396157",
        "location": "Hamburg, Germany",
        "website": "paguyuban-messe.com",
    },
    "roiCalculations": {
        "bronzeSponsor": {
            "investment": "€15,000",
            "expectedMatches": "5-8 quality business connections",
            "averageLeadValue": "€3,000-€8,000",
            "potentialPipeline": "€15,000-€64,000",
            "roiMultiplier": "1-4x",
        },
        "silverSponsor": {
            "investment": "€30,000",
            "expectedMatches": "8-12 quality business connections",
            "averageLeadValue": "€4,000-€10,000",
            "potentialPipeline": "€32,000-€120,000",
            "roiMultiplier": "1-4x",
        },
        "goldSponsor": {
            "investment": "€60,000",
            "expectedMatches": "12-18 quality business connections",
            "averageLeadValue": "€5,000-€15,000",
            "potentialPipeline": "€60,000-€270,000",
            "roiMultiplier": "1-4.5x",
        },
        "platinumSponsor": {
            "investment": "€90,000",
            "expectedMatches": "18-25 quality business connections",
            "averageLeadValue": "€8,000-€20,000",
            "potentialPipeline": "€144,000-€500,000",
            "roiMultiplier": "1.6-5.5x",
        },
        "titleSponsor": {
            "investment": "€120,000",
            "expectedMatches": "25-35 premium business connections",
            "averageLeadValue": "€10,000-€25,000",
            "potentialPipeline": "€250,000-€875,000",
            "roiMultiplier": "2-7x",
        },
    },
    "aiMatchmakingDetails": {
        "algorithm": "Advanced matching based on industry, company size, business needs, and geographic focus",
        "successRate": "78% of matched connections result in follow-up meetings",
        "process": [
            "Pre-event profile analysis and goal setting",
            "Real-time matching during networking sessions",
            "Scheduled 1-on-1 meetings in dedicated spaces",
            "Post-event follow-up facilitation and tracking",
        ],
        "features": [
            "QR code instant connection system",
            "AI-curated meeting recommendations",
            "Digital business card exchange",
            "Post-event relationship tracking dashboard",
        ],
    },
}
