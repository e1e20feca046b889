# rural_health/content/narrative.py
# Static page copy. Kept as plain data so the app only decides layout.

INTRO = [
    "Rural India faces a persistent shortage of trained healthcare workers despite various "
    "government incentives and programs. This shortage affects approximately 70% of India's "
    "population but has access to less than 30% of the country's doctors.",
    "The WHO recommends a doctor-to-population ratio of 1:1,000, but rural India's ratio hovers "
    "around 1:10,000 in many states. This analysis applies systems thinking to understand why "
    "this problem persists and identify effective interventions.",
]

KEY_FINDINGS = [
    "Powerful reinforcing feedback loops maintain workforce shortages",
    "Current interventions often target symptoms, not structural causes",
    "Medical education, professional isolation, and living conditions are key drivers",
    "Long-term structural changes offer the highest leverage for improvement",
]

DIAGRAM_CAPTION = ("The Causal Loop Diagram illustrates key variables and relationships "
                   "perpetuating rural healthcare workforce shortages.")

CORE_VARIABLES = [
    "Rural Healthcare Workforce", "Working Conditions", "Workload per HCW", "Urban Migration",
    "Quality of Healthcare", "Professional Isolation", "Government Incentives",
]

# (cause, effect, polarity, explanation)
KEY_RELATIONSHIPS = [
    ("Rural Healthcare Workforce", "Quality of Rural Healthcare", "+", "More workers improve care quality"),
    ("Urban Migration", "Rural Healthcare Workforce", "-", "Migration reduces available workforce"),
    ("Rural Healthcare Workforce", "Workload per HCW", "-", "Fewer workers means higher workload"),
    ("Working Conditions", "Urban Migration", "+", "Poor conditions drive migration"),
    ("Professional Isolation", "Urban Migration", "+", "Isolation pushes workers to urban areas"),
]

FEEDBACK_LOOPS = [
    {"id": "R1", "name": "Workforce Decline Loop", "kind": "Reinforcing",
     "chain": ["Fewer workers", "Higher workload", "Worse working conditions", "Increased migration",
               "Even fewer workers"]},
    {"id": "R2", "name": "Healthcare Quality Loop", "kind": "Reinforcing",
     "chain": ["Lower workforce", "Lower quality", "Poorer outcomes", "Lower living standards",
               "More migration", "Lower workforce"]},
    {"id": "B1", "name": "Government Intervention", "kind": "Balancing",
     "chain": ["Lower workforce", "More government incentives", "(Attempts to increase) workforce"]},
]

# Event-Pattern-Structure analysis; structures are grouped, the other levels are flat lists
EPS_EVENTS = [
    "Vacant doctor positions in Primary Health Centers",
    "High absenteeism among posted rural healthcare workers",
    "Doctors abandoning rural postings before completing terms",
    "Higher mortality rates for treatable conditions in rural areas",
]
EPS_PATTERNS = [
    "Cyclical migrations from rural to urban areas",
    "Consistent failure of incentive programs",
    "Growing disparity in healthcare access",
    "Medical graduates consistently preferring urban specialties",
]
EPS_STRUCTURES = {
    "Education System Structure": [
        "Urban-centric medical education",
        "High costs driving need for high-return careers",
        "Curriculum focused on specialized care rather than primary healthcare",
    ],
    "Career & Professional Structure": [
        "Limited professional development in rural settings",
        "Professional isolation from peers and mentors",
        "Higher economic returns in urban practice",
    ],
    "Infrastructure & Resource Structure": [
        "Poor housing and amenities for healthcare workers",
        "Inadequate clinical infrastructure and supplies",
        "Limited technology and diagnostic equipment",
    ],
    "Social & Cultural Structure": [
        "Cultural preference for urban lifestyles",
        "Social prestige of urban specialties",
        "Family resistance to rural postings",
    ],
}
EPS_SECTIONS = [
    ("Events (Visible Symptoms)", EPS_EVENTS),
    ("Patterns (Recurring Trends)", EPS_PATTERNS),
    ("Structures (Root Causes)", EPS_STRUCTURES),
]

ARCHETYPES = [
    ("Success to the Successful",
     "Urban areas attract more healthcare workers, improving urban healthcare, which attracts even "
     "more workers, creating a widening gap."),
    ("Fixes that Fail",
     "Short-term incentives temporarily attract workers but fail to address structural issues, "
     "ultimately leading to turnover and continued shortages."),
    ("Shifting the Burden",
     "Relying on temporary staffing or mandatory service rather than addressing fundamental "
     "structural issues."),
]

SOLUTION_COLUMNS = ["Intervention", "Level", "Effectiveness", "Limitations"]
EXISTING_SOLUTIONS = [
    ("Salary bonuses", "Event", "Low-Medium", "Temporary fix that doesn't address professional isolation"),
    ("Mandatory rural service", "Event", "Medium", "Creates resentment, high turnover after completion"),
    ("Telemedicine", "Pattern", "Medium", "Helps with consultation but not procedures or emergencies"),
    ("Rural medical colleges", "Structure", "High", "Long implementation timeframe, significant investment"),
    ("Community health worker programs", "Structure", "Medium-High",
     "Limited scope of practice, supervision challenges"),
]
SOLUTIONS_NOTE = ("Most current interventions operate at the event or pattern level rather than "
                  "addressing underlying structures, explaining their limited success.")

LEVERAGE_POINTS = {
    "High-Impact Structural Interventions": {
        "Medical Education Reform": [
            "Establish rural medical colleges with local admission priority",
            "Redesign curriculum to emphasize rural healthcare challenges",
            "Create rural residency tracks with specialized training",
        ],
        "Rural Professional Ecosystem Development": [
            'Create "Rural Health Career Pathways" with clear progression',
            'Establish "Rural Centers of Excellence" combining service, research, and education',
            "Develop digital communities of practice for peer support",
        ],
        "Family-Centered Support Systems": [
            "Build quality housing and educational facilities for families",
            "Create employment opportunities for spouses",
            "Develop community integration programs",
        ],
    },
    "Medium-Impact Pattern Interventions": {
        "Technology-Enabled Rural Practice": [
            "Implement telemedicine infrastructure connecting to specialists",
            "Deploy point-of-care diagnostic technologies",
            "Create digital decision support systems",
        ],
        "Professional Development Networks": [
            "Create regional hubs for continuing education",
            "Establish mentorship programs with experienced specialists",
            "Develop rural healthcare research networks",
        ],
    },
}

IMPLEMENTATION_PRIORITIES = [
    ("Short-term Actions (1-2 years)", [
        "Enhance financial incentives for existing practitioners",
        "Deploy telemedicine infrastructure to reduce isolation",
        "Improve basic housing and security",
        "Create digital communities of practice",
    ]),
    ("Medium-term Development (3-5 years)", [
        "Launch rural-focused tracks in existing institutions",
        "Implement revised curricula with rural components",
        "Establish regional excellence centers",
        "Create formal mentorship programs",
    ]),
    ("Long-term Transformation (5-10 years)", [
        "Complete network of rural medical education institutions",
        "Fully implement rural career progression pathways",
        "Reform healthcare financing to strengthen rural practice",
    ]),
]

DATA_SOURCES = [
    "Vacancy rates from Rural Health Statistics 2021-22, Government of India",
    "Workforce shortage estimates from WHO and National Health Profile",
]

FOOTER = [
    "© 2025 Rural Healthcare Systems Analysis",
    "Data sources: World Bank API, Indian Government Health Reports",
]
