## Option catalog: the only accepted values for the generator form

INDUSTRY_LABELS = (
    # Core industries
    "Technology",
    "Healthcare",
    "Education",
    "Finance",
    "Agriculture",
    "Retail",
    "Manufacturing",
    "Engineering",
    "Environmental Science",
    "Business & Management",
    # Security & law
    "Cybersecurity",
    "Law & Policy",
    "Public Safety & Emergency Services",
    "Defense & Military",
    # Transportation & logistics
    "Automotive",
    "Transportation & Logistics",
    "Aviation & Aerospace",
    "Maritime & Shipping",
    # Energy & sustainability
    "Energy & Renewable Resources",
    "Oil & Gas",
    "Environmental Sustainability",
    # Media, arts & entertainment
    "Media & Entertainment",
    "Film & Television",
    "Music & Audio Production",
    "Graphic Design & Animation",
    "Publishing & Journalism",
    # Hospitality & tourism
    "Hospitality & Tourism",
    "Food & Beverage",
    "Event Management",
    # Life sciences & research
    "Pharmaceuticals",
    "Biotechnology",
    "Medical Devices",
    "Neuroscience & Psychology",
    # Construction & urban development
    "Construction & Architecture",
    "Real Estate",
    "Urban Planning",
    # Internet & emerging tech
    "E-Commerce",
    "AI & Machine Learning",
    "Blockchain & Cryptocurrency",
    "Cloud Computing",
    "IoT (Internet of Things)",
    # Gaming & digital economy
    "Gaming & Esports",
    "Metaverse & Virtual Reality",
    "Streaming & Content Creation",
    # Sports & health
    "Sports & Fitness",
    "Wellness & Mental Health",
    "Rehabilitation & Physical Therapy",
    # Science & innovation
    "Astronomy & Space Exploration",
    "Nanotechnology",
    "Quantum Computing",
    "Material Science",
    # Economics & markets
    "Stock Market & Investment",
    "Insurance",
    "Actuarial Science",
    # Public & nonprofit sectors
    "Social Services",
    "Nonprofit & Philanthropy",
    "Government & Public Administration",
    "International Relations & Diplomacy",
)

PROJECT_TYPE_LABELS = ("Data", "Web", "Mobile", "IoT", "AI/ML", "Blockchain", "Cloud", "Cybersecurity")

DIFFICULTY_LABELS = ("Beginner", "Intermediate", "Advanced")

# Form option values are the lower-cased labels
INDUSTRIES = tuple(label.lower() for label in INDUSTRY_LABELS)
PROJECT_TYPES = tuple(label.lower() for label in PROJECT_TYPE_LABELS)
DIFFICULTIES = tuple(label.lower() for label in DIFFICULTY_LABELS)


def form_options() -> dict[str, list[tuple[str, str]]]:
    """(value, label) pairs for each select on the home page."""
    return {
        "industries": [(label.lower(), label) for label in INDUSTRY_LABELS],
        "project_types": [(label.lower(), label) for label in PROJECT_TYPE_LABELS],
        "difficulties": [(label.lower(), label) for label in DIFFICULTY_LABELS],
    }
