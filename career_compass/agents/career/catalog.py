"""
Reference catalog of hidden, high-paying careers.

The catalog is embedded in the analysis prompt to ground the model's
recommendations. It is never used to validate the model's answer.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CatalogCareer:
    title: str
    focus: str
    interests: Tuple[str, ...]
    pay_note: Optional[str] = None

    def render(self) -> str:
        details = [self.focus, f"interests: {'/'.join(self.interests)}"]
        if self.pay_note:
            details.append(self.pay_note)
        return f"- {self.title} ({', '.join(details)})"


@dataclass(frozen=True)
class CatalogGroup:
    name: str
    careers: Tuple[CatalogCareer, ...]


CAREER_CATALOG: Tuple[CatalogGroup, ...] = (
    CatalogGroup("ADRENALINE & PRECISION GROUP", (
        CatalogCareer("Cardiothoracic Surgeon", "heart/lung surgery, high stakes", ("engines", "plumbing")),
        CatalogCareer("Neurosurgeon", "brain surgery, precision", ("electricity", "delicate puzzles")),
        CatalogCareer("Orthopedic Trauma Surgeon", "bone reconstruction", ("carpentry", "power tools")),
        CatalogCareer("Saturation Diver", "deep-sea oil rig repair", ("deep water", "solitude"), "danger pay"),
        CatalogCareer("Air Traffic Controller", "directing planes", ("3D puzzles", "video games"), "stress pay"),
        CatalogCareer("Merchant Navy Officer", "commanding ships", ("sea", "isolation"), "tax-free income"),
    )),
    CatalogGroup("DEEP DIVE ANALYSTS", (
        CatalogCareer("Radiologist", "X-ray/MRI diagnosis", ("patterns", "visual puzzles")),
        CatalogCareer("Pathologist", "tissue analysis", ("microscopes", "detective work")),
        CatalogCareer("Forensic Accountant", "uncovering financial crimes", ("puzzles", "justice")),
        CatalogCareer("Actuary", "risk calculation", ("statistics", "probability"), "exam premiums"),
        CatalogCareer("Quantitative Analyst", "algorithmic trading", ("coding", "math"), "performance bonuses"),
    )),
    CatalogGroup("MACRO STRATEGY & INFLUENCE", (
        CatalogCareer("Economic Consultant", "antitrust litigation", ("debate", "data science")),
        CatalogCareer("Macro Strategist", "predicting market crashes", ("history", "politics")),
        CatalogCareer("Industrial-Organizational Psychologist", "workforce optimization", ("psychology", "data")),
        CatalogCareer("Corporate Diplomat", "business-government liaison", ("politics", "negotiation")),
    )),
    CatalogGroup("EXTREME ENGINEERS", (
        CatalogCareer("Petroleum/Reservoir Engineer", "oil extraction", ("geology", "physics")),
        CatalogCareer("Nuclear Engineer", "reactor design", ("physics", "safety"), "security clearance"),
        CatalogCareer("Mining & Geotechnical Engineer", "preventing collapses", ("rocks", "machinery")),
        CatalogCareer("Aerodynamicist", "vehicle aerodynamics", ("wind", "speed", "F1 racing")),
    )),
    CatalogGroup("HIDDEN TECH ARCHITECTS", (
        CatalogCareer("VLSI Engineer", "chip design", ("nanometers", "logic gates")),
        CatalogCareer("Embedded Systems Engineer", "hardware coding", ("IoT", "tinkering")),
        CatalogCareer("Site Reliability Engineer", "system uptime", ("automation", "crisis management")),
        CatalogCareer("Ethical Hacker", "penetration testing", ("breaking rules", "puzzles")),
    )),
    CatalogGroup("DIGITAL WORLDS, GAMING & VFX", (
        CatalogCareer("Physics Programmer", "game engine physics", ("calculus", "linear algebra")),
        CatalogCareer("FX Technical Director", "movie effects", ("fluid dynamics", "destruction")),
        CatalogCareer("Technical Artist", "art+code bridge", ("Python", "art"), "unicorn role"),
        CatalogCareer("Game Economy Designer", "in-game economics", ("macroeconomics", "psychology")),
    )),
    CatalogGroup("SENSORY & BIOLOGICAL SCIENTISTS", (
        CatalogCareer("Bioprocess Engineer", "lab-grown meat/vaccines", ("biology", "sustainability")),
        CatalogCareer("Zymologist/Brewmaster", "fermentation engineering", ("microbiology", "recipes")),
        CatalogCareer("Flavorist/Perfumer", "taste/smell creation", ("chemistry", "sensory"), "extremely rare"),
        CatalogCareer("Industrial Designer", "product shape/feel", ("art", "ergonomics")),
    )),
    CatalogGroup("NICHE MEDIA, LANGUAGE & ARTS", (
        CatalogCareer("Localization Specialist", "cultural translation", ("languages", "culture")),
        CatalogCareer("Colorist", "film color grading", ("photography", "color theory")),
        CatalogCareer("Foley Artist", "sound effects creation", ("sound", "creativity")),
    )),
    CatalogGroup("FIXERS & NEGOTIATORS", (
        CatalogCareer("Insolvency Professional", "bankruptcy management", ("law", "finance", "conflict")),
        CatalogCareer("Ship Broker", "cargo-ship matching", ("geography", "trading")),
        CatalogCareer("Patent Attorney", "invention protection", ("tech", "precise writing")),
        CatalogCareer("Chief of Staff", "CEO right hand", ("generalist", "diplomacy")),
    )),
    CatalogGroup("LUXURY & SPECIALIZED SERVICES", (
        CatalogCareer("Private Estate Manager", "ultra-wealthy services", ("hospitality", "logistics")),
        CatalogCareer("Gemologist", "precious stone certification", ("geology", "optics")),
        CatalogCareer("Embalmer/Funeral Director", "body preservation", ("anatomy", "chemistry")),
        CatalogCareer("Horologist", "luxury watch repair", ("tiny mechanics", "patience")),
    )),
    CatalogGroup("FINANCIAL COMMAND & CONTROL", (
        CatalogCareer("International Tax Specialist", "cross-border tax", ("law", "finance", "loopholes")),
        CatalogCareer("M&A Analyst", "company valuation", ("high stakes", "rapid math")),
        CatalogCareer("Chief Compliance Officer", "corporate compliance", ("rules", "details")),
        CatalogCareer("Cost Controller", "profit optimization", ("efficiency", "manufacturing")),
    )),
)


def catalog_titles() -> Tuple[str, ...]:
    return tuple(career.title for group in CAREER_CATALOG for career in group.careers)


def render_catalog() -> str:
    """Render the catalog as the markdown block embedded in the analysis prompt."""
    lines = ["# COMPREHENSIVE HIDDEN CAREER DATABASE"]
    for index, group in enumerate(CAREER_CATALOG, start=1):
        lines.append("")
        lines.append(f"### {index}. {group.name}")
        lines.extend(career.render() for career in group.careers)
    return "\n".join(lines)
