"""Scripted reply text: company templates, greetings, personalization clauses, suggestion chips."""

from dataclasses import dataclass

from assistant.live.content import CompanyContent
from assistant.schemas import Mood

DEFAULT_COMPANY_NAME = "our studio"
DEFAULT_OFFICE_HOURS = "Monday - Friday, 9:00 AM - 6:00 PM"
NOT_AVAILABLE = "Not available"

# --- Greetings ---

FIRST_TURNS_GREETING = "Thanks for reaching out! "
MOOD_GREETINGS = {
    Mood.NEGATIVE: "I understand this might be frustrating. Let me help you with that. ",
    Mood.CONFUSED: "I see you might be a bit confused. Let me clarify. ",
    Mood.IMPATIENT: "I'll get right to the point. ",
    Mood.INTERESTED: "Great question! ",
    Mood.POSITIVE: "Wonderful! ",
    Mood.NEUTRAL: "",
}
CLOSING_MARKER = "anything else"
CLOSING_OFFER = " Is there anything else you'd like to know?"

# --- Fixed base replies ---

PRICING_ANSWER = (
    "Our pricing is customized based on project requirements. Here's a general overview:\n\n"
    "- Basic Website: Starting from $1,000\n"
    "- E-commerce: Starting from $2,500\n"
    "- Custom Web App: Starting from $5,000\n\n"
    "Would you like to schedule a consultation for a detailed quote?"
)
TECHNICAL_ANSWER = "We specialize in modern web technologies including React, TypeScript, and Node.js."
MEETING_ANSWER = "I'd be happy to help you schedule a meeting."
TIMELINE_ANSWER = "Our project timelines vary based on complexity and requirements."
PROCESS_ANSWER = "Our process typically begins with a discovery phase to understand your requirements."
SUPPORT_ANSWER = "We provide comprehensive support for all our projects."
GENERAL_ANSWER = (
    "I can help you with our services, portfolio, team information, or scheduling a meeting. "
    "What would you like to know?"
)

# --- Personalization clauses ---

BUSINESS_TYPE_PRICING = {
    "startup": " We have special packages for startups that balance quality and budget constraints.",
    "enterprise": " For enterprise clients, we offer comprehensive solutions with priority support.",
    "small_business": " Our small business packages are designed to be cost-effective while meeting your specific needs.",
}
INDUSTRY_CLAUSE = " We have experience working with clients in the {industry} industry."
TECHNOLOGY_CLAUSE = " You mentioned {technologies}. We have extensive experience with these technologies."
URGENT_MEETING = " We understand this is urgent and can arrange a meeting as soon as today or tomorrow."
RELAXED_MEETING = " We can find a time that works best with your schedule in the coming weeks."
OPEN_MEETING = " When would be the best time for you?"
URGENT_TIMELINE = " For urgent projects, we can implement an accelerated development schedule."

SUB_INTENT_CLAUSES = {
    "budget_constraint": " We're flexible and can work with your budget to find the best solution.",
    "premium_service": " Our premium services include dedicated support and priority development.",
    "phased_approach": " We often recommend a phased approach to deliver value incrementally.",
    "design_process": " Our design process involves wireframing, prototyping, and iterative feedback.",
    "development_process": " We follow an agile development methodology with regular updates and demos.",
    "urgent_support": " For urgent issues, we have priority support channels available.",
    "technical_issue": " Our technical team can help diagnose and resolve any issues you're experiencing.",
}

# --- Suggestion chips ---

DEFAULT_SUGGESTIONS = ["Tell me about your services", "Show portfolio", "Contact information"]
WELCOME_SUGGESTIONS = ["Tell me about your services", "Show portfolio", "Meet the team", "How much do you charge?"]


@dataclass(frozen=True)
class CompanyResponses:
    welcome: str
    portfolio: str
    team: str
    services: str
    contact: str
    about: str
    pricing: str


def build_company_responses(content: CompanyContent | None) -> CompanyResponses:
    """Template company replies from content; any missing piece gets a fixed sentence."""
    content = content or CompanyContent()
    name = content.company.name or DEFAULT_COMPANY_NAME

    welcome = (
        f"Welcome to {name}! I'm your virtual assistant. How can I help you today?\n\n"
        "I can assist you with:\n"
        "- Our services and pricing\n"
        "- Project timelines and process\n"
        "- Technology expertise\n"
        "- Portfolio showcase\n"
        "- Scheduling consultations\n\n"
        "Feel free to ask me anything about our web development services!"
    )

    if content.portfolio:
        projects = "\n".join(f"- {p.title}: {p.description}" for p in content.portfolio[:3])
        portfolio = f"Here are some of our recent projects:\n\n{projects}\n\nWould you like to see more of our work?"
    else:
        portfolio = "We're currently updating our portfolio. Would you like to schedule a call to discuss your project?"

    if content.team_members:
        members = "\n".join(f"- {m.name} - {m.role}" for m in content.team_members)
        team = f"Our expert team includes:\n\n{members}\n\nWould you like to know more about any team member?"
    else:
        team = "Our team information is being updated. Would you like to schedule a call?"

    if content.services:
        items = "\n".join(
            f"- {s.name} ({s.duration})" if s.duration else f"- {s.name}" for s in content.services
        )
        services = f"Our services include:\n\n{items}\n\nWhich service interests you?"
    else:
        services = "We offer custom web development solutions. Would you like to discuss your needs?"

    c = content.contact
    contact = (
        "You can reach us at:\n"
        f"- Phone: {c.phone or NOT_AVAILABLE}\n"
        f"- Email: {c.email or NOT_AVAILABLE}\n"
        f"- WhatsApp: {c.whatsapp or NOT_AVAILABLE}\n"
        f"- Hours: {c.office_hours or DEFAULT_OFFICE_HOURS}"
    )

    tagline = content.company.tagline or "Creating Tomorrow's Web, Today"
    story = (
        content.about_story[:200] + "..."
        if content.about_story
        else "We are a web development company specializing in modern web technologies."
    )
    about = f"{name} - {tagline}\n\n{story}"

    return CompanyResponses(
        welcome=welcome,
        portfolio=portfolio,
        team=team,
        services=services,
        contact=contact,
        about=about,
        pricing=PRICING_ANSWER,
    )
