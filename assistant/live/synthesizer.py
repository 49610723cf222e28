"""
Response synthesizer: (intent, sub-intent, mood, entities, context) → reply text + suggestion chips.
Deterministic; every Intent member has exactly one branch in INTENT_BRANCHES.
"""

import logging
from typing import Callable, NamedTuple

from assistant.config import EngineSettings
from assistant.live import responses as r
from assistant.live.content import CompanyContent
from assistant.live.responses import CompanyResponses, build_company_responses
from assistant.nlp.pipeline import TurnAnalysis, run_nlp_pipeline
from assistant.schemas import Entity, EntityType, GeneratedReply, Intent, Mood
from assistant.state.context import update_context
from assistant.state.models import ConversationContext

logger = logging.getLogger(__name__)


class Body(NamedTuple):
    text: str
    suggestions: list[str]


class BranchInput(NamedTuple):
    analysis: TurnAnalysis
    context: ConversationContext
    company: CompanyResponses


def _entity_value(entities: list[Entity], entity_type: EntityType) -> str | None:
    return next((e.value for e in entities if e.type == entity_type), None)


def _business_type(b: BranchInput) -> str | None:
    return _entity_value(b.analysis.entities, EntityType.BUSINESS_TYPE) or b.context.user_preferences.business_type


def _urgency(b: BranchInput) -> str | None:
    return _entity_value(b.analysis.entities, EntityType.URGENCY) or b.context.user_preferences.urgency_level


def _quote(b: BranchInput) -> Body:
    text = b.company.pricing + r.BUSINESS_TYPE_PRICING.get(_business_type(b) or "", "")
    sub = b.analysis.intent.sub_intent
    if sub == "budget_constraint":
        return Body(text + r.SUB_INTENT_CLAUSES[sub], ["Budget-friendly options", "Payment plans", "Schedule consultation"])
    if sub == "premium_service":
        return Body(text + r.SUB_INTENT_CLAUSES[sub], ["Premium features", "Enterprise solutions", "Schedule consultation"])
    return Body(text, ["Schedule consultation", "View pricing details", "Custom quote"])


def _portfolio(b: BranchInput) -> Body:
    text = b.company.portfolio
    industry = _entity_value(b.analysis.entities, EntityType.INDUSTRY)
    if industry:
        text += r.INDUSTRY_CLAUSE.format(industry=industry)
    sub = b.analysis.intent.sub_intent
    if sub == "industry_specific":
        return Body(text, ["Industry expertise", "Similar projects", "Case studies"])
    if sub == "design_examples":
        return Body(text, ["UI/UX showcase", "Design process", "Brand identity work"])
    return Body(text, ["View more projects", "Technical details", "Contact us"])


def _technical(b: BranchInput) -> Body:
    text = r.TECHNICAL_ANSWER
    techs = [e.value for e in b.analysis.entities if e.type == EntityType.TECHNOLOGY]
    if techs:
        text += r.TECHNOLOGY_CLAUSE.format(technologies=", ".join(techs))
    sub = b.analysis.intent.sub_intent
    if sub == "specific_technology":
        return Body(text, ["Technology stack details", "Development approach", "Technical consultation"])
    if sub == "development_process":
        return Body(text, ["Our development process", "Project management", "Technical documentation"])
    return Body(text, ["View portfolio", "Technical consultation", "Get started"])


def _meeting(b: BranchInput) -> Body:
    urgency = _urgency(b)
    if urgency == "urgent":
        return Body(
            r.MEETING_ANSWER + r.URGENT_MEETING,
            ["Urgent meeting request", "Today/Tomorrow availability", "Contact directly"],
        )
    if urgency == "relaxed":
        return Body(r.MEETING_ANSWER + r.RELAXED_MEETING, ["View calendar", "Flexible scheduling", "Contact us"])
    return Body(r.MEETING_ANSWER + r.OPEN_MEETING, ["View availability", "Contact us", "Learn more"])


def _timeline(b: BranchInput) -> Body:
    if _urgency(b) == "urgent":
        return Body(
            r.TIMELINE_ANSWER + r.URGENT_TIMELINE,
            ["Rush development options", "Expedited timeline", "Priority service"],
        )
    sub = b.analysis.intent.sub_intent
    if sub == "phased_approach":
        return Body(
            r.TIMELINE_ANSWER + r.SUB_INTENT_CLAUSES[sub],
            ["Phased development", "Milestone planning", "Agile process"],
        )
    return Body(r.TIMELINE_ANSWER, ["Typical timelines", "Project planning", "Schedule consultation"])


def _process(b: BranchInput) -> Body:
    sub = b.analysis.intent.sub_intent
    if sub == "design_process":
        return Body(
            r.PROCESS_ANSWER + r.SUB_INTENT_CLAUSES[sub],
            ["Design methodology", "UI/UX process", "View design samples"],
        )
    if sub == "development_process":
        return Body(
            r.PROCESS_ANSWER + r.SUB_INTENT_CLAUSES[sub],
            ["Development workflow", "Technology stack", "Quality assurance"],
        )
    return Body(r.PROCESS_ANSWER, ["Project phases", "Getting started", "Schedule consultation"])


def _support(b: BranchInput) -> Body:
    sub = b.analysis.intent.sub_intent
    if sub == "urgent_support":
        return Body(
            r.SUPPORT_ANSWER + r.SUB_INTENT_CLAUSES[sub],
            ["Support options", "Emergency contact", "Service level agreements"],
        )
    if sub == "technical_issue":
        return Body(
            r.SUPPORT_ANSWER + r.SUB_INTENT_CLAUSES[sub],
            ["Technical support", "Troubleshooting", "Submit a ticket"],
        )
    return Body(r.SUPPORT_ANSWER, ["Support plans", "Maintenance packages", "Contact support"])


# Keyword → company reply, checked in order for general inquiries
GENERAL_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("portfolio",), "portfolio"),
    (("team",), "team"),
    (("contact",), "contact"),
    (("price", "cost"), "pricing"),
    (("service",), "services"),
    (("about",), "about"),
]

# Entity type present → suggestion chips for an unrouted general inquiry
GENERAL_SUGGESTIONS: list[tuple[EntityType, list[str]]] = [
    (EntityType.BUSINESS_TYPE, ["Services for your business", "Pricing options", "Schedule consultation"]),
    (EntityType.TECHNOLOGY, ["Our tech stack", "Development process", "View portfolio"]),
    (EntityType.INDUSTRY, ["Industry experience", "Relevant case studies", "Specialized services"]),
]


def _general(b: BranchInput) -> Body:
    lowered = b.analysis.text.lower()
    for keywords, attr in GENERAL_KEYWORDS:
        if any(k in lowered for k in keywords):
            return Body(getattr(b.company, attr), list(r.DEFAULT_SUGGESTIONS))

    present = {e.type for e in b.analysis.entities}
    for entity_type, chips in GENERAL_SUGGESTIONS:
        if entity_type in present:
            return Body(r.GENERAL_ANSWER, chips)
    return Body(r.GENERAL_ANSWER, ["Our services", "View portfolio", "Contact information"])


INTENT_BRANCHES: dict[Intent, Callable[[BranchInput], Body]] = {
    Intent.GET_QUOTE: _quote,
    Intent.PORTFOLIO: _portfolio,
    Intent.TECHNICAL_INFO: _technical,
    Intent.SCHEDULE_MEETING: _meeting,
    Intent.TIMELINE: _timeline,
    Intent.PROCESS: _process,
    Intent.SUPPORT: _support,
    Intent.GENERAL_INQUIRY: _general,
}


def greeting_for(turn_count: int, mood: Mood) -> str:
    """First two turns always thank the user; after that the prefix follows mood."""
    if turn_count <= 2:
        return r.FIRST_TURNS_GREETING
    return r.MOOD_GREETINGS[mood]


def synthesize_reply(
    analysis: TurnAnalysis,
    context: ConversationContext,
    content: CompanyContent | None = None,
) -> GeneratedReply:
    """
    Build the reply for an analyzed turn. `context` must already include this turn
    (turn_count counts it), which is what the greeting and closing rules key off.
    """
    branch = INTENT_BRANCHES[analysis.intent.intent]
    body = branch(BranchInput(analysis, context, build_company_responses(content)))

    response = greeting_for(context.turn_count, analysis.emotion.mood) + body.text
    if context.turn_count > 3 and r.CLOSING_MARKER not in response:
        response += r.CLOSING_OFFER

    logger.debug(
        "reply for intent=%s sub=%s turn=%d (%d chars)",
        analysis.intent.intent.value,
        analysis.intent.sub_intent,
        context.turn_count,
        len(response),
    )
    return GeneratedReply(response=response, suggestions=body.suggestions, entities=analysis.entities)


def generate_response(
    text: str,
    context: ConversationContext,
    content: CompanyContent | None = None,
    settings: EngineSettings | None = None,
) -> GeneratedReply:
    """Analyze `text` against `context`, fold the turn in, and reply. The given context is not modified."""
    analysis = run_nlp_pipeline(text, context, settings)
    updated = update_context(context, analysis, settings)
    return synthesize_reply(analysis, updated, content)
