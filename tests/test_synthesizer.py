from assistant.live import responses as r
from assistant.live.synthesizer import INTENT_BRANCHES, generate_response, greeting_for, synthesize_reply
from assistant.nlp.pipeline import run_nlp_pipeline
from assistant.schemas import Intent, Mood
from assistant.state import initial_context
from assistant.state.models import ConversationContext, UserPreferences


def reply_at(text, turn_count, settings, content=None, **context_fields):
    context = ConversationContext(turn_count=turn_count, **context_fields)
    return synthesize_reply(run_nlp_pipeline(text, context, settings), context, content)


def test_every_intent_has_a_branch():
    assert set(INTENT_BRANCHES) == set(Intent)


def test_greeting_rules():
    assert greeting_for(1, Mood.NEGATIVE) == r.FIRST_TURNS_GREETING
    assert greeting_for(2, Mood.POSITIVE) == r.FIRST_TURNS_GREETING
    assert greeting_for(3, Mood.NEGATIVE).startswith("I understand this might be frustrating.")
    assert greeting_for(3, Mood.IMPATIENT) == "I'll get right to the point. "
    assert greeting_for(5, Mood.NEUTRAL) == ""


def test_first_turn_price_question(settings):
    reply = generate_response("What is the price for a website?", initial_context(), settings=settings)
    assert reply.response == r.FIRST_TURNS_GREETING + r.PRICING_ANSWER
    assert reply.suggestions == ["Schedule consultation", "View pricing details", "Custom quote"]
    assert any(e.value == "website" for e in reply.entities)


def test_generate_response_leaves_context_alone(settings):
    context = initial_context()
    generate_response("hello", context, settings=settings)
    assert context.turn_count == 0


def test_closing_offer_after_third_turn(settings):
    reply = reply_at("What is the price for a website?", 4, settings)
    assert reply.response.endswith(r.CLOSING_OFFER)
    assert reply.response.count("anything else") == 1

    early = reply_at("What is the price for a website?", 3, settings)
    assert not early.response.endswith(r.CLOSING_OFFER)


def test_quote_personalized_for_startup(settings):
    reply = reply_at("How much does it cost for a startup?", 1, settings)
    assert r.BUSINESS_TYPE_PRICING["startup"] in reply.response


def test_quote_budget_sub_intent(settings):
    reply = reply_at("I have a tight budget, what's the cheapest price?", 1, settings)
    assert r.SUB_INTENT_CLAUSES["budget_constraint"] in reply.response
    assert reply.suggestions == ["Budget-friendly options", "Payment plans", "Schedule consultation"]


def test_meeting_uses_remembered_urgency(settings):
    reply = reply_at(
        "Can we schedule a call?",
        3,
        settings,
        user_preferences=UserPreferences(urgency_level="urgent"),
    )
    assert r.URGENT_MEETING in reply.response
    assert reply.suggestions[0] == "Urgent meeting request"


def test_meeting_without_urgency_asks_for_time(settings):
    reply = reply_at("Can we schedule a call?", 3, settings)
    assert reply.response.endswith(r.OPEN_MEETING.strip())


def test_technical_mentions_technologies(settings):
    reply = reply_at("What tech stack do you use, React or Vue?", 1, settings)
    assert reply.response.startswith(r.FIRST_TURNS_GREETING + r.TECHNICAL_ANSWER)
    assert "You mentioned" in reply.response
    assert "react" in reply.response and "vue" in reply.response


def test_portfolio_from_content(settings, company_content):
    reply = reply_at("Can I see your portfolio?", 1, settings, company_content)
    assert "FreshCart" in reply.response
    assert "TrailMap" not in reply.response
    assert reply.suggestions == ["View more projects", "Technical details", "Contact us"]


def test_general_inquiry_routes_team_keyword(settings, company_content):
    reply = reply_at("Tell me about your team", 1, settings, company_content)
    assert "Rafi Ahmed - Lead Developer" in reply.response
    assert reply.suggestions == r.DEFAULT_SUGGESTIONS


def test_general_inquiry_fallback(settings):
    reply = reply_at("hello there", 1, settings)
    assert reply.response == r.FIRST_TURNS_GREETING + r.GENERAL_ANSWER
    assert reply.suggestions == ["Our services", "View portfolio", "Contact information"]


def test_general_inquiry_routes_services_keyword(settings, company_content):
    reply = reply_at("Tell me about your services", 1, settings, company_content)
    assert "- Website Design (2-4 weeks)" in reply.response
    assert reply.suggestions == r.DEFAULT_SUGGESTIONS


def test_general_inquiry_routes_about_keyword(settings, company_content):
    reply = reply_at("Who are you, tell me about the company", 1, settings, company_content)
    assert "Toiral Web Development - Creating Tomorrow's Web, Today" in reply.response
