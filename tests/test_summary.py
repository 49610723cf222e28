from assistant.schemas import Entity, EntityType, Intent, Message, Sender, Sentiment
from assistant.state import summarize_conversation


def user(text, intent=None, entities=None, sentiment=None):
    return Message(text=text, sender=Sender.USER, intent=intent, entities=entities, sentiment=sentiment)


def test_empty_log():
    summary = summarize_conversation([])
    assert summary.intents == []
    assert summary.sentiment == Sentiment.NEUTRAL
    assert summary.summary == "Overall sentiment: neutral."


def test_summary_collects_user_turns():
    messages = [
        Message(text="Welcome!", sender=Sender.SYSTEM, sentiment=Sentiment.POSITIVE),
        user(
            "How much for a React site?",
            Intent.GET_QUOTE,
            [Entity(type=EntityType.TECHNOLOGY, value="react", confidence=0.8)],
            Sentiment.NEUTRAL,
        ),
        user(
            "We're a startup using React",
            Intent.GET_QUOTE,
            [
                Entity(type=EntityType.TECHNOLOGY, value="react", confidence=0.95),
                Entity(type=EntityType.BUSINESS_TYPE, value="startup", confidence=0.9),
            ],
            Sentiment.NEGATIVE,
        ),
        user("Show me your portfolio", Intent.PORTFOLIO, [], Sentiment.NEUTRAL),
    ]
    summary = summarize_conversation(messages)

    assert summary.intents == [Intent.GET_QUOTE, Intent.PORTFOLIO]
    assert summary.topics == ["get quote", "portfolio"]
    react = next(e for e in summary.entities if e.value == "react")
    assert react.confidence == 0.95
    assert summary.user_preferences.preferred_technologies == ["react"]
    assert summary.user_preferences.business_type == "startup"
    # one positive (system) vs one negative (user)
    assert summary.sentiment == Sentiment.NEUTRAL
    assert "User appears to be from a startup." in summary.summary
    assert summary.summary.endswith("Overall sentiment: neutral.")


def test_system_entities_ignored():
    messages = [
        Message(
            text="We do React",
            sender=Sender.SYSTEM,
            entities=[Entity(type=EntityType.TECHNOLOGY, value="react", confidence=0.9)],
        )
    ]
    assert summarize_conversation(messages).entities == []
