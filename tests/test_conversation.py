import pytest

from gig_advisor.domain.entities.conversation import Conversation, SenderRole


def test_add_and_get():
    conversation = Conversation()
    turn = conversation.add("hi", SenderRole.USER)

    assert conversation.get(turn.id) is turn
    assert conversation.get("missing") is None
    assert len(conversation) == 1
    assert turn.timestamp.tzinfo is not None


def test_turns_returns_a_snapshot():
    conversation = Conversation()
    conversation.add("hi", SenderRole.USER)

    conversation.turns.clear()

    assert len(conversation) == 1


def test_edit_removes_the_turn_and_returns_its_text():
    conversation = Conversation()
    turn = conversation.add("draft", SenderRole.USER)

    assert conversation.edit(turn.id) == "draft"
    assert conversation.edit(turn.id) is None
    assert len(conversation) == 0


def test_react_appends_marker():
    conversation = Conversation()
    turn = conversation.add("answer", SenderRole.BOT)

    conversation.react(turn.id, "❓")
    conversation.react(turn.id, "👎")

    assert turn.text == "answer [❓] [👎]"
    assert turn.reactions == ["❓", "👎"]


def test_react_validation():
    conversation = Conversation()
    turn = conversation.add("answer", SenderRole.BOT)

    with pytest.raises(ValueError):
        conversation.react(turn.id, "🔥")
    with pytest.raises(KeyError):
        conversation.react("missing", "👍")


def test_clear():
    conversation = Conversation()
    conversation.add("a", SenderRole.USER)
    conversation.add("b", SenderRole.BOT)

    conversation.clear()

    assert conversation.turns == []
