from services.chat_service import generate_reply, FALLBACK_REPLY


def test_help_takes_precedence_over_subject():
    reply = generate_reply("I'm stuck on this math problem")
    assert reply.startswith("I'm here to help!")


def test_subject_keywords():
    assert "SAT math" in generate_reply("Can we do MATH?")
    assert "reading passages" in generate_reply("the passage confused me")
    assert "grammar rules" in generate_reply("grammar questions")


def test_case_insensitive_greeting():
    assert generate_reply("HELLO").startswith("Hello! I'm your SAT study assistant.")


def test_fallback():
    assert generate_reply("ok") == FALLBACK_REPLY
