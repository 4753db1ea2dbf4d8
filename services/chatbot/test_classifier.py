"""
Tests for the keyword classifier — rule priority, exact-match date rule,
and the echo fallback.
Run with: pytest test_classifier.py -v
"""

import re
from datetime import datetime, timezone

import pytest

from chatbot.classifier import RULES, classify, match_rule

GREETING = "¡Hola! 👋 Soy tu asistente virtual. ¿En qué puedo ayudarte?"
CV = "Puedes descargar mi CV desde la barra lateral del portfolio. 📄"
FIXED_NOW = datetime(2025, 3, 7, 9, 5, 2, tzinfo=timezone.utc)


# --------------- Keyword rules ---------------

@pytest.mark.parametrize("message,rule", [
    ("hola", "greeting"),
    ("HELLO there", "greeting"),
    ("show me the portfolio", "portfolio"),
    ("Tu CV por favor", "cv"),
    ("curriculum", "cv"),
    ("¿Qué proyectos tienes?", "projects"),
    ("list your PROJECTS", "projects"),
    ("contacto", "contact"),
    ("how do I contact you", "contact"),
    ("ayuda", "help"),
    ("Help!", "help"),
])
def test_keyword_rules(message, rule):
    assert match_rule(message).name == rule


@pytest.mark.parametrize("message,reply", [
    ("hello", GREETING),
    ("portfolio", "Este es mi portfolio estilo VS Code. 💻 ¿Quieres ver mis proyectos?"),
    ("curriculum", CV),
    ("proyectos", "Tengo varios proyectos interesantes. ¡Échales un vistazo! 🚀"),
    ("contact", "Puedes contactarme a través de mi portfolio o redes sociales. 📧"),
    ("fecha", "📅 La fecha actual es: 2025-03-07 09:05:02 UTC"),
    ("help", "Puedes preguntarme sobre: portfolio, cv, proyectos, contacto o fecha. 💡"),
])
def test_reply_text_per_rule(message, reply):
    assert classify(message, now=FIXED_NOW) == reply


def test_unmatched_message_has_no_rule():
    assert match_rule("xyz123") is None


def test_rule_table_order():
    names = [r.name for r in RULES]
    assert names == ["greeting", "portfolio", "cv", "projects", "contact", "date", "help"]


def test_greeting_wins_over_later_rules():
    assert classify("hola, quiero ver tu cv") == GREETING


def test_portfolio_beats_cv():
    # "portfolio" is checked before "cv"
    assert match_rule("cv in the portfolio").name == "portfolio"


def test_contact_beats_help():
    assert match_rule("help me contact you").name == "contact"


def test_cv_reply_text():
    assert classify("cv") == CV


# --------------- Date rule ---------------

@pytest.mark.parametrize("message", ["date", "Date", "  FECHA  ", "fecha"])
def test_date_exact_match(message):
    assert classify(message, now=FIXED_NOW) == "📅 La fecha actual es: 2025-03-07 09:05:02 UTC"


def test_date_substring_falls_through_to_echo():
    reply = classify("what's the date", now=FIXED_NOW)
    assert reply.startswith("Recibí tu mensaje: 'what's the date'")


def test_date_uses_current_clock_by_default():
    reply = classify("date")
    assert re.fullmatch(r"📅 La fecha actual es: \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} UTC", reply)


# --------------- Echo fallback ---------------

def test_echo_contains_message():
    assert "xyz123" in classify("xyz123")


def test_echo_keeps_original_casing_and_spacing():
    reply = classify("  XyZ Random  ")
    assert reply == (
        "Recibí tu mensaje: '  XyZ Random  ' 🤔 ¿Podrías ser más específico? "
        "Escribe 'ayuda' para ver qué puedo hacer."
    )


def test_classify_is_repeatable():
    assert classify("projects", now=FIXED_NOW) == classify("projects", now=FIXED_NOW)
    assert classify("date", now=FIXED_NOW) == classify("date", now=FIXED_NOW)
