"""
Keyword classifier for the chat endpoint.

Picks one canned reply for a message by walking an ordered rule table.
First match wins; anything unmatched gets echoed back.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, NamedTuple, Optional

logger = logging.getLogger(__name__)


class Rule(NamedTuple):
    name: str
    matches: Callable[[str], bool]
    reply: Callable[[str, datetime], str]


def _contains(*keywords: str) -> Callable[[str], bool]:
    return lambda msg: any(k in msg for k in keywords)


def _equals(*keywords: str) -> Callable[[str], bool]:
    return lambda msg: msg in keywords


def _fixed(text: str) -> Callable[[str, datetime], str]:
    return lambda raw, now: text


def _current_date(raw: str, now: datetime) -> str:
    return f"📅 La fecha actual es: {now:%Y-%m-%d %H:%M:%S} UTC"


def _echo(raw: str) -> str:
    return (
        f"Recibí tu mensaje: '{raw}' 🤔 ¿Podrías ser más específico? "
        "Escribe 'ayuda' para ver qué puedo hacer."
    )


# ── Rule table (priority order) ───────────────────────────────────────────────
RULES = [
    Rule("greeting", _contains("hola", "hello"),
         _fixed("¡Hola! 👋 Soy tu asistente virtual. ¿En qué puedo ayudarte?")),
    Rule("portfolio", _contains("portfolio"),
         _fixed("Este es mi portfolio estilo VS Code. 💻 ¿Quieres ver mis proyectos?")),
    Rule("cv", _contains("cv", "curriculum"),
         _fixed("Puedes descargar mi CV desde la barra lateral del portfolio. 📄")),
    Rule("projects", _contains("proyectos", "projects"),
         _fixed("Tengo varios proyectos interesantes. ¡Échales un vistazo! 🚀")),
    Rule("contact", _contains("contacto", "contact"),
         _fixed("Puedes contactarme a través de mi portfolio o redes sociales. 📧")),
    # exact match only: "what's the date" must fall through to the echo
    Rule("date", _equals("date", "fecha"), _current_date),
    Rule("help", _contains("ayuda", "help"),
         _fixed("Puedes preguntarme sobre: portfolio, cv, proyectos, contacto o fecha. 💡")),
]


def match_rule(raw_message: str) -> Optional[Rule]:
    """Return the first rule whose predicate accepts the normalized message, or None."""
    msg = raw_message.lower().strip()
    for rule in RULES:
        if rule.matches(msg):
            return rule
    return None


def classify(raw_message: str, now: Optional[datetime] = None) -> str:
    """
    Map a chat message to its canned reply.

    Callers must reject blank messages first. `now` pins the clock for the
    date rule; it defaults to the current UTC instant.
    """
    now = now or datetime.now(timezone.utc)
    rule = match_rule(raw_message)
    if rule is None:
        logger.debug("No rule matched, echoing message")
        return _echo(raw_message)
    logger.debug("Message matched rule %r", rule.name)
    return rule.reply(raw_message, now)
