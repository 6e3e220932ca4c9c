"""Reply formatting for the assistant chat.

Texts mirror the web assistant: a confident intent gets the confirmation, the confidence and the
page to open; an unclear one gets the confirmation (or fallback) plus the words that were
recognized and a hint to rephrase.
"""

from __future__ import annotations

from src.intent.dictionaries import QUICK_PHRASES
from src.intent.routing import calculate_steps_saved
from src.intent.schema import BilingualText, IntentAnalytics, ParsedIntent

GREETING = BilingualText(
    en="Smart Assistant. Just tell me what you want to do, or send one of these:",
    hi="स्मार्ट सहायक। बस बताइए आप क्या करना चाहते हैं, या इनमें से एक भेजें:",
)
UNDERSTOOD = BilingualText(en="Understood", hi="समझ लिया")
NOT_CLEAR = BilingualText(en="Not Clear", hi="स्पष्ट नहीं")
HELP_ME = BilingualText(en="Help me understand better", hi="मुझे बेहतर समझने में मदद करें")
CONFIDENCE = BilingualText(en="Confidence", hi="विश्वास")
CONTINUE = BilingualText(en="Continue", hi="आगे बढ़ें")
RECOGNIZED_WORDS = BilingualText(en="Recognized words: ", hi="पहचाने गए शब्द: ")
TRY_AGAIN = BilingualText(en="Try Again", hi="दोबारा कोशिश करें")


def steps_saved_text(count: int, locale: str | None) -> str:
    return BilingualText(
        en=f"Saving {count} navigation steps",
        hi=f"{count} नेविगेशन स्टेप बचाए",
    ).for_locale(locale)


def format_quick_phrases(locale: str | None) -> str:
    """Greeting followed by one quick phrase per line."""

    lines = [GREETING.for_locale(locale)]
    lines.extend(f"{phrase.icon} {phrase.for_locale(locale)}" for phrase in QUICK_PHRASES)
    return "\n".join(lines)


def format_intent_reply(parsed: ParsedIntent, locale: str | None, *, threshold: float) -> str:
    """Render a parsed intent for the chat, depending on how confident the parser is."""

    if parsed.suggested_route is not None and parsed.confidence >= threshold:
        percent = round(parsed.confidence * 100)
        steps = calculate_steps_saved(parsed.action, parsed.service)
        return "\n".join(
            [
                f"{UNDERSTOOD.for_locale(locale)} ({percent}% {CONFIDENCE.for_locale(locale)})",
                parsed.message_for(locale),
                steps_saved_text(steps, locale),
                f"{CONTINUE.for_locale(locale)}: {parsed.suggested_route}",
            ]
        )

    lines = [
        f"{NOT_CLEAR.for_locale(locale)}. {HELP_ME.for_locale(locale)}",
        parsed.message_for(locale),
    ]
    if parsed.matched_keywords:
        lines.append(RECOGNIZED_WORDS.for_locale(locale) + ", ".join(parsed.matched_keywords))
    lines.append(f"{TRY_AGAIN.for_locale(locale)}: /phrases")
    return "\n".join(lines)


def format_analytics(analytics: IntentAnalytics) -> str:
    """Plain-text analytics report (admin facing, English only)."""

    lines = [
        f"Period: {analytics.period.value}",
        f"Total intents: {analytics.total_intents}",
        f"Avg confidence: {analytics.avg_confidence:.2f}",
        f"Success rate: {analytics.success_rate:.0%}",
        f"Steps saved: {analytics.total_steps_saved} (avg {analytics.avg_steps_saved:.1f})",
        f"Time saved: {analytics.estimated_time_saved}s",
    ]
    if analytics.service_breakdown:
        services = ", ".join(f"{k.value}={v}" for k, v in analytics.service_breakdown.items())
        lines.append(f"Services: {services}")
    if analytics.top_intents:
        top = ", ".join(f"{item.action.value}={item.count}" for item in analytics.top_intents)
        lines.append(f"Top intents: {top}")
    return "\n".join(lines)
