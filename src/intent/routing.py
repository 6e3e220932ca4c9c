"""Route, confirmation message and steps-saved derivation for a detected intent."""

from __future__ import annotations

from src.intent.dictionaries import (
    ACTION_NAMES,
    ASSISTANT_STEPS,
    DEFAULT_MANUAL_STEPS,
    DEFAULT_ROUTE_KEY,
    FALLBACK_MESSAGE,
    MANUAL_STEPS,
    ROUTE_MAP,
    SERVICE_NAMES,
)
from src.intent.schema import ActionType, BilingualText, ServiceType


def resolve_route(action: ActionType | None, service: ServiceType | None) -> str | None:
    """Pick the UI route for an action, preferring the service-specific page when one exists."""

    if action is None:
        return None

    action_routes = ROUTE_MAP.get(action)
    if not action_routes:
        return None

    if service is not None and service in action_routes:
        return action_routes[service]
    return action_routes.get(DEFAULT_ROUTE_KEY)


def build_confirmation_message(
        service: ServiceType | None,
        action: ActionType | None,
) -> BilingualText:
    """Compose the bilingual "we understood you want to ..." message."""

    if action is None:
        return FALLBACK_MESSAGE

    action_name = ACTION_NAMES[action]
    service_name = SERVICE_NAMES.get(service) if service is not None else None

    if service_name is not None:
        return BilingualText(
            en=f"We understood you want to {action_name.en} for {service_name.en}",
            hi=f"हमने समझा कि आप {service_name.hi} के लिए {action_name.hi} चाहते हैं",
        )

    return BilingualText(
        en=f"We understood you want to {action_name.en}",
        hi=f"हमने समझा कि आप {action_name.hi} चाहते हैं",
    )


def calculate_steps_saved(
        action: ActionType | None,
        service: ServiceType | None = None,
) -> int:
    """Navigation clicks the assistant saves compared to the manual menu flow.

    `service` does not change the estimate today; it is accepted so callers can pass the whole
    detected intent.
    """

    manual = DEFAULT_MANUAL_STEPS
    if action is not None:
        manual = MANUAL_STEPS.get(action, DEFAULT_MANUAL_STEPS)
    return max(0, manual - ASSISTANT_STEPS)
