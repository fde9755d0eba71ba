CONTRACT_VERSION = "1.0.0"

COMMAND_INTENTS = (
    "perform_action",
    "perform_choice",
    "restart",
    "add_marker",
    "remove_marker",
)

QUERY_INTENTS = (
    "get_expedition_view",
    "available_actions",
)

CONTRACT_DTO_TYPES = (
    "ActionResult",
    "EncounterView",
    "ExpeditionView",
    "MarkerView",
)
