# src/shared/error_codes.py
# Central mapping that aligns with the error contract.
# Keep keys stable, API clients rely on these.
ERROR_CODES = {
    # ─── Validation & Requests ──────────────────────────────────────────────
    "validation_error": {
        "http": 400,
        "message": "Validation failed for one or more fields."
    },

    # ─── Lookups ───────────────────────────────────────────────────────────
    "not_found": {
        "http": 404,
        "message": "Resource not found."
    },

    # ─── Conflicts & State ─────────────────────────────────────────────────
    "conflict": {
        "http": 409,
        "message": "Conflict with existing resource."
    },
    "invalid_state_transition": {
        "http": 409,
        "message": "Operation not allowed in the current state."
    },
    "business_rule_violation": {
        "http": 422,
        "message": "Request violates a business rule."
    },

    # ─── Internal ──────────────────────────────────────────────────────────
    "storage_error": {
        "http": 500,
        "message": "A storage operation failed."
    },
    "internal_error": {
        "http": 500,
        "message": "An unexpected error occurred. Please try again later."
    },
}
