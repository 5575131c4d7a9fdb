"""Resolution of client-supplied references against their stores.

Orders arrive with stubs for the user, shipping address and payment method:
JSON objects carrying at least an ``id``. Resolving a stub means looking the
id up in the owning aggregate's repository and using the stored aggregate
instead of the stub.
"""

import json

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)


def load_payload(value):
    """Decode a JSON text command field. None stays None."""
    if value is None:
        return None
    return json.loads(value) if isinstance(value, str) else value


def find(aggregate_cls, identifier):
    """Return the stored aggregate with ``identifier``, or None."""
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        return None


def resolve_or_keep(stub, aggregate_cls, to_snapshot, fallback):
    """Resolve an optional reference stub, falling back silently on a miss.

    - ``stub`` is None: the reference is absent, returns None.
    - ``stub`` has no ``id``: returns ``fallback`` unchanged.
    - ``id`` does not resolve: returns ``fallback`` unchanged.
    - ``id`` resolves: returns ``to_snapshot(aggregate)``.

    Creation passes a snapshot of the stub itself as ``fallback``, updating
    passes the order's current value.
    """
    if stub is None:
        return None

    identifier = stub.get("id")
    if identifier is None:
        return fallback

    found = find(aggregate_cls, identifier)
    if found is None:
        logger.debug(
            "Reference did not resolve, keeping fallback",
            reference=aggregate_cls.__name__,
            reference_id=str(identifier),
        )
        return fallback

    return to_snapshot(found)
