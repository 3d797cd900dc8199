"""Queue operations against the indexer management API."""

import logging
from typing import Any, Dict, List, Sequence

from indexer_cli.client import IndexerManagementClient
from indexer_cli.errors import IndexerManagementError

logger = logging.getLogger(__name__)

ACTION_FIELDS = (
    "id",
    "type",
    "allocationID",
    "deploymentID",
    "amount",
    "poi",
    "force",
    "source",
    "reason",
    "priority",
    "transaction",
    "status",
    "failureReason",
    "protocolNetwork",
)

CANCEL_ACTIONS_MUTATION = """
mutation cancelActions($actionIDs: [String!]!) {
  cancelActions(actionIDs: $actionIDs) {
    %s
  }
}
""" % "\n    ".join(ACTION_FIELDS)


def cancel_actions(client: IndexerManagementClient, action_ids: Sequence[int]) -> List[Dict[str, Any]]:
    """Cancel queued actions and return the canceled records in service order."""
    logger.debug(f"Cancelling actions {list(action_ids)}")
    data = client.mutation(CANCEL_ACTIONS_MUTATION, {"actionIDs": [str(action_id) for action_id in action_ids]})
    actions = data.get("cancelActions")
    if actions is None:
        raise IndexerManagementError("Indexer management API returned no canceled actions")
    return list(actions)
