"""Service for tracking asynchronous actions.

Most mutating Cloud API calls return an Action that starts 'running' and
ends 'success' or 'error'. poll() waits for that terminal state at a fixed
interval.
"""

import logging
import time

from hetznerkit.core.services.base import ResourceApi
from hetznerkit.domain.errors import ActionError, ActionTimeoutError
from hetznerkit.domain.events.api_events import ActionPolled, dispatch_event
from hetznerkit.domain.models.cloud import Action
from hetznerkit.domain.models.common import ActionID
from hetznerkit.infrastructure.resilience.backoff import sleep_ms

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_MS = 500
DEFAULT_POLL_TIMEOUT_MS = 300_000


class ActionsApi(ResourceApi):
    """Actions endpoint ('/actions')."""

    path = "/actions"
    item_key = "action"
    collection_key = "actions"

    async def get(self, action_id: ActionID) -> Action:
        return await super().get(action_id)

    async def poll(
        self,
        action_id: ActionID,
        interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
        timeout_ms: int = DEFAULT_POLL_TIMEOUT_MS,
    ) -> Action:
        """Waits until the action leaves the 'running' state.

        Args:
            action_id: Id of the action to watch.
            interval_ms: Fixed delay between two fetches.
            timeout_ms: Maximum time to wait while the action is running.

        Returns:
            The action record once its status is 'success'.

        Raises:
            ActionTimeoutError: If the action is still running after timeout_ms.
            ActionError: If the action finished with status 'error'.
            HetznerAPIError: If fetching the action fails.
        """
        start_time = time.monotonic()
        action = await self.get(action_id)

        while action["status"] == "running":
            elapsed_ms = (time.monotonic() - start_time) * 1000
            if elapsed_ms > timeout_ms:
                logger.error(f"Action {action_id} still running after {timeout_ms}ms")
                raise ActionTimeoutError(action_id, timeout_ms)

            await sleep_ms(interval_ms)
            action = await self.get(action_id)
            dispatch_event(ActionPolled(
                action_id=action_id,
                status=action["status"],
                elapsed_ms=(time.monotonic() - start_time) * 1000,
            ))

        if action["status"] == "error":
            error = ActionError(action)
            logger.warning(f"Action {action_id} ({action.get('command')}) failed: {error}")
            raise error

        logger.debug(f"Action {action_id} finished with status {action['status']}")
        return action
