"""
Example usage of the Zoom API client

Reads ZOOM_API_KEY / ZOOM_API_SECRET from the environment, makes a few calls
and prints the metrics that were recorded for them.
"""

import asyncio
import logging

from zoom_sdk import (
    InMemoryMetricsSink,
    REQUEST_EXCEPTION_METRIC,
    ConfigError,
    create_zoom_client_from_env,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


async def current_user_example(metrics: InMemoryMetricsSink):
    """Example 1: read the current user and list upcoming meetings"""
    print("\n=== Current User Example ===")

    async with create_zoom_client_from_env(metrics=metrics) as zoom:
        me = await zoom.get("users/me")
        if me is None:
            print("Request failed before a response arrived")
            return

        print(f"users/me -> HTTP {me['http_code']}")
        if me['http_code'] != 200:
            return

        meetings = await zoom.get("users/me/meetings", headers={"Accept": "application/json"})
        if meetings and meetings['http_code'] == 200:
            print(f"Upcoming meetings: {meetings.get('total_records', 0)}")


async def create_and_delete_meeting_example(metrics: InMemoryMetricsSink):
    """Example 2: create a meeting and delete it again"""
    print("\n=== Create/Delete Meeting Example ===")

    async with create_zoom_client_from_env(metrics=metrics) as zoom:
        created = await zoom.post("users/me/meetings", body={"topic": "SDK example", "type": 1})
        if not created or created['http_code'] != 201:
            print(f"Create failed: {created}")
            return

        print(f"Created meeting {created['id']}")
        deleted = await zoom.delete(f"meetings/{created['id']}")
        # Zoom answers a successful delete with 204 No Content
        print(f"Delete -> HTTP {deleted['http_code'] if deleted else 'n/a'}")


def print_metrics(metrics: InMemoryMetricsSink):
    print("\n=== Recorded Metrics ===")
    for event in metrics.events:
        print(f"{event.kind.value:8} {event.name} {event.value}")
    print(f"Transport failures: {metrics.count(REQUEST_EXCEPTION_METRIC)}")


async def main():
    """Run all examples"""
    print("Zoom Python SDK Examples")
    print("=" * 50)

    metrics = InMemoryMetricsSink()
    try:
        await current_user_example(metrics)
        await create_and_delete_meeting_example(metrics)
    except ConfigError as e:
        logger.error(f"Set ZOOM_API_KEY and ZOOM_API_SECRET to run the examples: {e}")
        return

    print_metrics(metrics)


if __name__ == '__main__':
    asyncio.run(main())
