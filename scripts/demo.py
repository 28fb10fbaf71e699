#!/usr/bin/env python3
"""Demo: post one of each domain event to the admin feed and show the feed.

Requires the admin feed running against a migrated database:
    alembic -c shared/alembic.ini upgrade head
    python -m admin_feed

Usage:
    python scripts/demo.py [--feed-url URL] [--admin-id N]
"""

import argparse
import sys

import httpx

BASE = "/api/admin/notifications"

EVENTS = [
    {
        "event_type": "incident.reported",
        "payload": {
            "incident_id": 101,
            "incident_type": "Fire",
            "description": "Smoke on the third floor of the library",
            "priority_level": "critical",
            "location": "Main Library",
        },
    },
    {
        "event_type": "welfare.reported",
        "payload": {
            "report_id": 55,
            "user_id": 12,
            "status": "needs_help",
            "first_name": "Maria",
            "last_name": "Santos",
        },
    },
    {
        "event_type": "alert.issued",
        "payload": {
            "id": 7,
            "title": "Typhoon Signal No. 3",
            "description": "Classes suspended, stay indoors.",
            "alert_severity": "emergency",
        },
    },
    {
        "event_type": "safety_protocol.published",
        "payload": {
            "protocol_id": 3,
            "title": "Earthquake Drill",
            "description": "Duck, cover and hold.",
            "type": "earthquake",
        },
    },
    {
        "event_type": "system.notice",
        "payload": {"title": "Maintenance", "message": "Downtime tonight at 22:00"},
    },
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Post demo events to the admin feed")
    parser.add_argument(
        "--feed-url",
        default="http://localhost:8000",
        help="Admin feed base URL (default: http://localhost:8000)",
    )
    parser.add_argument("--admin-id", type=int, default=1)
    args = parser.parse_args()

    headers = {"X-Admin-Id": str(args.admin_id)}

    with httpx.Client(base_url=args.feed_url, headers=headers, timeout=10.0) as client:
        try:
            resp = client.get("/health")
        except httpx.ConnectError:
            print(f"Cannot connect to {args.feed_url}")
            print("Make sure the admin feed is running: python -m admin_feed")
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Admin feed unhealthy: {resp.text}")
            sys.exit(1)

        print(f"Admin feed healthy at {args.feed_url}\n")

        for event in EVENTS:
            resp = client.post(f"{BASE}/events", json=event)
            body = resp.json()

            if resp.status_code == 201:
                print(f"  {event['event_type']:26s}  -> id={body['notificationId']}")
            else:
                print(f"  {event['event_type']:26s}  -> ERROR {resp.status_code}: {body}")

        feed = client.get(f"{BASE}/", params={"limit": 10}).json()

    print(f"\nFeed ({feed['unreadCount']} unread):")
    for n in feed["notifications"]:
        print(f"  [{n['priority_level']:8s}] {n['title']}")


if __name__ == "__main__":
    main()
