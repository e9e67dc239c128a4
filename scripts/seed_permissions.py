#!/usr/bin/env python3
"""Seed default hotel permissions and grant them to the seeded roles.

Roles (ADMIN, SUPERVISOR, STAFF, CUSTOMER) are created by migration 001;
this script creates permissions through the API and assigns them in bulk.
Already existing permissions and grants are skipped.

Usage:
  export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080 \\
         SEED_USER=admin SEED_PASSWORD=...
  uv run python scripts/seed_permissions.py [--dry-run]
"""
from __future__ import annotations

import argparse
import os
import sys

import httpx

DEFAULT_PERMISSIONS = [
    ("hotels:read", "View hotels"),
    ("hotels:manage", "Create, edit and approve hotels"),
    ("rooms:read", "View rooms and availability"),
    ("rooms:manage", "Manage rooms, room types and pricing"),
    ("bookings:create", "Create bookings"),
    ("bookings:read", "View bookings"),
    ("bookings:manage", "Modify and cancel any booking"),
    ("payments:read", "View payments"),
    ("payments:refund", "Issue refunds"),
    ("reviews:create", "Write reviews"),
    ("reviews:moderate", "Moderate reviews"),
    ("users:manage", "Manage users"),
    ("roles:manage", "Manage role permissions"),
    ("audit:read", "View audit logs"),
]

ROLE_GRANTS = {
    "ADMIN": [name for name, _ in DEFAULT_PERMISSIONS],
    "SUPERVISOR": [
        "hotels:read", "hotels:manage", "rooms:read", "rooms:manage",
        "bookings:read", "bookings:manage", "payments:read", "payments:refund",
        "reviews:moderate", "audit:read",
    ],
    "STAFF": ["hotels:read", "rooms:read", "rooms:manage", "bookings:read", "bookings:manage"],
    "CUSTOMER": ["hotels:read", "rooms:read", "bookings:create", "bookings:read", "reviews:create"],
}


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def existing_permissions(client: httpx.Client, api_url: str) -> dict[str, int]:
    """Map permission name -> id for every permission already stored."""
    found: dict[str, int] = {}
    page = 1
    while True:
        r = client.get(f"{api_url}/v1/permissions", params={"page": page, "limit": 100})
        r.raise_for_status()
        data = r.json()
        found.update({p["name"]: p["id"] for p in data["items"]})
        if page >= data["pagination"]["pages"]:
            return found
        page += 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed default permissions")
    parser.add_argument("--dry-run", action="store_true", help="Print the plan without writing")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    keycloak_url = os.environ.get("KEYCLOAK_URL", "http://localhost:8080")
    realm = os.environ.get("KEYCLOAK_REALM", "hotelbook")
    client_id = os.environ.get("KEYCLOAK_CLIENT_ID", "hotelbook-api")
    client_secret = os.environ.get("KEYCLOAK_CLIENT_SECRET", "")
    user = os.environ.get("SEED_USER", "admin")
    password = os.environ.get("SEED_PASSWORD", "admin")

    if args.dry_run:
        for role, names in ROLE_GRANTS.items():
            print(f"{role}: {', '.join(names)}")
        return 0

    token = get_token(keycloak_url, realm, client_id, client_secret, user, password)
    headers = {"Authorization": f"Bearer {token}"}

    with httpx.Client(timeout=30.0, headers=headers) as client:
        ids = existing_permissions(client, api_url)
        for name, description in DEFAULT_PERMISSIONS:
            if name in ids:
                continue
            r = client.post(
                f"{api_url}/v1/permissions",
                json={"name": name, "description": description},
            )
            r.raise_for_status()
            ids[name] = r.json()["id"]
            print(f"Created permission {name}")

        r = client.get(f"{api_url}/v1/roles")
        r.raise_for_status()
        roles = {role["name"]: role["id"] for role in r.json()["items"]}

        for role_name, names in ROLE_GRANTS.items():
            role_id = roles.get(role_name)
            if role_id is None:
                print(f"Role {role_name} missing - run migrations first", file=sys.stderr)
                return 1
            r = client.post(
                f"{api_url}/v1/role-permissions/role/{role_id}/permissions",
                json={"permission_ids": [ids[n] for n in names]},
            )
            if r.status_code == 400 and r.json().get("kind") == "conflict":
                print(f"{role_name}: already up to date")
                continue
            r.raise_for_status()
            print(f"{role_name}: assigned {r.json()['assigned_count']} permissions")

    return 0


if __name__ == "__main__":
    sys.exit(main())
