"""
Basic trellokit usage example.

This example demonstrates the organization collections:
- Lazy loading and filtering a member's organizations
- Lookup by id, name or display name
- Creating an organization

Run with:
    TRELLO_APP_KEY=... TRELLO_USER_TOKEN=... python examples/basic_usage.py
"""

import asyncio

from trellokit import OrganizationFilter, TrelloClient, TrelloValidationError


async def main():
    # Create client (loads config from .env / TRELLO_* variables)
    trello = await TrelloClient.create()

    try:
        # =================================================================
        # 1. List my organizations
        # =================================================================
        print("Loading organizations...")

        orgs = trello.me().organizations
        orgs.set_filter(OrganizationFilter.MEMBERS)

        for org in await orgs.list():
            print(f"  {org.display_name} (name: {org.name}, id: {org.id})")

        # =================================================================
        # 2. Look up by key (case-sensitive, no request)
        # =================================================================
        if len(orgs):
            first = orgs[0]
            assert orgs[first.display_name] is first
            print(f"\nFound by display name: {first.id}")

        # =================================================================
        # 3. Create an organization
        # =================================================================
        try:
            await orgs.add("   ")
        except TrelloValidationError as e:
            print(f"\nRejected before sending: {e}")

        new_org = await orgs.add("trellokit-example")
        print(f"\nCreated: {new_org.id}")

        # Not listed until the collection is refreshed
        assert orgs[new_org.id] is None
        await orgs.refresh()
        print(f"Listed after refresh: {orgs[new_org.id] is new_org}")

        # Clean up
        await new_org.delete()

        # =================================================================
        # 4. Another member's public organizations
        # =================================================================
        public = trello.member("trello").organizations
        public.set_filter(OrganizationFilter.PUBLIC)
        print(f"\nPublic organizations of 'trello': {len(await public.list())}")

    finally:
        await trello.close()


if __name__ == "__main__":
    asyncio.run(main())
