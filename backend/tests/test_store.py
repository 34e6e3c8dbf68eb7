import unittest

from sqlalchemy import or_

from workflow_board.models import CustomColumn, WorkflowStatus
from workflow_board.services.store import EntityStore, EntityStores, NotFoundError

from db_case import DatabaseTestCase, WORKFLOW_ID, WORKSPACE_ID


class TestEntityStore(DatabaseTestCase):
    async def test_create_assigns_id(self) -> None:
        store = EntityStore(self.db, CustomColumn)
        column = await store.create(workspace_id=WORKSPACE_ID, name="Backlog", position=1000)

        self.assertTrue(column.id)
        fetched = await store.get(column.id)
        self.assertEqual(fetched.name, "Backlog")

    async def test_get_missing_raises(self) -> None:
        store = EntityStore(self.db, CustomColumn)
        with self.assertRaises(NotFoundError) as ctx:
            await store.get("missing")
        self.assertEqual(ctx.exception.collection, "custom_columns")
        self.assertEqual(ctx.exception.entity_id, "missing")

    async def test_list_with_or_filter(self) -> None:
        await self.add_status("In Review", 0)
        await self.add_status("Review Pending", 1, key="IN_REVIEW")
        await self.add_status("Done", 2)

        store = EntityStore(self.db, WorkflowStatus)
        matches = await store.list(
            WorkflowStatus.workflow_id == WORKFLOW_ID,
            or_(WorkflowStatus.name == "In Review", WorkflowStatus.key == "IN_REVIEW"),
            order_by=WorkflowStatus.position,
        )
        self.assertEqual([s.name for s in matches], ["In Review", "Review Pending"])

    async def test_list_order_and_limit(self) -> None:
        await self.add_status("A", 2)
        await self.add_status("B", 9)
        await self.add_status("C", 5)

        store = EntityStore(self.db, WorkflowStatus)
        top = await store.list(
            WorkflowStatus.workflow_id == WORKFLOW_ID,
            order_by=WorkflowStatus.position.desc(),
            limit=1,
        )
        self.assertEqual([s.name for s in top], ["B"])

    async def test_update_and_delete(self) -> None:
        stores = EntityStores(self.db)
        column = await stores.columns.create(workspace_id=WORKSPACE_ID, name="Old", position=1000)

        updated = await stores.columns.update(column.id, {"name": "New"})
        self.assertEqual(updated.name, "New")

        await stores.columns.delete(column.id)
        with self.assertRaises(NotFoundError):
            await stores.columns.delete(column.id)
        with self.assertRaises(NotFoundError):
            await stores.columns.update(column.id, {"name": "Again"})


if __name__ == "__main__":
    unittest.main()
