import unittest

from support import make_app, drop_app
from taskboard.errors import NotFoundError, ValidationError
from taskboard.extensions import db
from taskboard.models import Task
from taskboard.services.repository import TaskRepository
from taskboard.services.seed import seed_tasks


class TaskRepositoryTestCase(unittest.TestCase):
    def setUp(self):
        self.app = make_app()
        self.ctx = self.app.app_context()
        self.ctx.push()
        self.repo = TaskRepository(db.session)

    def tearDown(self):
        self.ctx.pop()
        drop_app(self.app)

    def test_save_new_task_assigns_id(self):
        task = self.repo.save({"title": "Write tests"})
        self.assertIsNotNone(task.id)
        self.assertEqual(self.repo.count(), 1)
        self.assertFalse(task.completed)

    def test_save_unsaved_instance_inserts(self):
        task = self.repo.save(Task(title="  Padded  "))
        self.assertEqual(task.title, "Padded")
        self.assertEqual(self.repo.count(), 1)

    def test_save_empty_title_leaves_store_unchanged(self):
        self.repo.save({"title": "Existing"})
        for title in ("", "   ", None):
            with self.assertRaises(ValidationError) as cm:
                self.repo.save({"title": title})
            self.assertEqual(cm.exception.model_state, {"title": "Should not be empty"})
        self.assertEqual(self.repo.count(), 1)

    def test_update_with_empty_title_keeps_old_value(self):
        task = self.repo.save({"title": "Keep me"})
        with self.assertRaises(ValidationError):
            self.repo.save({"id": task.id, "title": ""})
        self.assertEqual(self.repo.find_id(task.id).title, "Keep me")

    def test_save_existing_updates(self):
        task = self.repo.save({"title": "Before"})
        saved = self.repo.save({"id": task.id, "title": "After", "completed": True})
        self.assertEqual(saved.id, task.id)
        self.assertEqual(saved.title, "After")
        self.assertTrue(saved.completed)
        self.assertEqual(self.repo.count(), 1)

    def test_save_rejects_non_boolean_completed(self):
        with self.assertRaises(ValidationError):
            self.repo.save({"title": "Task", "completed": "yes"})
        self.assertEqual(self.repo.count(), 0)

    def test_save_missing_id_is_not_found(self):
        with self.assertRaises(NotFoundError):
            self.repo.save({"id": 999, "title": "Ghost"})

    def test_delete(self):
        task = self.repo.save({"title": "Doomed"})
        self.repo.delete(task)
        self.assertEqual(self.repo.count(), 0)
        with self.assertRaises(NotFoundError):
            self.repo.delete(task.id)

    def test_find_filters_and_limits(self):
        self.repo.insert([
            {"title": "one"},
            {"title": "two", "completed": True},
            {"title": "three"},
        ])
        incomplete = self.repo.find(where={"completed": False})
        self.assertEqual([t.title for t in incomplete], ["one", "three"])
        self.assertTrue(all(not t.completed for t in incomplete))

        self.assertEqual(len(self.repo.find()), 3)
        self.assertEqual(len(self.repo.find(limit=2)), 2)
        self.assertEqual([t.title for t in self.repo.find(limit=2, page=2)], ["three"])
        self.assertEqual(self.repo.count(where={"completed": True}), 1)

    def test_find_orders(self):
        self.repo.insert([{"title": "b", "completed": True}, {"title": "a"}, {"title": "c"}])
        tasks = self.repo.find(order_by={"completed": "asc"})
        self.assertEqual([t.title for t in tasks], ["a", "c", "b"])
        tasks = self.repo.find(order_by={"title": "desc"})
        self.assertEqual([t.title for t in tasks], ["c", "b", "a"])

    def test_find_rejects_unknown_fields(self):
        with self.assertRaises(ValidationError):
            self.repo.find(order_by={"priority": "asc"})
        with self.assertRaises(ValidationError):
            self.repo.find(order_by={"title": "sideways"})
        with self.assertRaises(ValidationError):
            self.repo.find(where={"owner": "me"})

    def test_page_requires_limit(self):
        self.repo.insert([{"title": "a"}, {"title": "b"}])
        with self.assertRaises(ValidationError):
            self.repo.find(page=2)

    def test_insert_is_all_or_nothing(self):
        with self.assertRaises(ValidationError):
            self.repo.insert([{"title": "fine"}, {"title": ""}])
        self.assertEqual(self.repo.count(), 0)

    def test_seed_only_when_empty(self):
        self.assertEqual(seed_tasks(self.repo), 5)
        self.assertEqual(seed_tasks(self.repo), 0)
        self.assertEqual(self.repo.count(), 5)
        self.assertEqual(self.repo.count(where={"completed": True}), 2)


if __name__ == '__main__':
    unittest.main()
