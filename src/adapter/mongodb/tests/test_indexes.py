"""Tests for MongoDB index helpers."""

import unittest
from unittest.mock import MagicMock

from pymongo.errors import OperationFailure

from adapter.mongodb.indexes import create_index


class TestCreateIndex(unittest.TestCase):

    def setUp(self):
        self.collection = MagicMock()

    def test_creates_index(self):
        create_index(self.collection, [('email', 1)], 'idx_users_email', unique=True)

        self.collection.create_index.assert_called_once_with(
            [('email', 1)], name='idx_users_email', unique=True,
        )
        self.collection.drop_index.assert_not_called()

    def test_replaces_same_name_index_with_other_options(self):
        """A pre-existing non-unique email index is replaced by the unique one."""
        self.collection.create_index.side_effect = [
            OperationFailure("An existing index has the same name as the requested index", code=86),
            'idx_users_email',
        ]
        self.collection.index_information.return_value = {
            '_id_': {'key': [('_id', 1)]},
            'idx_users_email': {'key': [('email', 1)]},
        }

        create_index(self.collection, [('email', 1)], 'idx_users_email', unique=True)

        self.collection.drop_index.assert_called_once_with('idx_users_email')
        self.collection.create_index.assert_called_with(
            [('email', 1)], name='idx_users_email', unique=True,
        )
        self.assertEqual(self.collection.create_index.call_count, 2)

    def test_replaces_same_keys_index_with_other_name(self):
        self.collection.create_index.side_effect = [
            OperationFailure("Index already exists with a different name: email_1", code=85),
            'idx_users_email',
        ]
        self.collection.index_information.return_value = {
            '_id_': {'key': [('_id', 1)]},
            'email_1': {'key': [('email', 1)]},
        }

        create_index(self.collection, [('email', 1)], 'idx_users_email', unique=True)

        self.collection.drop_index.assert_called_once_with('email_1')

    def test_conflict_without_clashing_index_raises(self):
        self.collection.create_index.side_effect = OperationFailure("conflict", code=85)
        self.collection.index_information.return_value = {'_id_': {'key': [('_id', 1)]}}

        with self.assertRaises(OperationFailure):
            create_index(self.collection, [('email', 1)], 'idx_users_email')
        self.collection.drop_index.assert_not_called()

    def test_other_errors_propagate(self):
        """Message text mentioning a conflict is not enough; only the server code counts."""
        self.collection.create_index.side_effect = OperationFailure("Conflict: not authorized", code=13)

        with self.assertRaises(OperationFailure):
            create_index(self.collection, [('email', 1)], 'idx_users_email')
        self.collection.drop_index.assert_not_called()


if __name__ == '__main__':
    unittest.main()
