import os
from unittest import TestCase
from unittest.mock import patch
from setmap import SetTrie, UnsortedKeyError, settings


class SettingsTests(TestCase):
    def test_env_flag(self):
        for raw in ('1', 'true', 'True', ' yes ', 'on'):
            with patch.dict(os.environ, {'SETMAP_VALIDATE_KEYS': raw}):
                self.assertTrue(settings._env_flag('SETMAP_VALIDATE_KEYS'))
        for raw in ('0', 'false', 'no', ''):
            with patch.dict(os.environ, {'SETMAP_VALIDATE_KEYS': raw}):
                self.assertFalse(settings._env_flag('SETMAP_VALIDATE_KEYS'))
        with patch.dict(os.environ, clear=True):
            self.assertFalse(settings._env_flag('SETMAP_VALIDATE_KEYS'))

    def test_default_follows_settings(self):
        with patch.object(settings, 'VALIDATE_KEYS', True):
            self.assertTrue(SetTrie().validate_keys)
            self.assertFalse(SetTrie(validate_keys=False).validate_keys)
        with patch.object(settings, 'VALIDATE_KEYS', False):
            self.assertFalse(SetTrie().validate_keys)
            self.assertTrue(SetTrie(validate_keys=True).validate_keys)


class KeyValidationTests(TestCase):
    def setUp(self) -> None:
        self.subject = SetTrie[int, str](validate_keys=True)
        self.subject.insert([1, 2], 'a')
        return super().setUp()

    def test_sorted_keys_pass(self):
        self.subject.insert([], 'empty')
        self.subject.insert([0, 5, 9], 'b')
        self.assertListEqual(list(self.subject.subsets([0, 1, 2, 5, 9])), ['empty', 'b', 'a'])

    def test_unsorted_key_rejected(self):
        with self.assertRaises(UnsortedKeyError) as context:
            self.subject.insert([2, 1], 'b')
        self.assertEqual(context.exception.key, (2, 1))
        self.assertIsInstance(context.exception, ValueError)
        self.assertEqual(len(self.subject), 1)
        self.assertIsNone(self.subject._root.child_for(2))

    def test_duplicate_element_rejected(self):
        with self.assertRaises(UnsortedKeyError):
            self.subject.insert([1, 1], 'b')

    def test_unsorted_query_rejected(self):
        with self.assertRaises(UnsortedKeyError):
            self.subject.subsets([2, 1])
        with self.assertRaises(UnsortedKeyError):
            self.subject.supersets([3, 1])
        with self.assertRaises(UnsortedKeyError):
            self.subject.contains([2, 1])
        self.subject.insert([3], 'c')

    def test_chained_entry_validates_full_key(self):
        entry = self.subject.entry([1, 2])
        with self.assertRaises(UnsortedKeyError):
            entry.entry([0])
        self.assertEqual(entry.entry([3]).or_insert('d'), 'd')
        self.assertTrue(self.subject.contains([1, 2, 3]))
