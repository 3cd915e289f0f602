import math
import unittest
import pandas as pd
import strutils.series
from strutils.pipeline import Pipeline, PipelineCatalog

class TestAccessor(unittest.TestCase):
    def setUp(self):
        self.towns = pd.Series(['  Portland ', 'T4/R3\tTWP', None], index=['a', 'b', 'c'], name='town', dtype=object)

    def test_strip(self):
        result = self.towns.strutils.strip()
        self.assertEqual(result.tolist()[:2], ['Portland', 'T4/R3\tTWP'])
        self.assertIsNone(result['c'])

    def test_preserves_index_and_name(self):
        result = self.towns.strutils.upper()
        self.assertEqual(result.index.tolist(), ['a', 'b', 'c'])
        self.assertEqual(result.name, 'town')

    def test_operations(self):
        s = pd.Series(['hi', 'abcdef'], dtype=object)
        self.assertEqual(s.strutils.center(6, '*').tolist(), ['**hi**', 'abcdef'])
        self.assertEqual(s.strutils.rjust(3, '0').tolist(), ['0hi', 'abcdef'])
        self.assertEqual(s.strutils.ljust(3).tolist(), ['hi ', 'abcdef'])
        self.assertEqual(s.strutils.slice(1, -1).tolist(), ['', 'bcde'])
        self.assertEqual(s.strutils.capitalize().tolist(), ['Hi', 'Abcdef'])
        self.assertEqual(s.strutils.replace('b', 'B').tolist(), ['hi', 'aBcdef'])

    def test_split_and_join(self):
        s = pd.Series(['a,b', ',c', ''], dtype=object)
        parts = s.strutils.split(',')
        self.assertEqual(parts.tolist(), [['a', 'b'], ['', 'c'], []])
        self.assertEqual(parts.strutils.join_lists('-').tolist(), ['a-b', '-c', ''])

    def test_join_lists_missing(self):
        s = pd.Series([['a', 'b'], None], dtype=object)
        self.assertEqual(s.strutils.join_lists('-').tolist(), ['a-b', None])

    def test_expand_tabs(self):
        self.assertEqual(self.towns.strutils.expand_tabs(8)['b'], 'T4/R3   TWP')

    def test_edit_distance(self):
        s = pd.Series(['kitten', 'SITTING'], dtype=object)
        self.assertEqual(s.strutils.edit_distance('sitting').tolist(), [3, 7])
        self.assertEqual(s.strutils.edit_distance('sitting', ignorecase=True).tolist(), [3, 0])

    def test_none_stays_none(self):
        s = pd.Series([' a ', None], dtype=object)
        for result in (s.strutils.strip(), s.strutils.split(','), s.strutils.edit_distance('a'), s.strutils.pipeline('slug')):
            with self.subTest(values=result.tolist()):
                self.assertIsNone(result[1])

    def test_edit_distance_integers(self):
        result = pd.Series(['kitten', 'a'], dtype=object).strutils.edit_distance('sitting')
        self.assertEqual(result.dtype, 'int64')
        self.assertEqual(result.tolist(), [3, 7])

    def test_edit_distance_with_missing(self):
        result = pd.Series(['ab', None], dtype=object).strutils.edit_distance('a')
        self.assertEqual(result[0], 1)
        self.assertIsInstance(result[0], int)
        self.assertIsNone(result[1])

    def test_missing_values_propagate(self):
        s = pd.Series(['abc', float('nan')], dtype=object)
        result = s.strutils.lower()
        self.assertEqual(result[0], 'abc')
        self.assertTrue(math.isnan(result[1]))

    def test_apply_by_name(self):
        self.assertEqual(self.towns.strutils.apply('lstrip')['a'], 'Portland ')
        with self.assertRaises(ValueError):
            self.towns.strutils.apply('join', '-')
        with self.assertRaises(ValueError):
            self.towns.strutils.apply('squish')

    def test_pipeline(self):
        s = pd.Series([' Cross Lake Twp '], dtype=object)
        self.assertEqual(s.strutils.pipeline('slug').tolist(), ['cross-lake-twp'])

    def test_pipeline_custom_catalog(self):
        catalog = PipelineCatalog([Pipeline.from_config('pad', [{'rjust': {'width': 3, 'fill': '0'}}])])
        s = pd.Series(['7', '42'], dtype=object)
        self.assertEqual(s.strutils.pipeline('pad', catalog=catalog).tolist(), ['007', '042'])
        with self.assertRaises(KeyError):
            s.strutils.pipeline('slug', catalog=catalog)

class TestDistanceMatrix(unittest.TestCase):
    def test_distance_matrix(self):
        matrix = strutils.series.distance_matrix(['kitten', 'flaw'], ['sitting', 'lawn', 'kitten'])
        self.assertEqual(matrix.shape, (2, 3))
        self.assertEqual(matrix.index.tolist(), ['kitten', 'flaw'])
        self.assertEqual(matrix.columns.tolist(), ['sitting', 'lawn', 'kitten'])
        self.assertEqual(matrix.loc['kitten'].tolist(), [3, 5, 0])
        self.assertEqual(int(matrix.loc['flaw', 'lawn']), 2)

    def test_ignorecase(self):
        matrix = strutils.series.distance_matrix(['ABC'], ['abc'], ignorecase=True)
        self.assertEqual(int(matrix.iloc[0, 0]), 0)

    def test_empty(self):
        matrix = strutils.series.distance_matrix([], ['a'])
        self.assertEqual(matrix.shape, (0, 1))
