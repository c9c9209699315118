import unittest

from core.paths import has_common_element, normalize_path, paths_overlap


class NormalizePathTests(unittest.TestCase):
    def test_splits_strips_and_sorts(self):
        self.assertEqual(
            normalize_path(" chart1/values.yaml ,chart1/default.yaml"),
            ["chart1/default.yaml", "chart1/values.yaml"],
        )

    def test_single_path(self):
        self.assertEqual(normalize_path("chart1/values.yaml"), ["chart1/values.yaml"])


class HasCommonElementTests(unittest.TestCase):
    def test_detects_shared_element(self):
        self.assertTrue(has_common_element(["a", "b"], ["c", "b"]))

    def test_disjoint_lists(self):
        self.assertFalse(has_common_element(["a"], ["b"]))
        self.assertFalse(has_common_element([], ["b"]))


class PathsOverlapTests(unittest.TestCase):
    def test_shared_segment_overlaps(self):
        self.assertTrue(paths_overlap("a, b", "b, c"))

    def test_disjoint_segments_do_not_overlap(self):
        self.assertFalse(paths_overlap("a, b", "c, d"))

    def test_empty_path_never_overlaps(self):
        self.assertFalse(paths_overlap("", "x"))
        self.assertFalse(paths_overlap("x", ""))
        self.assertFalse(paths_overlap("", ""))

    def test_whitespace_only_path_never_overlaps(self):
        self.assertFalse(paths_overlap("  ", "a"))

    def test_empty_segments_compare_like_any_other(self):
        self.assertTrue(paths_overlap("a,", "b,"))
        self.assertTrue(paths_overlap("x, , y", "z, "))

    def test_order_and_spacing_do_not_matter(self):
        self.assertTrue(
            paths_overlap(
                "chart2/values.yaml, chart2/default.yaml",
                "chart2/default.yaml,chart2/values.yaml",
            )
        )

    def test_partial_path_is_not_a_match(self):
        self.assertFalse(paths_overlap("chart1/values.yaml", "values.yaml"))


if __name__ == "__main__":
    unittest.main()
