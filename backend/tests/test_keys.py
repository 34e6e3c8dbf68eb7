import unittest

from workflow_board.utils.keys import normalize_status_key


class TestNormalizeStatusKey(unittest.TestCase):
    def test_spaces_become_underscores(self) -> None:
        self.assertEqual(normalize_status_key("In Review"), "IN_REVIEW")

    def test_separator_runs_collapse(self) -> None:
        self.assertEqual(normalize_status_key("in -_ review"), "IN_REVIEW")
        self.assertEqual(normalize_status_key("ready--for__qa"), "READY_FOR_QA")
        self.assertEqual(normalize_status_key("to\tdo"), "TO_DO")

    def test_casing_and_separators_agree(self) -> None:
        self.assertEqual(normalize_status_key("in_review"), normalize_status_key("In Review"))
        self.assertEqual(normalize_status_key("IN-REVIEW"), normalize_status_key("In Review"))

    def test_edges_are_not_trimmed(self) -> None:
        # Leading/trailing separators collapse like any other run
        self.assertEqual(normalize_status_key(" Done "), "_DONE_")

    def test_reapplying_is_a_no_op(self) -> None:
        key = normalize_status_key("Waiting on  customer")
        self.assertEqual(key, "WAITING_ON_CUSTOMER")
        self.assertEqual(normalize_status_key(key), key)


if __name__ == "__main__":
    unittest.main()
